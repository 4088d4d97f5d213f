import logging
import os
import tempfile
import unittest

import lunar_logging
from lunar_logging import setup_logging


class TestSetupLogging(unittest.TestCase):
    def test_module_is_documented(self):
        self.assertIn("root logger", lunar_logging.__doc__)

    def test_log_directory_is_created(self):
        with tempfile.TemporaryDirectory() as tmp:
            log_file = os.path.join(tmp, "logs", "lander.log")
            try:
                setup_logging(logging.INFO, log_file)
                self.assertTrue(os.path.isdir(os.path.dirname(log_file)))
            finally:
                root = logging.getLogger()
                for handler in list(root.handlers):
                    if getattr(handler, "baseFilename", "").startswith(tmp):
                        root.removeHandler(handler)
                        handler.close()


if __name__ == "__main__":
    unittest.main()
