"""
Logging Setup

One call configures the root logger for the game host; library modules
only create their own named loggers.
"""

import logging
import os

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level=logging.INFO, log_file=None):
    """
    Configures the root logger.

    Args:
        level (int): Root log level. Terrain generation logs every new point
                     at DEBUG, so INFO keeps the console readable.
        log_file (str): Optional path to write the log to instead of stderr.
    """
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    logging.basicConfig(
        filename=log_file,
        filemode='w',  # overwrite log on each run
        level=level,
        format=LOG_FORMAT,
    )

    logger = logging.getLogger(__name__)
    logger.debug("Logging initialized.")
