"""
Lunar Lander Assets

Loads the lander sprite and the outcome font. Both are required to start
the game; any failure is raised as AssetLoadError so the host can abort
with a clear message.
"""

import logging
import os

import pygame

logger = logging.getLogger(__name__)


class AssetLoadError(RuntimeError):
    """A required image or font could not be loaded."""

    def __init__(self, kind, path, cause=None):
        self.kind = kind
        self.path = path
        message = f"Error loading {kind} from '{path}'"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


def load_sprite(path, size):
    """
    Load an image and scale it to size.

    Args:
        path: Image file path
        size: (width, height) in pixels

    Returns:
        pygame.Surface with per-pixel alpha
    """
    if not os.path.isfile(path):
        raise AssetLoadError("lander texture", path, "file not found")
    try:
        image = pygame.image.load(path)
    except pygame.error as exc:
        raise AssetLoadError("lander texture", path, exc) from exc

    # convert_alpha() needs a display mode; headless callers get the raw image
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    logger.info("Loaded sprite %s (%dx%d)", path, *image.get_size())
    return pygame.transform.scale(image, (int(size[0]), int(size[1])))


def load_font(path, size, bold=True):
    """
    Load a TrueType font.

    Args:
        path: Font file path, or None for pygame's bundled default font
        size: Point size
        bold: Render in bold

    Returns:
        pygame.font.Font
    """
    if not pygame.font.get_init():
        pygame.font.init()
    if path is not None and not os.path.isfile(path):
        raise AssetLoadError("font", path, "file not found")
    try:
        font = pygame.font.Font(path, size)
    except (pygame.error, OSError) as exc:
        raise AssetLoadError("font", path or "<default>", exc) from exc
    font.set_bold(bold)
    return font
