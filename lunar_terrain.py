"""
Lunar Terrain Generation - Scrolling Polyline

Procedural ground for the lander, extended incrementally as the world
scrolls past a horizontally fixed lander.

Features:
- Jagged polyline with occasional flat steps to land on
- Heights clamped into a configurable band
- Leftward scroll proportional to the lander's horizontal velocity
- Optional pruning of points that scrolled far off the left edge
"""

import logging
import random
from collections import deque

from lunar_config import TerrainConfig

logger = logging.getLogger(__name__)


class LunarTerrain:
    """Generate and scroll the terrain polyline covering [0, view_width]."""

    def __init__(self, view_width, start_y, max_y, min_y, config=None, rng=None, seed=None,
                 points=None):
        """
        Initialize terrain and fill the visible width.

        Args:
            view_width: Width the polyline must always reach
            start_y: Height of the first point at x=0
            max_y: Largest allowed y (screen coordinates, lower ground)
            min_y: Smallest allowed y (higher ground)
            config: TerrainConfig (defaults used if None)
            rng: random.Random instance owned by this terrain
            seed: Seed for a new generator when rng is not given
            points: Optional fixed prefix of (x, y) points replacing the start point
        """
        if view_width <= 0:
            raise ValueError(f"view_width must be positive, got {view_width}")
        if min_y > max_y:
            raise ValueError(f"min_y {min_y} exceeds max_y {max_y}")

        self.view_width = view_width
        self.max_y = max_y
        self.min_y = min_y
        self.config = config if config is not None else TerrainConfig()
        self.rng = rng if rng is not None else random.Random(seed)

        if points is None:
            points = [(0.0, start_y)]
        elif not points:
            raise ValueError("Need at least one terrain point")
        self._points = deque((float(x), float(y)) for x, y in points)
        self.generate()

    @classmethod
    def from_points(cls, points, view_width, max_y, min_y, config=None, rng=None, seed=None):
        """
        Build terrain starting from a fixed prefix of points.

        Generation continues from the last given point, so the view is
        still covered even when the prefix is short.
        """
        if not points:
            raise ValueError("Need at least one terrain point")
        return cls(view_width, points[0][1], max_y, min_y, config=config, rng=rng, seed=seed,
                   points=points)

    # -------------------------------------------------
    # Polyline access
    # -------------------------------------------------
    @property
    def points(self):
        """List of (x, y) tuples, left to right."""
        return list(self._points)

    def __len__(self):
        return len(self._points)

    def segments(self):
        """Yield consecutive (start, end) point pairs, left to right."""
        it = iter(self._points)
        prev = next(it, None)
        for pt in it:
            yield prev, pt
            prev = pt

    def height_at(self, x):
        """Ground height under x (see get_terrain_height_at)."""
        return get_terrain_height_at(x, self._points)

    # -------------------------------------------------
    # Per-tick update
    # -------------------------------------------------
    def update(self, x_velocity):
        """
        Scroll the terrain left and top it up to the view width.

        Args:
            x_velocity: Lander horizontal velocity (raw units)
        """
        shift = self.config.scroll_factor * x_velocity
        self._points = deque((x - shift, y) for x, y in self._points)

        if self.config.prune_offscreen:
            self._prune()

        self.generate()

    def generate(self):
        """Append points until the last one reaches the view width."""
        cfg = self.config
        x_lo, x_hi = cfg.x_step
        y_lo, y_hi = cfg.y_step

        while self._points[-1][0] < self.view_width:
            last_x, last_y = self._points[-1]

            flat = self.rng.randint(0, cfg.flat_odds - 1) == 0
            delta_y = 0 if flat else self.rng.randint(y_lo, y_hi)
            new_x = last_x + self.rng.randint(x_lo, x_hi)
            new_y = max(self.min_y, min(last_y + delta_y, self.max_y))

            logger.debug("new terrain point (%.2f, %.2f), delta %d, bounds %s/%s",
                         new_x, new_y, delta_y, self.min_y, self.max_y)
            self._add_point(new_x, new_y)

    def _add_point(self, x, y):
        self._points.append((x, y))

    def _prune(self):
        """Drop leading points while the next one is also past the margin."""
        limit = -self.config.prune_margin
        dropped = 0
        while len(self._points) > 1 and self._points[1][0] <= limit:
            self._points.popleft()
            dropped += 1
        if dropped:
            logger.debug("pruned %d off-screen terrain points", dropped)


# -------------------------------------------------
# Terrain utility functions
# -------------------------------------------------
def get_terrain_height_at(x, terrain_points):
    """
    Get terrain height at specific x coordinate via linear interpolation.

    Args:
        x: X coordinate
        terrain_points: Sequence of (x, y) tuples

    Returns:
        Interpolated height at x, clamped to the end points outside the polyline
    """
    if not terrain_points:
        return 0.0

    first, last = terrain_points[0], terrain_points[-1]
    if x < first[0]:
        return first[1]
    if x > last[0]:
        return last[1]

    prev = None
    for pt in terrain_points:
        if prev is not None and prev[0] <= x <= pt[0]:
            x1, y1 = prev
            x2, y2 = pt
            t = (x - x1) / (x2 - x1) if x2 != x1 else 0
            return y1 + t * (y2 - y1)
        prev = pt

    return last[1]


def draw_terrain_pygame(surface, terrain_points, color=(255, 255, 255), width=1):
    """
    Draw terrain as connected line segments.

    Args:
        surface: Pygame surface
        terrain_points: Sequence of (x, y) tuples in screen coordinates
        color: Line colour
        width: Line width in pixels
    """
    import pygame

    if len(terrain_points) > 1:
        pygame.draw.lines(surface, color, False, list(terrain_points), width)
