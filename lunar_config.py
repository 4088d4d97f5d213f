"""
Lunar Lander Configuration

Constants and configuration structures shared by the simulation core,
the pygame host and the gymnasium environment.

All constants are unit-less and tuned for a fixed tick rate of TARGET_FPS
ticks per second: one physics step per rendered frame, no delta time.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

# -------------------------------------------------
# Display / timing
# -------------------------------------------------
SCREEN_WIDTH, SCREEN_HEIGHT = 800, 600
TARGET_FPS = 60  # physics constants assume exactly one tick per frame

# -------------------------------------------------
# Physics (unit-less)
# -------------------------------------------------
GRAVITY = 4
THRUSTER_FORCE = 10
INITIAL_HORIZONTAL_SPEED = 200000
POSITION_SCALE = 0.00000001  # velocity -> pixels per tick
SCROLL_FACTOR = 0.00000001   # horizontal velocity -> terrain scroll per tick
ROTATION_STEP_DEG = 2

# -------------------------------------------------
# Landing limits
# -------------------------------------------------
MAX_HORIZONTAL_LANDING_SPEED = 70000
MAX_VERTICAL_LANDING_SPEED = 60000
FLATNESS_TOLERANCE = 2

# -------------------------------------------------
# Terrain generation
# -------------------------------------------------
TERRAIN_X_STEP = (20, 40)
TERRAIN_Y_STEP = (-80, 80)
TERRAIN_FLAT_ODDS = 5  # one step in five is flat

# -------------------------------------------------
# Assets
# -------------------------------------------------
ASSET_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
LANDER_SPRITE_PATH = os.path.join(ASSET_DIR, "lander.png")
LANDER_WIDTH, LANDER_HEIGHT = 32, 32


def _check_range(name, bounds):
    low, high = bounds
    if low > high:
        raise ValueError(f"{name} lower bound {low} exceeds upper bound {high}")


@dataclass(frozen=True)
class PhysicsConfig:
    """Force integration constants for the lander."""
    gravity: float = GRAVITY
    thruster_force: float = THRUSTER_FORCE
    initial_velocity: tuple = (INITIAL_HORIZONTAL_SPEED, 0.0)
    position_scale: float = POSITION_SCALE
    rotation_step: float = ROTATION_STEP_DEG


@dataclass(frozen=True)
class TerrainConfig:
    """
    Terrain generation parameters.

    Args:
        x_step: Inclusive integer range for the x distance between points
        y_step: Inclusive integer range for non-flat height changes
        flat_odds: A new step is flat with probability 1/flat_odds
        scroll_factor: Converts horizontal velocity into leftward scroll
        prune_offscreen: Drop points that have scrolled well past x=0
        prune_margin: Distance left of x=0 a segment must clear to be dropped
    """
    x_step: tuple = TERRAIN_X_STEP
    y_step: tuple = TERRAIN_Y_STEP
    flat_odds: int = TERRAIN_FLAT_ODDS
    scroll_factor: float = SCROLL_FACTOR
    prune_offscreen: bool = False
    prune_margin: float = 0.0

    def __post_init__(self):
        _check_range("x_step", self.x_step)
        _check_range("y_step", self.y_step)
        if self.x_step[0] <= 0:
            raise ValueError("x_step must be strictly positive so terrain always advances")
        if self.flat_odds < 1:
            raise ValueError("flat_odds must be at least 1")
        if self.prune_margin < 0:
            raise ValueError("prune_margin cannot be negative")


@dataclass(frozen=True)
class LandingConfig:
    """Thresholds used to tell a landing from a crash."""
    max_horizontal_speed: float = MAX_HORIZONTAL_LANDING_SPEED
    max_vertical_speed: float = MAX_VERTICAL_LANDING_SPEED
    flatness_tolerance: float = FLATNESS_TOLERANCE
    # Off: only rightward and downward speed count against the limits
    symmetric_speed_check: bool = False


@dataclass(frozen=True)
class SimulationConfig:
    """Everything a simulation instance needs, passed in at construction."""
    view_width: int = SCREEN_WIDTH
    view_height: int = SCREEN_HEIGHT
    lander_size: tuple = (LANDER_WIDTH, LANDER_HEIGHT)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    terrain: TerrainConfig = field(default_factory=TerrainConfig)
    landing: LandingConfig = field(default_factory=LandingConfig)
    sprite_path: str = LANDER_SPRITE_PATH
    font_path: Optional[str] = None  # None -> pygame's bundled default font
    font_size: int = 30

    def __post_init__(self):
        if self.view_width <= 0 or self.view_height <= 0:
            raise ValueError(f"View size must be positive, got {self.view_width}x{self.view_height}")
        if self.lander_size[0] <= 0 or self.lander_size[1] <= 0:
            raise ValueError(f"Lander size must be positive, got {self.lander_size}")

    def terrain_bounds(self):
        """
        Terrain layout derived from the view height.

        Returns:
            (start_y, max_y, min_y): ground starts three quarters down the
            view and stays between a fifth of the height and 20px above
            the bottom edge.
        """
        h = self.view_height
        return 3 * h // 4, h - 20, h // 5

    def spawn_position(self):
        """Lander starts centred horizontally, a third of the way down."""
        return self.view_width // 2, self.view_height // 3
