"""
Lunar Lander - Physics and Rendering

Point-mass lander driven by gravity and a single rotatable thruster:
- Euler force integration, one step per tick, mass normalised to 1
- Rotation set directly by the pilot, not integrated from torque
- Horizontal position held fixed; the terrain scrolls underneath instead
- Sprite drawing helper for the pygame host
"""

import math

import numpy as np

from lunar_config import PhysicsConfig, LANDER_WIDTH, LANDER_HEIGHT


# -------------------------------------------------
# Lunar Lander Class
# -------------------------------------------------
class LunarLander:
    """
    Lander state: position, velocity, rotation and thruster flag.

    Screen coordinates are used throughout, so +y points down and gravity
    is a positive y force. Rotation is in degrees, clockwise from vertical.
    """

    def __init__(self, position, config=None, size=(LANDER_WIDTH, LANDER_HEIGHT)):
        """
        Args:
            position: (x, y) of the lander centre
            config: PhysicsConfig (defaults used if None)
            size: (width, height) of the unrotated bounding box
        """
        self.config = config if config is not None else PhysicsConfig()
        self.size = (float(size[0]), float(size[1]))

        self.position = np.array(position, dtype=np.float64)
        self.velocity = np.array(self.config.initial_velocity, dtype=np.float64)
        self.gravity_force = np.array([0.0, self.config.gravity])

        self.rotation = 0.0
        self.thrusters_on = False

    # -------------------------------------------------
    # Controls
    # -------------------------------------------------
    def rotate(self, delta_deg):
        """Turn by delta_deg degrees (positive = clockwise), kept in (-180, 180]."""
        rotation = (self.rotation + delta_deg) % 360.0
        if rotation > 180.0:
            rotation -= 360.0
        self.rotation = rotation

    def set_thrusters_on(self, on):
        self.thrusters_on = bool(on)

    # -------------------------------------------------
    # Physics
    # -------------------------------------------------
    def booster_force(self):
        """Thrust vector along the current heading, zero when the engine is off."""
        if not self.thrusters_on:
            return np.zeros(2)
        rad = math.radians(self.rotation)
        force = self.config.thruster_force
        return np.array([force * math.sin(rad), -force * math.cos(rad)])

    def update_position(self):
        """
        Advance one tick.

        Velocity absorbs the total force directly (fixed tick, unit mass).
        Only the vertical position moves; x stays where it was spawned.
        """
        total_force = self.gravity_force + self.booster_force()
        self.velocity += total_force

        new_y = self.position[1] + self.config.position_scale * self.velocity[1]
        self.position[1] = new_y

    @property
    def current_speed(self):
        """(vx, vy) as plain floats."""
        return float(self.velocity[0]), float(self.velocity[1])

    # -------------------------------------------------
    # Geometry
    # -------------------------------------------------
    def bounding_box(self):
        """
        Axis-aligned box around the centre, ignoring rotation.

        Returns:
            (left, top, width, height)
        """
        w, h = self.size
        return (float(self.position[0]) - w / 2, float(self.position[1]) - h / 2, w, h)

    def corners(self):
        """Box corners clockwise from top-left."""
        left, top, w, h = self.bounding_box()
        return [(left, top), (left + w, top), (left + w, top + h), (left, top + h)]


# -------------------------------------------------
# Drawing
# -------------------------------------------------
def draw_lander(surface, lander, sprite):
    """
    Draw the lander sprite rotated about its centre.

    Args:
        surface: Pygame surface
        lander: LunarLander instance
        sprite: Pygame surface already scaled to the lander size
    """
    import pygame

    # pygame rotates counter-clockwise for positive angles
    rotated = pygame.transform.rotate(sprite, -lander.rotation)
    cx, cy = lander.position
    rect = rotated.get_rect(center=(int(round(cx)), int(round(cy))))
    surface.blit(rotated, rect)
