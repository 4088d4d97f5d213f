"""
Lunar Lander HUD - Heads-Up Display Rendering

Manages all on-screen information display including:
- Telemetry (horizontal/vertical speed, angle, thruster state)
- Controls help
- Outcome message once the run has ended
"""

import pygame

from lunar_config import LandingConfig
from lunar_outcome import Outcome

CRASH_MESSAGE = "Oh no you crashed!"
LANDED_MESSAGE = "Good job commander, you landed the lunar lander!"


class LunarHUD:
    """Renders telemetry, help text and the outcome overlay."""

    def __init__(self, outcome_font, screen_width=800, screen_height=600, landing=None):
        """
        Initialize HUD renderer.

        Args:
            outcome_font: Loaded pygame font for the outcome message
            screen_width, screen_height: Current view size
            landing: LandingConfig used to colour-code speeds
        """
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.landing = landing if landing is not None else LandingConfig()

        # Fonts
        self.font_outcome = outcome_font
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_small = pygame.font.SysFont("consolas", 14)

        # Colors
        self.color_white = (255, 255, 255)
        self.color_green = (0, 255, 0)
        self.color_orange = (255, 165, 0)
        self.color_red = (255, 0, 0)
        self.color_gray = (150, 150, 150)

    def resize(self, screen_width, screen_height):
        self.screen_width = screen_width
        self.screen_height = screen_height

    def _speed_color(self, speed, limit):
        """Red over the limit, orange within a quarter of it, green otherwise."""
        if self.landing.symmetric_speed_check:
            speed = abs(speed)
        if speed > limit:
            return self.color_red
        if speed > 0.75 * limit:
            return self.color_orange
        return self.color_green

    def draw_telemetry(self, surface, lander):
        """
        Draw telemetry panel (top-right).

        Args:
            surface: Pygame surface
            lander: LunarLander to read speed and attitude from
        """
        vx, vy = lander.current_speed
        lines = [
            (f"Vh:  {vx:+9.0f}", self._speed_color(vx, self.landing.max_horizontal_speed)),
            (f"Vv:  {vy:+9.0f}", self._speed_color(vy, self.landing.max_vertical_speed)),
            (f"ANG: {lander.rotation:+6.1f}°", self.color_white),
            ("ENG: ON" if lander.thrusters_on else "ENG: OFF",
             self.color_orange if lander.thrusters_on else self.color_gray),
        ]

        x, y = self.screen_width - 180, 10
        line_height = 22
        for label, color in lines:
            text = self.font_medium.render(label, True, color)
            surface.blit(text, (x, y))
            y += line_height

    def draw_controls_help(self, surface):
        help_text = "LEFT/RIGHT=rotate  SPACE=thrust  ESC=quit"
        text = self.font_small.render(help_text, True, self.color_gray)
        text_rect = text.get_rect(centerx=self.screen_width // 2, bottom=self.screen_height - 5)
        surface.blit(text, text_rect)

    def draw_outcome(self, surface, outcome, reason=""):
        """
        Draw the end-of-run message (top-left).

        Args:
            surface: Pygame surface
            outcome: Outcome.CRASHED or Outcome.LANDED
            reason: Optional detail drawn under the message
        """
        if outcome is Outcome.LANDED:
            message, color = LANDED_MESSAGE, self.color_green
        elif outcome is Outcome.CRASHED:
            message, color = CRASH_MESSAGE, self.color_red
        else:
            return

        text = self.font_outcome.render(message, True, color)
        surface.blit(text, (0, 0))

        if reason:
            detail = self.font_small.render(reason, True, self.color_white)
            surface.blit(detail, (0, text.get_height() + 4))
