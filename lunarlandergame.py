"""
Lunar Lander Game - Arcade Style

Single-screen lunar lander:
- Terrain scrolls beneath a horizontally fixed lander
- LEFT/RIGHT rotate the lander, SPACE fires the thruster while held
- Touching the ground ends the run as a landing or a crash

Run with no arguments:  python lunarlandergame.py
"""

import logging
import os
import sys

import pygame

from lunar_assets import AssetLoadError, load_font, load_sprite
from lunar_config import SimulationConfig, TARGET_FPS
from lunar_hud import LunarHUD
from lunar_logging import setup_logging
from lunar_simulation import Command, LunarSimulation
from lunar_terrain import draw_terrain_pygame
from lunarlander import draw_lander

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Lunar lander"
BACKGROUND_COLOR = (0, 0, 0)
TERRAIN_COLOR = (255, 255, 255)

KEY_COMMANDS = {
    (pygame.KEYDOWN, pygame.K_LEFT): Command.ROTATE_LEFT,
    (pygame.KEYDOWN, pygame.K_RIGHT): Command.ROTATE_RIGHT,
    (pygame.KEYDOWN, pygame.K_SPACE): Command.THRUST_ON,
    (pygame.KEYUP, pygame.K_SPACE): Command.THRUST_OFF,
}


def command_for_event(event):
    """Map a pygame key event to a pilot Command, or None."""
    if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
        return None
    return KEY_COMMANDS.get((event.type, event.key))


def draw_frame(screen, sim, sprite, hud):
    """Draw one frame: lander, terrain, and the outcome once the run ended."""
    screen.fill(BACKGROUND_COLOR)
    draw_lander(screen, sim.lander, sprite)
    draw_terrain_pygame(screen, sim.terrain.points, TERRAIN_COLOR)
    hud.draw_telemetry(screen, sim.lander)
    hud.draw_controls_help(screen)

    if not sim.running:
        hud.draw_outcome(screen, sim.outcome, sim.reason)


# -------------------------------------------------
# Main Game
# -------------------------------------------------
def main(config=None):
    setup_logging()
    config = config if config is not None else SimulationConfig()

    print(f"{WINDOW_TITLE}")
    print(f"   View: {config.view_width}x{config.view_height} @ {TARGET_FPS} fps")
    print(f"   Gravity: {config.physics.gravity}, thruster: {config.physics.thruster_force}")
    print(f"   Landing limits: vx <= {config.landing.max_horizontal_speed}, "
          f"vy <= {config.landing.max_vertical_speed}")

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    screen = pygame.display.set_mode((config.view_width, config.view_height), pygame.RESIZABLE)
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()

    try:
        sprite = load_sprite(config.sprite_path, config.lander_size)
        font = load_font(config.font_path, config.font_size)
    except AssetLoadError as exc:
        logger.error("%s", exc)
        pygame.quit()
        return 1

    sim = LunarSimulation(config)
    hud = LunarHUD(font, config.view_width, config.view_height, config.landing)
    logger.info("Starting lunar lander")

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    screen = pygame.display.get_surface()
                    hud.resize(event.w, event.h)
                else:
                    command = command_for_event(event)
                    if command is not None:
                        sim.apply(command)

            draw_frame(screen, sim, sprite, hud)
            pygame.display.flip()

            sim.tick()
            clock.tick(TARGET_FPS)
    finally:
        logger.info("Game shutting down (%s after %d ticks)", sim.outcome.value, sim.ticks)
        pygame.quit()

    return 0


if __name__ == "__main__":
    sys.exit(main())
