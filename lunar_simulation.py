"""
Lunar Simulation - Tick Sequencing

Owns the terrain, the lander and the run outcome, and advances them one
tick per rendered frame:

    input commands -> lander physics -> terrain scroll -> collision -> outcome

Once a collision has been classified the run is frozen: further ticks and
commands are ignored while the host keeps drawing the final frame.
"""

import enum
import logging
import random

from lunar_collision import check_collision
from lunar_config import SimulationConfig
from lunar_outcome import Outcome, classify_landing
from lunar_terrain import LunarTerrain
from lunarlander import LunarLander

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Pilot inputs, applied before the next physics step."""
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    THRUST_ON = "thrust_on"
    THRUST_OFF = "thrust_off"


class LunarSimulation:
    """Single-threaded simulation of one landing attempt."""

    def __init__(self, config=None, rng=None, seed=None, terrain=None, lander=None):
        """
        Args:
            config: SimulationConfig (defaults used if None)
            rng: random.Random handed to the terrain generator
            seed: Seed for a new generator when rng is not given
            terrain: Prebuilt LunarTerrain (generated from config if None);
                cannot be combined with rng or seed
            lander: Prebuilt LunarLander (spawned from config if None)
        """
        if terrain is not None and (rng is not None or seed is not None):
            raise ValueError("rng and seed only apply to generated terrain, not a prebuilt one")

        self.config = config if config is not None else SimulationConfig()
        cfg = self.config

        if terrain is None:
            start_y, max_y, min_y = cfg.terrain_bounds()
            terrain = LunarTerrain(
                cfg.view_width, start_y, max_y, min_y,
                config=cfg.terrain,
                rng=rng if rng is not None else random.Random(seed),
            )
        if lander is None:
            lander = LunarLander(cfg.spawn_position(), config=cfg.physics, size=cfg.lander_size)

        self.terrain = terrain
        self.lander = lander
        self.outcome = Outcome.RUNNING
        self.reason = ""
        self.collision = None
        self.ticks = 0

    @property
    def running(self):
        return self.outcome is Outcome.RUNNING

    def apply(self, command):
        """Apply one pilot command; ignored once the run is over."""
        if not self.running:
            return
        step = self.config.physics.rotation_step
        if command is Command.ROTATE_LEFT:
            self.lander.rotate(-step)
        elif command is Command.ROTATE_RIGHT:
            self.lander.rotate(step)
        elif command is Command.THRUST_ON:
            self.lander.set_thrusters_on(True)
        elif command is Command.THRUST_OFF:
            self.lander.set_thrusters_on(False)
        else:
            raise ValueError(f"Unknown command {command!r}")

    def tick(self):
        """
        Advance one frame.

        Returns:
            The outcome after this tick
        """
        if not self.running:
            return self.outcome

        self.lander.update_position()
        self.terrain.update(self.lander.current_speed[0])
        self.ticks += 1

        hit = check_collision(self.lander, self.terrain)
        if hit is not None:
            report = classify_landing(hit.start, hit.end, self.lander.current_speed,
                                      self.config.landing)
            self.outcome = report.outcome
            self.reason = report.reason
            self.collision = hit
            logger.info("run ended after %d ticks on segment %d: %s",
                        self.ticks, hit.index, self.outcome.value)

        return self.outcome

    def run(self, max_ticks):
        """Tick until the run ends or max_ticks have passed."""
        for _ in range(max_ticks):
            if self.tick() is not Outcome.RUNNING:
                break
        return self.outcome
