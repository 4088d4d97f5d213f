"""
Lunar Lander Gymnasium Environment
Headless wrapper around LunarSimulation for scripted or automated play.

State space (5 dimensions):
    0: clearance between the lander's bottom edge and the ground below it (/ view height)
    1: x velocity (/ max horizontal landing speed)
    2: y velocity (/ max vertical landing speed)
    3: rotation (degrees / 180)
    4: thrusters on (1) or off (0)

Action space (5 discrete actions):
    0: No operation
    1: Rotate LEFT by one rotation step
    2: Rotate RIGHT by one rotation step
    3: Thrusters ON
    4: Thrusters OFF

Each step is exactly one simulation tick. Reward is +1 on landing,
-1 on crashing and 0 otherwise.
"""

import logging
import random

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from lunar_config import SimulationConfig, TARGET_FPS
from lunar_outcome import Outcome
from lunar_simulation import Command, LunarSimulation

logger = logging.getLogger(__name__)

ACTION_COMMANDS = {
    0: None,
    1: Command.ROTATE_LEFT,
    2: Command.ROTATE_RIGHT,
    3: Command.THRUST_ON,
    4: Command.THRUST_OFF,
}

OUTCOME_REWARDS = {
    Outcome.RUNNING: 0.0,
    Outcome.CRASHED: -1.0,
    Outcome.LANDED: 1.0,
}


class LunarLanderEnv(gym.Env):
    """
    Gymnasium environment for the scrolling lunar lander.

    Wraps one LunarSimulation per episode; terrain randomness is seeded
    from the environment's np_random so reset(seed=...) is reproducible.
    """

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": TARGET_FPS}

    def __init__(self, render_mode=None, config=None, max_episode_steps=200000):
        """
        Initialize the lander environment.

        Args:
            render_mode: "human" for a pygame window, "rgb_array" for image output, None for headless
            config: SimulationConfig shared by every episode
            max_episode_steps: Steps before the episode is truncated
        """
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render_mode {render_mode!r}")

        self.render_mode = render_mode
        self.config = config if config is not None else SimulationConfig()
        self.max_episode_steps = max_episode_steps

        self.action_space = spaces.Discrete(len(ACTION_COMMANDS))
        self.observation_space = spaces.Box(
            low=np.array([-np.inf, -np.inf, -np.inf, -np.inf, 0.0], dtype=np.float32),
            high=np.array([np.inf, np.inf, np.inf, np.inf, 1.0], dtype=np.float32),
            dtype=np.float32,
        )

        self.sim = None
        self.steps = 0

        # Rendering (lazy)
        self.screen = None
        self.clock = None
        self.sprite = None

    def reset(self, seed=None, options=None):
        """
        Start a new landing attempt.

        Returns:
            observation: Initial state
            info: Additional information
        """
        super().reset(seed=seed)

        terrain_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.sim = LunarSimulation(self.config, rng=random.Random(terrain_seed))
        self.steps = 0

        return self._get_observation(), self._get_info()

    def step(self, action):
        """
        Execute one tick.

        Args:
            action: Integer action (0-4)

        Returns:
            observation, reward, terminated, truncated, info
        """
        assert self.action_space.contains(action), f"Invalid action {action}"
        if self.sim is None:
            raise RuntimeError("Call reset() before step()")

        command = ACTION_COMMANDS[int(action)]
        if command is not None:
            self.sim.apply(command)

        outcome = self.sim.tick()
        self.steps += 1

        terminated = outcome.finished
        truncated = not terminated and self.steps >= self.max_episode_steps
        reward = OUTCOME_REWARDS[outcome]

        if terminated:
            logger.info("Episode ended at step %d: %s (%s)", self.steps, outcome.value, self.sim.reason)

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def _get_observation(self):
        lander = self.sim.lander
        landing = self.config.landing
        _, top, _, height = lander.bounding_box()
        ground_y = self.sim.terrain.height_at(float(lander.position[0]))
        clearance = ground_y - (top + height)
        vx, vy = lander.current_speed

        return np.array([
            clearance / self.config.view_height,
            vx / landing.max_horizontal_speed,
            vy / landing.max_vertical_speed,
            lander.rotation / 180.0,
            1.0 if lander.thrusters_on else 0.0,
        ], dtype=np.float32)

    def _get_info(self):
        vx, vy = self.sim.lander.current_speed
        return {
            "outcome": self.sim.outcome.value,
            "reason": self.sim.reason,
            "ticks": self.sim.ticks,
            "velocity": (vx, vy),
            "rotation": self.sim.lander.rotation,
            "terrain_points": len(self.sim.terrain),
        }

    def render(self):
        """Render the current frame with the game's drawing helpers."""
        if self.render_mode is None or self.sim is None:
            return None

        import pygame
        from lunar_assets import load_sprite
        from lunar_terrain import draw_terrain_pygame
        from lunarlander import draw_lander

        size = (self.config.view_width, self.config.view_height)
        if self.screen is None:
            pygame.init()
            if self.render_mode == "human":
                pygame.display.set_caption("Lunar lander - environment")
                self.screen = pygame.display.set_mode(size)
            else:
                self.screen = pygame.Surface(size)
            self.clock = pygame.time.Clock()
            self.sprite = load_sprite(self.config.sprite_path, self.config.lander_size)

        if self.render_mode == "human":
            # Keep the window responsive
            pygame.event.pump()

        self.screen.fill((0, 0, 0))
        draw_lander(self.screen, self.sim.lander, self.sprite)
        draw_terrain_pygame(self.screen, self.sim.terrain.points)

        if self.render_mode == "human":
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        return np.transpose(pygame.surfarray.array3d(self.screen), axes=(1, 0, 2))

    def close(self):
        """Clean up resources."""
        if self.screen is not None:
            import pygame
            pygame.quit()
            self.screen = None
            self.clock = None
            self.sprite = None


def register_lunar_env():
    """Register the lunar lander environment with Gymnasium."""
    from gymnasium.envs.registration import register, registry

    if "LunarScroller-v0" in registry:
        return
    register(
        id="LunarScroller-v0",
        entry_point="lunar_lander_env:LunarLanderEnv",
    )


if __name__ == "__main__":
    env = LunarLanderEnv(render_mode=None)
    obs, info = env.reset(seed=0)
    print(f"Initial observation: {obs}")

    total_reward = 0.0
    for i in range(1000):
        obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
        total_reward += reward
        if terminated or truncated:
            print(f"Episode ended at step {i + 1}: {info['outcome']}")
            break

    print(f"Total reward: {total_reward:.2f}")
    print(f"Final info: {info}")
    env.close()
