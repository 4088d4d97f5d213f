"""
Lunar Landing Outcome

Decides whether touching the ground was a landing or a crash.
"""

import enum
import logging
from typing import NamedTuple

from lunar_config import LandingConfig

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """Run state. Only RUNNING -> CRASHED or RUNNING -> LANDED ever happens."""
    RUNNING = "running"
    CRASHED = "crashed"
    LANDED = "landed"

    @property
    def finished(self):
        return self is not Outcome.RUNNING


class LandingReport(NamedTuple):
    outcome: Outcome
    reason: str


def classify_landing(start, end, velocity, config=None):
    """
    Classify touchdown on the segment start-end at the given velocity.

    A crash is reported when the ground is not flat enough or when either
    speed component exceeds its limit. Unless
    config.symmetric_speed_check is set, only positive (rightward and
    downward) speeds are compared against the limits.

    Args:
        start: (x, y) of the segment's left point
        end: (x, y) of the segment's right point
        velocity: (vx, vy) of the lander at contact
        config: LandingConfig (defaults used if None)

    Returns:
        LandingReport(outcome, reason)
    """
    cfg = config if config is not None else LandingConfig()
    vx, vy = float(velocity[0]), float(velocity[1])
    if cfg.symmetric_speed_check:
        vx, vy = abs(vx), abs(vy)

    height_diff = abs(start[1] - end[1])
    if height_diff > cfg.flatness_tolerance:
        reason = f"ground not flat: from.y = {start[1]}, to.y = {end[1]}"
        report = LandingReport(Outcome.CRASHED, reason)
    elif vx > cfg.max_horizontal_speed:
        reason = f"horizontal speed: {vx:g} > {cfg.max_horizontal_speed:g}"
        report = LandingReport(Outcome.CRASHED, reason)
    elif vy > cfg.max_vertical_speed:
        reason = f"vertical speed: {vy:g} > {cfg.max_vertical_speed:g}"
        report = LandingReport(Outcome.CRASHED, reason)
    else:
        reason = f"touchdown speed: [{velocity[0]:g}, {velocity[1]:g}]"
        report = LandingReport(Outcome.LANDED, reason)

    logger.info("%s, %s", report.outcome.value, reason)
    return report
