"""Moves the player according to input intents."""

import logging
from dataclasses import dataclass
from math import cos, floor, sin

from .config import RenderConfig
from .grid import Grid
from .pose import Pose

__all__ = ["Intents", "speed_factor", "advance"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Intents:
    """Which controls are held down this tick."""

    rotate_left: bool = False
    rotate_right: bool = False
    forward: bool = False
    backward: bool = False
    strafe_left: bool = False
    strafe_right: bool = False
    quit: bool = False


def speed_factor(elapsed: float, ticks_per_millisecond: float, divisor: float = 200.0) -> float:
    """Scale elapsed time into a frame-rate independent movement factor."""
    return elapsed / ticks_per_millisecond / divisor


def _move_to(pose: Pose, grid: Grid, x: float, y: float) -> bool:
    # Whole moves only: a blocked target discards the move, no wall sliding.
    if grid.is_wall(floor(x), floor(y)):
        logger.debug("Blocked move from (%.2f, %.2f) to (%.2f, %.2f)", pose.x, pose.y, x, y)
        return False
    pose.x = x
    pose.y = y
    return True


def advance(
    pose: Pose, grid: Grid, intents: Intents, factor: float, config: RenderConfig | None = None
) -> Pose:
    """Apply one tick of intents to `pose` in-place and return it.

    All rotation is applied before any translation, so moves made in the same
    tick as a turn follow the new heading. Each translation is validated on
    its own against the grid.
    """
    if config is None:
        config = RenderConfig()

    turn = config.rotation_rate * factor
    if intents.rotate_left:
        pose.rotate(-turn)
    if intents.rotate_right:
        pose.rotate(turn)

    angle = pose.angle
    step = config.translation_rate * factor

    dx = sin(angle) * step
    dy = cos(angle) * step
    if intents.forward:
        _move_to(pose, grid, pose.x + dx, pose.y + dy)
    if intents.backward:
        _move_to(pose, grid, pose.x - dx, pose.y - dy)

    if config.strafe:
        dx = cos(angle) * step
        dy = sin(angle) * step
        if intents.strafe_left:
            _move_to(pose, grid, pose.x - dx, pose.y + dy)
        if intents.strafe_right:
            _move_to(pose, grid, pose.x + dx, pose.y - dy)

    return pose
