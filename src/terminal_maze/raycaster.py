"""A raycaster."""

import logging
from dataclasses import dataclass
from math import ceil, cos, floor, sin

import numpy as np
from numpy.typing import NDArray

from .errors import ConfigurationError
from .grid import Grid
from .pose import Pose

__all__ = ["RayHit", "column_angle", "column_angles", "cast_ray"]

logger = logging.getLogger(__name__)

# Offsets of a cell's four corners from its top-left corner.
_CORNERS = np.array([[0, 0], [1, 0], [0, 1], [1, 1]], dtype=float)


@dataclass(frozen=True)
class RayHit:
    """Result of casting one ray."""

    distance: float
    """Distance travelled before hitting a wall, in ``(0, max_depth]``."""
    is_boundary: bool = False
    """Whether the ray grazed the edge of the wall tile it hit."""


def column_angle(pose_angle: float, column: int, screen_width: int, fov: float) -> float:
    """World-space angle of the ray cast for a screen column."""
    return pose_angle - fov / 2 + column / screen_width * fov


def column_angles(pose_angle: float, screen_width: int, fov: float) -> NDArray[np.float64]:
    """World-space angles of the rays for every screen column, left to right."""
    return pose_angle - fov / 2 + np.arange(screen_width) / screen_width * fov


def cast_ray(
    grid: Grid,
    pose: Pose,
    ray_angle: float,
    max_depth: float,
    step_size: float,
    boundary_threshold: float | None = None,
) -> RayHit:
    """March a ray from the player until it hits a wall or reaches `max_depth`.

    Parameters
    ----------
    grid : Grid
        The map.
    pose : Pose
        Origin of the ray.
    ray_angle : float
        Absolute world-space angle of the ray.
    max_depth : float
        Rays that travel this far stop and report `max_depth`.
    step_size : float
        Distance advanced per step. Walls thinner than this can be missed.
    boundary_threshold : float | None, default: None
        If given, hits whose ray passes within this angle (radians) of one of the
        two nearest corners of the wall tile are flagged as boundaries.

    Returns
    -------
    RayHit
        Distance to the wall and whether the hit lies on a tile boundary.
    """
    if step_size <= 0:
        raise ConfigurationError(f"step_size must be positive, got {step_size!r}")
    if max_depth <= 0:
        raise ConfigurationError(f"max_depth must be positive, got {max_depth!r}")

    eye_x = sin(ray_angle)
    eye_y = cos(ray_angle)

    # Distances are multiples of step_size rather than a running sum so the
    # same ray always samples the same points.
    for step in range(1, ceil(max_depth / step_size) + 1):
        distance = min(step * step_size, max_depth)
        test_x = floor(pose.x + eye_x * distance)
        test_y = floor(pose.y + eye_y * distance)

        if not grid.in_bounds(test_x, test_y):
            return RayHit(max_depth)

        if grid.walls[test_x, test_y]:
            if boundary_threshold is None:
                return RayHit(distance)
            return RayHit(
                distance,
                _is_boundary(pose, test_x, test_y, eye_x, eye_y, boundary_threshold),
            )

    return RayHit(max_depth)


def _is_boundary(
    pose: Pose, cell_x: int, cell_y: int, eye_x: float, eye_y: float, threshold: float
) -> bool:
    # Vectors from the player to each corner of the hit tile.
    corners = _CORNERS + (cell_x, cell_y)
    to_corners = corners - (pose.x, pose.y)
    lengths = np.linalg.norm(to_corners, axis=1)
    lengths[lengths == 0] = np.finfo(float).eps

    dots = to_corners @ (eye_x, eye_y) / lengths

    # The two far corners are hidden behind the tile itself.
    nearest = np.argsort(lengths, kind="stable")[:2]
    angles = np.arccos(np.clip(dots[nearest], -1.0, 1.0))
    return bool((angles < threshold).any())
