"""Tuning constants for the caster, shader and movement."""

import logging
from dataclasses import dataclass, replace
from math import pi

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    """Tuning constants shared by every component of a frame.

    Parameters
    ----------
    fov : float, default: pi / 4
        Field of view in radians.
    max_depth : float, default: 16.0
        Rays stop marching at this distance.
    step_size : float, default: 0.1
        Distance a ray advances per step.
    boundary_threshold : float | None, default: 0.008
        Angle in radians under which a corner ray marks a tile seam.
    speed_divisor : float, default: 200.0
        Calibrates how elapsed milliseconds turn into a speed factor.
    ticks_per_millisecond : int, default: 1_000_000
        Units of elapsed time per millisecond.
    rotation_rate : float, default: 0.5
        Radians turned per unit of speed factor.
    translation_rate : float, default: 2.0
        Grid units moved per unit of speed factor.
    strafe : bool, default: True
        Whether strafe intents are honored.
    minimap : bool, default: True
        Whether the minimap and pose overlay are drawn.
    start : tuple[float, float], default: (8.0, 8.0)
        Initial position of the player.
    start_angle : float, default: 0.0
        Initial heading of the player.
    """

    fov: float = pi / 4
    """Field of view in radians."""
    max_depth: float = 16.0
    """Rays stop marching at this distance."""
    step_size: float = 0.1
    """Distance a ray advances per step."""
    boundary_threshold: float | None = 0.008
    """Angle in radians under which a corner ray marks a tile seam."""
    speed_divisor: float = 200.0
    """Calibrates how elapsed milliseconds turn into a speed factor."""
    ticks_per_millisecond: int = 1_000_000
    """Units of elapsed time per millisecond."""
    rotation_rate: float = 0.5
    """Radians turned per unit of speed factor."""
    translation_rate: float = 2.0
    """Grid units moved per unit of speed factor."""
    strafe: bool = True
    """Whether strafe intents are honored."""
    minimap: bool = True
    """Whether the minimap and pose overlay are drawn."""
    start: tuple[float, float] = (8.0, 8.0)
    """Initial position of the player."""
    start_angle: float = 0.0
    """Initial heading of the player."""

    def __post_init__(self) -> None:
        for name in ("fov", "max_depth", "step_size", "speed_divisor", "ticks_per_millisecond"):
            value = getattr(self, name)
            if value <= 0:
                logger.error("Rejected configuration: %s=%r", name, value)
                raise ConfigurationError(f"{name} must be positive, got {value!r}")

        if self.boundary_threshold is not None and self.boundary_threshold < 0:
            raise ConfigurationError(
                f"boundary_threshold must be non-negative, got {self.boundary_threshold!r}"
            )

    @classmethod
    def classic(cls, **overrides) -> "RenderConfig":
        """Single-variant setup: no strafing, no minimap, no tile seams."""
        config = cls(strafe=False, minimap=False, boundary_threshold=None)
        return replace(config, **overrides)
