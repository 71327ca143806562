"""The player's pose."""

from dataclasses import dataclass
from math import floor


@dataclass
class Pose:
    """Position and heading of the player.

    Parameters
    ----------
    x : float
        Horizontal position on the map.
    y : float
        Vertical position on the map.
    angle : float, default: 0.0
        Heading in radians. Never normalized; it may grow across many turns.

    Methods
    -------
    rotate(theta)
        Rotate pose `theta` radians in-place.
    """

    x: float
    """Horizontal position on the map."""
    y: float
    """Vertical position on the map."""
    angle: float = 0.0
    """Heading in radians."""

    @property
    def cell(self) -> tuple[int, int]:
        """Grid cell the player stands in."""
        return floor(self.x), floor(self.y)

    def rotate(self, theta: float) -> None:
        """Rotate pose `theta` radians."""
        self.angle += theta

    def __str__(self) -> str:
        return f"X={self.x:.2f}, Y={self.y:.2f}, A={self.angle:.2f}"
