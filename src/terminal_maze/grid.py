"""The maze grid and functions for reading it.

Notes
-----
Maps are row-major strings of ``width * height`` characters where ``"#"``
represents a wall and any other character (usually ``"."``) open floor.

Grids are stored as boolean numpy arrays indexed ``[x, y]`` with ``True``
for walls. The arrays are read-only; a grid never changes after it is loaded.
"""

import logging
from enum import Enum
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from .errors import MapError

__all__ = ["Cell", "Grid", "read_map", "DEFAULT_MAP", "WALL_CHAR", "OPEN_CHAR"]

logger = logging.getLogger(__name__)

WALL_CHAR = "#"
OPEN_CHAR = "."

DEFAULT_MAP = (
    "################"
    "#..............#"
    "#..............#"
    "#..............#"
    "#.........#....#"
    "#.........#....#"
    "#..............#"
    "#..............#"
    "#..............#"
    "#..............#"
    "#..............#"
    "#..............#"
    "#.......########"
    "#..............#"
    "#..............#"
    "################"
)
"""The built-in 16x16 maze."""


class Cell(Enum):
    """Contents of a grid cell."""

    OPEN = 0
    WALL = 1


class Grid:
    """An immutable grid of wall and open cells.

    Parameters
    ----------
    walls : NDArray[np.bool_]
        A 2D boolean array indexed ``[x, y]`` with ``True`` entries for walls.

    Attributes
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    """

    def __init__(self, walls: NDArray[np.bool_]) -> None:
        walls = np.array(walls, dtype=bool)
        if walls.ndim != 2 or 0 in walls.shape:
            raise MapError(f"grid must be a non-empty 2D array, got shape {walls.shape}")
        walls.setflags(write=False)
        self._walls = walls
        self.width, self.height = walls.shape

    @classmethod
    def from_string(cls, text: str, width: int, height: int) -> "Grid":
        """Build a grid from a flattened, row-major map string.

        Newlines are ignored so maps may be written one row per line.
        """
        if width < 1 or height < 1:
            raise MapError(f"map dimensions must be positive, got {width}x{height}")

        cells = text.replace("\r", "").replace("\n", "")
        if len(cells) != width * height:
            raise MapError(
                f"map has {len(cells)} cells, expected {width}x{height}={width * height}"
            )

        walls = np.array([char == WALL_CHAR for char in cells]).reshape(height, width).T
        logger.debug("Loaded %dx%d grid with %d walls", width, height, walls.sum())
        return cls(walls)

    @property
    def walls(self) -> NDArray[np.bool_]:
        """Read-only wall mask indexed ``[x, y]``."""
        return self._walls

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether ``(x, y)`` lies in ``[0, width) x [0, height)``."""
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        """Return the contents of an in-bounds cell."""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        return Cell.WALL if self._walls[x, y] else Cell.OPEN

    def is_wall(self, x: int, y: int) -> bool:
        """Whether a cell blocks movement. Cells outside the grid do."""
        if not self.in_bounds(x, y):
            return True
        return bool(self._walls[x, y])

    def rows(self) -> list[str]:
        """Map rows as strings of wall and open characters, top to bottom."""
        chars = np.where(self._walls.T, WALL_CHAR, OPEN_CHAR)
        return ["".join(row) for row in chars]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self.width}, height={self.height})"


def read_map(path: Path) -> Grid:
    """Read a map from a text file.

    Parameters
    ----------
    path : Path
        Path to a text file with one map row per line.

    Returns
    -------
    Grid
        The loaded grid.
    """
    lines = [line for line in Path(path).read_text().splitlines() if line]
    if not lines:
        raise MapError(f"map file {path} is empty")

    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise MapError(f"map file {path} has rows of differing lengths")

    logger.info("Reading map from %s", path)
    return Grid.from_string("".join(lines), width, len(lines))
