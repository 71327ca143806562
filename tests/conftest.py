"""Test configuration.

Make the ``terminal_maze`` package importable from the ``src/`` layout even
when the project has not been installed.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from terminal_maze.grid import Grid  # noqa: E402


def bordered_map(width: int, height: int) -> str:
    """A map of open floor enclosed by walls."""
    inner = "#" + "." * (width - 2) + "#"
    return "#" * width + inner * (height - 2) + "#" * width


@pytest.fixture
def open_room() -> Grid:
    return Grid.from_string(bordered_map(16, 16), 16, 16)


@pytest.fixture
def corridor() -> Grid:
    # (1, 1) has a wall to its east; row 2 is open from x=1 to x=3.
    return Grid.from_string(
        "#####"
        "#.#.#"
        "#...#"
        "#####",
        5,
        4,
    )


@pytest.fixture
def make_room():
    """Factory for bordered grids of any size."""

    def _make_room(width: int, height: int) -> Grid:
        return Grid.from_string(bordered_map(width, height), width, height)

    return _make_room
