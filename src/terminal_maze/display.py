"""Glyph sinks the frame driver draws into."""

from collections.abc import Iterator
from enum import Enum
from typing import Protocol

import numpy as np

from .errors import ConfigurationError

__all__ = ["Color", "DisplaySink", "BufferSink", "draw_text"]


class Color(Enum):
    """Foreground colors a sink may be asked to draw with."""

    WHITE = "white"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class DisplaySink(Protocol):
    """Anything that can receive one glyph per screen cell."""

    width: int
    height: int

    def draw(self, glyph: str, column: int, row: int, color: Color | None = None) -> None:
        ...


class BufferSink:
    """A sink that renders into a character buffer.

    Draws outside the buffer are clipped.

    Parameters
    ----------
    width : int
        Number of columns.
    height : int
        Number of rows.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ConfigurationError(f"screen must be at least 1x1, got {width}x{height}")
        self.width = width
        """Number of columns."""
        self.height = height
        """Number of rows."""
        self.buffer = np.full((height, width), " ")
        """The array in which glyphs are rendered, indexed ``[row, column]``."""
        self.colors: dict[tuple[int, int], Color] = {}
        """Colors of cells drawn with one, keyed by ``(row, column)``."""

    def clear(self) -> None:
        """Blank the buffer."""
        self.buffer[:] = " "
        self.colors.clear()

    def draw(self, glyph: str, column: int, row: int, color: Color | None = None) -> None:
        """Write one glyph."""
        if not (0 <= column < self.width and 0 <= row < self.height):
            return
        self.buffer[row, column] = glyph
        if color is None:
            self.colors.pop((row, column), None)
        else:
            self.colors[row, column] = color

    def rows(self) -> Iterator[str]:
        """Yield each row of the buffer as a string."""
        for row in self.buffer:
            yield "".join(row)

    def colored(self) -> Iterator[tuple[int, int, str, Color]]:
        """Yield ``(row, column, glyph, color)`` for every colored cell."""
        for (row, column), color in sorted(self.colors.items(), key=lambda item: item[0]):
            yield row, column, self.buffer[row, column], color


def draw_text(
    sink: DisplaySink, text: str, column: int, row: int, color: Color | None = None
) -> None:
    """Write a string left to right starting at ``(column, row)``."""
    for offset, glyph in enumerate(text):
        sink.draw(glyph, column + offset, row, color)
