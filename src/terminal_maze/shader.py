"""Turns ray hits into columns of glyphs."""

from dataclasses import dataclass

from .raycaster import RayHit

__all__ = [
    "RenderColumn",
    "project",
    "wall_shade",
    "floor_shade",
    "shade_column",
    "WALL_SHADES",
    "FLOOR_SHADES",
    "EMPTY",
]

EMPTY = " "

WALL_SHADES = "█▓▒░"
"""Wall glyphs from nearest (densest) to farthest (sparsest)."""

FLOOR_SHADES = "#x-. "
"""Floor glyphs from the bottom of the screen to the horizon."""

_FLOOR_THRESHOLDS = (0.25, 0.5, 0.75, 0.9)


@dataclass(frozen=True)
class RenderColumn:
    """Where a column's wall band starts and ends on screen."""

    ceiling_row: int
    """First row of the wall band; rows above are sky."""
    floor_row: int
    """Last row of the wall band; rows below are floor."""
    wall_distance: float
    """Distance to the wall drawn in this column."""
    is_boundary: bool
    """Whether the wall band is a seam between tiles."""


def project(hit: RayHit, screen_height: int) -> RenderColumn:
    """Project a hit onto the screen with inverse-distance perspective."""
    ceiling = int(screen_height / 2 - screen_height / hit.distance)
    return RenderColumn(ceiling, screen_height - ceiling, hit.distance, hit.is_boundary)


def wall_shade(distance: float, is_boundary: bool, max_depth: float) -> str:
    """Glyph for a wall at `distance`; seams are drawn empty."""
    if is_boundary:
        return EMPTY

    for glyph, limit in zip(WALL_SHADES, (max_depth / 4, max_depth / 3, max_depth / 2, max_depth)):
        if distance <= limit:
            return glyph
    return EMPTY


def floor_shade(row: int, screen_height: int) -> str:
    """Glyph for floor at `row`; depends only on the row's height on screen."""
    half = screen_height / 2
    brightness = 1.0 - (row - half) / half

    for glyph, limit in zip(FLOOR_SHADES, _FLOOR_THRESHOLDS):
        if brightness < limit:
            return glyph
    return FLOOR_SHADES[-1]


def shade_column(hit: RayHit, screen_height: int, max_depth: float) -> list[tuple[int, str]]:
    """Glyph for every row of a column, top to bottom."""
    column = project(hit, screen_height)
    wall = wall_shade(column.wall_distance, column.is_boundary, max_depth)

    glyphs = []
    for row in range(screen_height):
        if row < column.ceiling_row:
            glyphs.append((row, EMPTY))
        elif row <= column.floor_row:
            glyphs.append((row, wall))
        else:
            glyphs.append((row, floor_shade(row, screen_height)))
    return glyphs
