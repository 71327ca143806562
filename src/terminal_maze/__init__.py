"""A first-person raycasting maze for your terminal."""

from .config import RenderConfig
from .display import BufferSink, Color, DisplaySink
from .engine import Engine
from .errors import ConfigurationError, MapError
from .grid import DEFAULT_MAP, Cell, Grid, read_map
from .movement import Intents, advance, speed_factor
from .pose import Pose
from .raycaster import RayHit, cast_ray, column_angle, column_angles
from .shader import RenderColumn, floor_shade, project, shade_column, wall_shade

__version__ = "0.1.0"

__all__ = [
    "BufferSink",
    "Cell",
    "Color",
    "ConfigurationError",
    "DEFAULT_MAP",
    "DisplaySink",
    "Engine",
    "Grid",
    "Intents",
    "MapError",
    "Pose",
    "RayHit",
    "RenderColumn",
    "RenderConfig",
    "advance",
    "cast_ray",
    "column_angle",
    "column_angles",
    "floor_shade",
    "project",
    "read_map",
    "shade_column",
    "speed_factor",
    "wall_shade",
]
