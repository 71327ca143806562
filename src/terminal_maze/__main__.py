"""Run the maze.

Controls
--------
- `ad` or left/right arrows to turn
- `ws` or up/down arrows to walk
- `qe` to strafe
- `esc` to exit
"""

import argparse
import logging
from dataclasses import replace
from math import radians
from pathlib import Path

from .config import RenderConfig
from .controller import Controller
from .engine import Engine
from .grid import read_map
from .logging_config import setup_logging

parser = argparse.ArgumentParser(prog="terminal_maze", description="A first-person maze in your terminal.")
parser.add_argument("--map", type=Path, default=None, help="Text file with one map row per line")
parser.add_argument("--classic", action="store_true", help="No strafing, minimap or tile seams")
parser.add_argument("--fov", type=float, default=45.0, help="Field of view in degrees")
parser.add_argument("--depth", type=float, default=16.0, help="Maximum ray distance")
parser.add_argument("--no-boundaries", action="store_true", help="Do not draw seams between wall tiles")
parser.add_argument("--log-file", type=str, default=None, help="Write logs to this file")
parser.add_argument("-d", "--debug", action="store_true", help="Log debug records")
args = parser.parse_args()

setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

options = dict(fov=radians(args.fov), max_depth=args.depth)
if args.classic:
    config = RenderConfig.classic(**options)
else:
    config = RenderConfig(**options)
if args.no_boundaries:
    config = replace(config, boundary_threshold=None)

grid = read_map(args.map) if args.map is not None else None
engine = Engine.create(config, grid=grid)
engine.run(Controller())
