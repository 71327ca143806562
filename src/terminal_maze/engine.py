"""The frame driver and its curses host loop."""

import curses
import logging
import os
import signal
from dataclasses import dataclass, field
from platform import uname
from time import monotonic_ns
from typing import TYPE_CHECKING

from .config import RenderConfig
from .display import BufferSink, Color, DisplaySink, draw_text
from .errors import MapError
from .grid import DEFAULT_MAP, Grid
from .movement import Intents, advance, speed_factor
from .pose import Pose
from .raycaster import cast_ray, column_angles
from .shader import shade_column

if TYPE_CHECKING:
    from .controller import Controller

logger = logging.getLogger(__name__)

_IS_WINDOWS: bool = uname().system == "Windows"

PLAYER_MARKER = "@"

_COLOR_PAIRS: dict[Color, int] = {
    Color.WHITE: curses.COLOR_WHITE,
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.YELLOW: curses.COLOR_YELLOW,
}


@dataclass
class Engine:
    """A raycaster frame driver.

    Parameters
    ----------
    grid : Grid
        The map. Never modified.
    pose : Pose
        The player's pose; moved every tick.
    config : RenderConfig, default: RenderConfig()
        Tuning constants.
    """

    grid: Grid
    """The map."""
    pose: Pose
    """The player's pose."""
    config: RenderConfig = field(default_factory=RenderConfig)
    """Tuning constants."""

    def __post_init__(self) -> None:
        x, y = self.pose.cell
        if self.grid.is_wall(x, y):
            raise MapError(f"start position ({self.pose.x}, {self.pose.y}) is not open floor")

    @classmethod
    def create(
        cls,
        config: RenderConfig | None = None,
        map_text: str = DEFAULT_MAP,
        width: int = 16,
        height: int = 16,
        grid: Grid | None = None,
    ) -> "Engine":
        """Load the map and place the player at the configured start pose."""
        if config is None:
            config = RenderConfig()
        if grid is None:
            grid = Grid.from_string(map_text, width, height)

        x, y = config.start
        engine = cls(grid, Pose(x, y, config.start_angle), config)
        logger.info("Engine created on %r at %s", grid, engine.pose)
        return engine

    def tick(self, elapsed: float, intents: Intents, sink: DisplaySink) -> bool:
        """Advance and draw one frame.

        Parameters
        ----------
        elapsed : float
            Time since the last tick, in ``config.ticks_per_millisecond`` units.
        intents : Intents
            Controls held this tick.
        sink : DisplaySink
            Where glyphs are drawn.

        Returns
        -------
        bool
            False once the player asked to quit.
        """
        if intents.quit:
            logger.info("Quit requested at %s", self.pose)
            return False

        config = self.config
        factor = speed_factor(elapsed, config.ticks_per_millisecond, config.speed_divisor)
        advance(self.pose, self.grid, intents, factor, config)

        self.render(sink)

        if config.minimap:
            draw_text(sink, str(self.pose), 0, 0)
            self.draw_minimap(sink)
        else:
            millis = elapsed / config.ticks_per_millisecond
            draw_text(sink, str(millis), 5, 5, Color.RED)
        return True

    def render(self, sink: DisplaySink) -> None:
        """Cast and shade a ray for every column of `sink`."""
        config = self.config
        height = sink.height
        angles = column_angles(self.pose.angle, sink.width, config.fov)

        for column, angle in enumerate(angles.tolist()):
            hit = cast_ray(
                self.grid,
                self.pose,
                angle,
                config.max_depth,
                config.step_size,
                config.boundary_threshold,
            )
            for row, glyph in shade_column(hit, height, config.max_depth):
                sink.draw(glyph, column, row)

    def draw_minimap(self, sink: DisplaySink) -> None:
        """Draw every cell of the map below the overlay line, and the player."""
        for y, line in enumerate(self.grid.rows()):
            for x, char in enumerate(line):
                sink.draw(char, x, y + 1)

        x, y = self.pose.cell
        sink.draw(PLAYER_MARKER, x, y + 1, Color.YELLOW)

    def run(self, controller: "Controller") -> None:
        """Run the engine in the terminal until the player quits."""
        curses.wrapper(self._run, controller)

    def _run(self, screen, controller: "Controller") -> None:
        curses.curs_set(0)
        screen.nodelay(True)

        pairs: dict[Color, int] = {}
        if curses.has_colors():
            for number, (color, foreground) in enumerate(_COLOR_PAIRS.items(), start=1):
                curses.init_pair(number, foreground, curses.COLOR_BLACK)
                pairs[color] = curses.color_pair(number)

        sink: BufferSink | None = None
        resized: bool = True

        def set_resized(*args):
            nonlocal resized
            resized = True

        controller.start()
        if not _IS_WINDOWS:
            signal.signal(signal.SIGWINCH, set_resized)

        try:
            last_time = monotonic_ns()
            while True:
                current_time = monotonic_ns()
                elapsed = current_time - last_time
                last_time = current_time
                if resized or _IS_WINDOWS and screen.getch() == curses.KEY_RESIZE:
                    if _IS_WINDOWS:
                        height, width = screen.getmaxyx()
                    else:
                        width, height = os.get_terminal_size()
                        curses.resizeterm(height, width)
                    sink = BufferSink(max(1, width - 1), max(1, height))
                    logger.debug("Resized to %dx%d", sink.width, sink.height)
                    resized = False

                sink.clear()
                if not self.tick(elapsed, controller.intents(), sink):
                    break

                for row_num, row in enumerate(sink.rows()):
                    screen.addstr(row_num, 0, row)
                for row_num, column, glyph, color in sink.colored():
                    screen.addstr(row_num, column, glyph, pairs.get(color, curses.A_NORMAL))
                screen.refresh()

        finally:
            controller.stop()
            if not _IS_WINDOWS:
                signal.signal(signal.SIGWINCH, signal.SIG_DFL)

            curses.flushinp()
            curses.endwin()
