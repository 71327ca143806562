import pytest

from terminal_maze.config import RenderConfig
from terminal_maze.display import BufferSink, Color
from terminal_maze.engine import PLAYER_MARKER, Engine
from terminal_maze.errors import MapError
from terminal_maze.movement import Intents
from terminal_maze.raycaster import cast_ray, column_angle
from terminal_maze.shader import EMPTY, FLOOR_SHADES, WALL_SHADES, shade_column

MILLISECOND = 1_000_000


def test_create_uses_default_map_and_start() -> None:
    engine = Engine.create()

    assert (engine.grid.width, engine.grid.height) == (16, 16)
    assert (engine.pose.x, engine.pose.y, engine.pose.angle) == (8.0, 8.0, 0.0)


def test_start_inside_wall_fails() -> None:
    with pytest.raises(MapError):
        Engine.create(RenderConfig(start=(0.5, 0.5)))


def test_quit_stops_without_moving() -> None:
    engine = Engine.create()
    sink = BufferSink(40, 20)

    assert engine.tick(100 * MILLISECOND, Intents(forward=True, quit=True), sink) is False
    assert (engine.pose.x, engine.pose.y) == (8.0, 8.0)


def test_tick_moves_player() -> None:
    engine = Engine.create()
    sink = BufferSink(40, 20)

    # 100 ms is a speed factor of 0.5, one grid unit forward.
    assert engine.tick(100 * MILLISECOND, Intents(forward=True), sink) is True
    assert engine.pose.x == pytest.approx(8.0)
    assert engine.pose.y == pytest.approx(9.0)


def test_render_matches_shaded_rays() -> None:
    engine = Engine.create(RenderConfig.classic())
    sink = BufferSink(30, 24)

    engine.render(sink)

    config = engine.config
    for column in (0, 15, 29):
        angle = column_angle(engine.pose.angle, column, sink.width, config.fov)
        hit = cast_ray(engine.grid, engine.pose, angle, config.max_depth, config.step_size)
        expected = [glyph for _, glyph in shade_column(hit, sink.height, config.max_depth)]
        assert list(sink.buffer[:, column]) == expected


def test_render_only_draws_shading_glyphs() -> None:
    engine = Engine.create()
    sink = BufferSink(50, 30)

    engine.render(sink)

    assert set(sink.buffer.flat) <= set(WALL_SHADES + FLOOR_SHADES + EMPTY)


def test_classic_overlay_shows_elapsed_milliseconds() -> None:
    engine = Engine.create(RenderConfig.classic())
    sink = BufferSink(40, 20)

    engine.tick(0, Intents(), sink)

    assert "".join(sink.buffer[5, 5:8]) == "0.0"
    assert all(color is Color.RED for *_, color in sink.colored())


def test_minimap_overlay() -> None:
    engine = Engine.create()
    sink = BufferSink(40, 20)

    engine.tick(0, Intents(), sink)
    rows = list(sink.rows())

    assert rows[0].startswith("X=8.00, Y=8.00, A=0.00")
    assert rows[1][:16] == "################"
    assert rows[13][:16] == "#.......########"
    assert sink.buffer[9, 8] == PLAYER_MARKER
    assert sink.colors[9, 8] is Color.YELLOW
