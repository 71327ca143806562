import math

import pytest

from terminal_maze.config import RenderConfig
from terminal_maze.errors import ConfigurationError


def test_defaults() -> None:
    config = RenderConfig()

    assert config.fov == pytest.approx(math.pi / 4)
    assert config.max_depth == 16
    assert config.step_size == 0.1
    assert config.boundary_threshold == 0.008
    assert config.speed_divisor == 200
    assert config.strafe and config.minimap


@pytest.mark.parametrize(
    "field", ["fov", "max_depth", "step_size", "speed_divisor", "ticks_per_millisecond"]
)
@pytest.mark.parametrize("value", [0, -1])
def test_non_positive_constants_are_rejected(field: str, value: float) -> None:
    with pytest.raises(ConfigurationError):
        RenderConfig(**{field: value})


def test_negative_boundary_threshold_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        RenderConfig(boundary_threshold=-0.1)


def test_classic_variant() -> None:
    config = RenderConfig.classic(max_depth=20.0)

    assert not config.strafe
    assert not config.minimap
    assert config.boundary_threshold is None
    assert config.max_depth == 20.0


def test_classic_overrides_are_validated() -> None:
    with pytest.raises(ConfigurationError):
        RenderConfig.classic(step_size=0)
