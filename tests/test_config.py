from __future__ import annotations

import pytest

from tetris_engine import ConfigError, EngineConfig, GameState


def test_defaults() -> None:
    config = EngineConfig()
    assert (config.width, config.height) == (10, 20)
    assert config.pace_start == pytest.approx(0.5)
    assert config.pace_decrement == pytest.approx(0.005)
    assert config.pace_min == pytest.approx(0.1)
    assert config.fps == 60
    assert config.accelerate is False


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -5},
        {"width": 3},
        {"width": 10.0},
        {"pace_start": 0},
        {"pace_min": 0},
        {"pace_min": 1.0, "pace_start": 0.5},
        {"pace_decrement": -0.1},
        {"fps": 0},
    ],
)
def test_invalid_configuration_fails_fast(kwargs) -> None:
    with pytest.raises(ConfigError):
        EngineConfig(**kwargs)


def test_config_error_is_a_value_error() -> None:
    assert issubclass(ConfigError, ValueError)


def test_small_board_is_injected() -> None:
    state = GameState(EngineConfig(width=4, height=6, seed=0))
    assert (state.board.width, state.board.height) == (4, 6)
    assert state.board.grid.shape == (6, 4)
    assert not state.occupied(state.current)
