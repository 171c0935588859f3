"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# The 4x4 bounding box of every tetromino must fit on the board.
MIN_BOARD_SIZE = 4


class ConfigError(ValueError):
    """Raised when an :class:`EngineConfig` holds unusable values."""


@dataclass(frozen=True)
class EngineConfig:
    """Constants read once when a :class:`~tetris_engine.game_state.GameState`
    is constructed.

    Attributes
    ----------
    width, height:
        Board size in cells.
    pace_start:
        Seconds between automatic one-row drops at the start of a game.
    pace_decrement, pace_min:
        Per-line speed-up and its floor.  Only applied when ``accelerate`` is
        set; by default the pace never changes.
    fps:
        Frame rate the drivers run the engine at.
    seed:
        Seed for the engine's random number generator.  ``None`` uses system
        entropy.
    """

    width: int = 10
    height: int = 20
    pace_start: float = 0.5
    pace_decrement: float = 0.005
    pace_min: float = 0.1
    fps: int = 60
    accelerate: bool = False
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value < MIN_BOARD_SIZE:
                raise ConfigError(f"{name} must be at least {MIN_BOARD_SIZE}, got {value}")
        if self.pace_start <= 0:
            raise ConfigError("pace_start must be positive")
        if self.pace_min <= 0:
            raise ConfigError("pace_min must be positive")
        if self.pace_min > self.pace_start:
            raise ConfigError("pace_min must not exceed pace_start")
        if self.pace_decrement < 0:
            raise ConfigError("pace_decrement must not be negative")
        if self.fps <= 0:
            raise ConfigError("fps must be positive")


__all__ = ["ConfigError", "EngineConfig", "MIN_BOARD_SIZE"]
