"""Rules engine for a falling-block puzzle game."""

from .actions import Action
from .bag import PieceBag
from .board import Board
from .config import ConfigError, EngineConfig
from .game_state import GameState
from .tetromino import Direction, Piece, Rotation, TetrominoType, shape_blocks
from .utils import catch_up_step, render_grid

__all__ = [
    "Action",
    "Board",
    "ConfigError",
    "Direction",
    "EngineConfig",
    "GameState",
    "Piece",
    "PieceBag",
    "Rotation",
    "TetrominoType",
    "catch_up_step",
    "render_grid",
    "shape_blocks",
]
