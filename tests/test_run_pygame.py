from __future__ import annotations

import types

import pytest

pygame = pytest.importorskip("pygame")

from tetris_engine import Action, EngineConfig, GameState
from tetris_engine.run_pygame import CELL_SIZE, caption, draw_state, handle_key
from tetris_engine.tetromino import Piece, TetrominoType


def _state() -> GameState:
    return GameState(EngineConfig(width=6, height=8, seed=0))


def test_arrow_keys_queue_actions() -> None:
    state = _state()
    for key in (pygame.K_LEFT, pygame.K_UP, pygame.K_SPACE, pygame.K_a):
        handle_key(types.SimpleNamespace(key=key), state)
    assert list(state.actions) == [Action.MOVE_LEFT, Action.ROTATE, Action.HARD_DROP]


def test_draw_state_paints_settled_and_active_cells() -> None:
    state = _state()
    state.board.set_cell(0, 7, TetrominoType.Z)
    state.current = Piece(TetrominoType.O, x=3, y=0)
    screen = pygame.Surface((6 * CELL_SIZE, 8 * CELL_SIZE))

    draw_state(screen, state)

    half = CELL_SIZE // 2
    assert tuple(screen.get_at((half, 7 * CELL_SIZE + half)))[:3] == (255, 0, 0)
    assert tuple(screen.get_at((3 * CELL_SIZE + half, half)))[:3] == (255, 255, 0)
    assert tuple(screen.get_at((5 * CELL_SIZE + half, 5 * CELL_SIZE + half)))[:3] == (0, 0, 0)


def test_caption_shows_display_score_then_game_over() -> None:
    state = _state()
    state.score = 120
    state.display_score = 40
    assert caption(state) == "Tetris - Score: 000040"
    state.lost = True
    assert caption(state) == "Tetris - Game Over - Score: 000120"
