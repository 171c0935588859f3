"""Utility helpers for the Tetris engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .board import PIECE_VALUES

if TYPE_CHECKING:  # pragma: no cover
    from .game_state import GameState


def catch_up_step(gap: int) -> int:
    """Return how far the displayed score moves toward the real one.

    The step shrinks with the remaining ``gap`` (10 above 100, 5 above 50,
    then 1) so the readout rolls like a slot machine and never passes the
    real score.
    """

    if gap > 100:
        return 10
    if gap > 50:
        return 5
    if gap > 0:
        return 1
    return 0


def next_pace(pace: float, lines: int, decrement: float, minimum: float) -> float:
    """Return ``pace`` sped up by ``decrement`` per cleared line.

    The result never drops below ``minimum``.
    """

    return max(pace - lines * decrement, minimum)


def render_grid(state: "GameState") -> List[List[int]]:
    """Return the board as nested lists with the active piece overlaid.

    Cells hold ``0`` when empty and the mapped integer value of the occupying
    shape otherwise.  The board itself is not modified.
    """

    grid = state.board.grid.tolist()
    value = PIECE_VALUES[state.current.shape]
    for x, y in state.active_piece_cells():
        if state.board.contains(x, y):
            grid[y][x] = value
    return grid


__all__ = ["catch_up_step", "next_pace", "render_grid"]
