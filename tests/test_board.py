from __future__ import annotations

import pytest

from tetris_engine.board import Board
from tetris_engine.tetromino import Piece, Rotation, TetrominoType


def test_new_board_is_empty() -> None:
    board = Board(6, 8)
    assert board.grid.shape == (8, 6)
    assert list(board.occupied_cells()) == []


def test_cell_accessors_use_x_y_and_reject_out_of_bounds() -> None:
    board = Board(6, 8)
    board.set_cell(5, 7, TetrominoType.T)
    assert board.cell(5, 7) is TetrominoType.T
    assert board.grid[7, 5] != 0
    assert board.cell(0, 0) is None
    with pytest.raises(IndexError):
        board.cell(6, 0)
    with pytest.raises(IndexError):
        board.set_cell(0, -1, TetrominoType.T)


def test_off_board_counts_as_filled() -> None:
    board = Board(4, 4)
    assert board.is_filled(-1, 0)
    assert board.is_filled(0, 4)
    assert not board.is_filled(3, 3)


def test_lock_piece_writes_shape() -> None:
    board = Board(6, 6)
    board.lock_piece(Piece(TetrominoType.I, Rotation.RIGHT, 0, 2))
    assert [board.cell(2, y) for y in range(2, 6)] == [TetrominoType.I] * 4
    assert sum(1 for _ in board.occupied_cells()) == 4


def test_lock_piece_out_of_bounds_raises() -> None:
    board = Board(4, 4)
    with pytest.raises(IndexError):
        board.lock_piece(Piece(TetrominoType.I, Rotation.UP, 1, 0))


def test_clear_single_row_shifts_rows_above() -> None:
    board = Board(4, 5)
    for x in range(4):
        board.set_cell(x, 4, TetrominoType.I)
    board.set_cell(0, 2, TetrominoType.J)
    board.set_cell(1, 3, TetrominoType.S)

    assert board.clear_full_rows() == 1
    assert board.cell(0, 3) is TetrominoType.J
    assert board.cell(1, 4) is TetrominoType.S
    assert sum(1 for _ in board.occupied_cells()) == 2


def test_clear_non_adjacent_rows_keeps_order() -> None:
    board = Board(4, 6)
    for x in range(4):
        board.set_cell(x, 5, TetrominoType.I)
        board.set_cell(x, 3, TetrominoType.O)
    board.set_cell(0, 4, TetrominoType.Z)
    board.set_cell(2, 2, TetrominoType.L)
    board.set_cell(3, 1, TetrominoType.T)

    assert board.clear_full_rows() == 2
    assert board.cell(0, 5) is TetrominoType.Z
    assert board.cell(2, 4) is TetrominoType.L
    assert board.cell(3, 3) is TetrominoType.T
    assert not board.full_rows().any()
    assert all(board.cell(x, y) is None for x in range(4) for y in range(3))


def test_occupied_cells_reports_colors_row_major() -> None:
    board = Board(4, 4)
    board.set_cell(3, 0, TetrominoType.Z)
    board.set_cell(1, 2, TetrominoType.I)
    board.set_cell(0, 2, TetrominoType.O)
    assert list(board.occupied_cells()) == [
        (3, 0, "#FF0000"),
        (0, 2, "#FFFF00"),
        (1, 2, "#00FFFF"),
    ]
