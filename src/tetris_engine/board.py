"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Piece, TetrominoType


Grid = NDArray[np.uint8]

# Mapping from ``TetrominoType`` to the integer stored in the grid.  ``0``
# marks an empty cell.
PIECE_VALUES = {t: i + 1 for i, t in enumerate(TetrominoType)}
_VALUE_PIECES = {value: t for t, value in PIECE_VALUES.items()}


class Board:
    """Settled cells of the playfield.

    The grid is stored row-major, ``grid[y, x]``, with ``y`` growing
    downwards.  The public accessors all take ``(x, y)``.
    """

    def __init__(self, width: int = 10, height: int = 20) -> None:
        self.width = width
        self.height = height
        self.grid: Grid = np.zeros((height, width), dtype=np.uint8)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Optional[TetrominoType]:
        """Return the shape settled at ``(x, y)``, or ``None`` if empty.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.contains(x, y):
            raise IndexError("Cell out of bounds")
        return _VALUE_PIECES.get(int(self.grid[y, x]))

    def set_cell(self, x: int, y: int, shape: Optional[TetrominoType]) -> None:
        """Settle ``shape`` at ``(x, y)``; ``None`` empties the cell.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if not self.contains(x, y):
            raise IndexError("Cell out of bounds")
        self.grid[y, x] = 0 if shape is None else PIECE_VALUES[shape]

    def is_filled(self, x: int, y: int) -> bool:
        """Return ``True`` if ``(x, y)`` is off the board or holds a block.

        Treating off-board coordinates as filled lets collision checks reject
        pieces that leave the playfield with the same test.
        """

        if self.contains(x, y):
            return bool(self.grid[y, x] != 0)
        return True

    def lock_piece(self, piece: Piece) -> None:
        """Write the piece's cells into the grid."""

        coordinates = np.asarray(list(piece.occupied_cells()), dtype=np.int16)
        xs, ys = coordinates.T
        if (
            np.any(xs < 0)
            or np.any(xs >= self.width)
            or np.any(ys < 0)
            or np.any(ys >= self.height)
        ):
            raise IndexError("Block out of bounds")

        self.grid[ys, xs] = np.uint8(PIECE_VALUES[piece.shape])

    def full_rows(self) -> NDArray[np.bool_]:
        """Return a boolean mask of the rows whose every cell is filled."""

        return np.all(self.grid != 0, axis=1)

    def clear_full_rows(self) -> int:
        """Remove completed rows and return how many were removed.

        Rows above a removed row drop by one for each removed row beneath
        them, keeping their order; new empty rows enter at the top.
        """

        full = self.full_rows()
        cleared = int(np.count_nonzero(full))
        if cleared:
            remaining = self.grid[~full]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid = np.vstack((new_rows, remaining))
        return cleared

    def occupied_cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(x, y, color)`` for every settled cell, row by row."""

        ys, xs = np.nonzero(self.grid)
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield x, y, _VALUE_PIECES[int(self.grid[y, x])].color


__all__ = ["Board", "Grid", "PIECE_VALUES"]
