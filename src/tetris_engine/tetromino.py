"""Tetromino definitions and the immutable falling piece.

Every shape is authored as four 16-bit masks, one per rotation.  The bits
describe a 4x4 box read row by row from the most significant bit, e.g. the
``J`` piece pointing up::

    0100 = 0x4 << 12 = 0x4000
    0100 = 0x4 <<  8 = 0x0400
    1100 = 0xC <<  4 = 0x00C0
    0000 = 0x0 <<  0 = 0x0000
                       ------
                       0x44C0

The masks are decoded once at import into tuples of ``(row, col)`` offsets so
that :meth:`Piece.occupied_cells` never has to touch the bits again.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Dict, Iterator, Tuple

Offsets = Tuple[Tuple[int, int], ...]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    J = "J"
    L = "L"
    O = "O"
    S = "S"
    T = "T"
    Z = "Z"

    @property
    def size(self) -> int:
        """Side of the shape's bounding box, used to bound the spawn column."""

        return SIZES[self]

    @property
    def color(self) -> str:
        return COLORS[self]


class Rotation(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def next(self) -> "Rotation":
        """Return the rotation a quarter turn clockwise from this one."""

        return Rotation((self + 1) % len(Rotation))


class Direction(Enum):
    """Translations available to a piece, as ``(dx, dy)``."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


SIZES: Dict[TetrominoType, int] = {
    TetrominoType.I: 4,
    TetrominoType.J: 3,
    TetrominoType.L: 3,
    TetrominoType.O: 2,
    TetrominoType.S: 3,
    TetrominoType.T: 3,
    TetrominoType.Z: 3,
}

COLORS: Dict[TetrominoType, str] = {
    TetrominoType.I: "#00FFFF",
    TetrominoType.J: "#0000FF",
    TetrominoType.L: "#FF8000",
    TetrominoType.O: "#FFFF00",
    TetrominoType.S: "#00FF00",
    TetrominoType.T: "#8040FF",
    TetrominoType.Z: "#FF0000",
}

# Masks per rotation in ``Rotation`` order: up, right, down, left.
SHAPE_MASKS: Dict[TetrominoType, Tuple[int, int, int, int]] = {
    TetrominoType.I: (0x0F00, 0x2222, 0x00F0, 0x4444),
    TetrominoType.J: (0x44C0, 0x8E00, 0x6440, 0x0E20),
    TetrominoType.L: (0x4460, 0x0E80, 0xC440, 0x2E00),
    TetrominoType.O: (0xCC00, 0xCC00, 0xCC00, 0xCC00),
    TetrominoType.S: (0x06C0, 0x8C40, 0x6C00, 0x4620),
    TetrominoType.T: (0x0E40, 0x4C40, 0x4E00, 0x4640),
    TetrominoType.Z: (0x0C60, 0x4C80, 0xC600, 0x2640),
}


def decode_mask(mask: int) -> Offsets:
    """Return the ``(row, col)`` offsets of the set bits in ``mask``.

    Bits are scanned from bit 15 (row 0, column 0) down to bit 0 (row 3,
    column 3), so the offsets come out in row-major order.
    """

    offsets = []
    for index in range(16):
        if mask & (0x8000 >> index):
            offsets.append(divmod(index, 4))
    return tuple(offsets)


SHAPE_CELLS: Dict[TetrominoType, Tuple[Offsets, ...]] = {
    shape: tuple(decode_mask(mask) for mask in masks)
    for shape, masks in SHAPE_MASKS.items()
}


def shape_blocks(shape: TetrominoType, rotation: Rotation) -> Offsets:
    """Return the local ``(row, col)`` offsets for ``shape`` at ``rotation``."""

    return SHAPE_CELLS[shape][rotation]


@dataclass(frozen=True)
class Piece:
    """A tetromino at a board position.

    ``x`` and ``y`` locate the top-left cell of the 4x4 bounding box and may
    be negative as long as the occupied cells are not.
    """

    shape: TetrominoType
    rotation: Rotation = Rotation.UP
    x: int = 0
    y: int = 0

    @property
    def color(self) -> str:
        return self.shape.color

    def rotate(self) -> "Piece":
        """Return this piece turned a quarter clockwise in place."""

        return replace(self, rotation=self.rotation.next())

    def move(self, direction: Direction) -> "Piece":
        return replace(self, x=self.x + direction.dx, y=self.y + direction.dy)

    def occupied_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the absolute ``(x, y)`` board cells covered by the piece."""

        for row, col in shape_blocks(self.shape, self.rotation):
            yield self.x + col, self.y + row


__all__ = [
    "COLORS",
    "Direction",
    "Piece",
    "Rotation",
    "SHAPE_CELLS",
    "SHAPE_MASKS",
    "SIZES",
    "TetrominoType",
    "decode_mask",
    "shape_blocks",
]
