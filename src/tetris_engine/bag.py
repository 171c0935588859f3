"""Bag randomizer for the piece supply."""

from __future__ import annotations

import random
from typing import List, Optional

from .tetromino import TetrominoType


# Each refill holds every shape this many times.
COPIES_PER_BAG = 4


class PieceBag:
    """Shuffled reservoir of upcoming tetromino types.

    A full bag holds every shape :data:`COPIES_PER_BAG` times (28 entries).
    Pieces are drawn from the end and the bag is refilled with a fresh shuffle
    once it runs dry, so each run of 28 draws contains every shape exactly
    four times.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._items: List[TetrominoType] = []

    def __len__(self) -> int:
        return len(self._items)

    def _refill(self) -> None:
        self._items = list(TetrominoType) * COPIES_PER_BAG
        self._rng.shuffle(self._items)

    def draw(self) -> TetrominoType:
        """Remove and return the next shape."""

        if not self._items:
            self._refill()
        return self._items.pop()


__all__ = ["COPIES_PER_BAG", "PieceBag"]
