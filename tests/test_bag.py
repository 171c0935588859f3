from __future__ import annotations

import random
from collections import Counter

from tetris_engine.bag import PieceBag
from tetris_engine.tetromino import TetrominoType


def test_each_bag_holds_every_shape_four_times() -> None:
    bag = PieceBag(random.Random(7))
    for _ in range(3):
        window = [bag.draw() for _ in range(28)]
        assert Counter(window) == {shape: 4 for shape in TetrominoType}


def test_bag_refills_only_when_empty() -> None:
    bag = PieceBag(random.Random(1))
    bag.draw()
    assert len(bag) == 27
    for _ in range(27):
        bag.draw()
    assert len(bag) == 0
    bag.draw()
    assert len(bag) == 27


def test_same_seed_same_sequence() -> None:
    first = PieceBag(random.Random(42))
    second = PieceBag(random.Random(42))
    assert [first.draw() for _ in range(40)] == [second.draw() for _ in range(40)]

