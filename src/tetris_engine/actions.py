"""Input tokens accepted by the engine's action queue."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    # One gravity step: moves the piece down a row or locks it.
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"


__all__ = ["Action"]
