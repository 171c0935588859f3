"""The Tetris rules engine.

:class:`GameState` owns the settled board, the falling piece, the score and
the drop clock.  A driver feeds it input through :meth:`GameState.enqueue_action`,
advances it once per frame with :meth:`GameState.update` and reads back
:meth:`GameState.occupied_cells` and :meth:`GameState.active_piece_cells` to
draw.  Nothing here knows about windows, keyboards or pixels.
"""

from __future__ import annotations

import logging
import math
import random
from collections import deque
from typing import Deque, Iterator, Optional, Tuple

from .actions import Action
from .bag import PieceBag
from .board import Board
from .config import EngineConfig
from .tetromino import Direction, Piece, Rotation
from .utils import catch_up_step, next_pace


LOGGER = logging.getLogger(__name__)

# Points for every piece that locks, whether or not it clears a line.
LOCK_BONUS = 10
# Points for a single cleared line; each further line in the same lock doubles it.
LINE_BONUS = 100


def line_score(lines: int) -> int:
    """Return the bonus for clearing ``lines`` rows with one piece."""

    if lines <= 0:
        return 0
    return LINE_BONUS * 2 ** (lines - 1)


class GameState:
    """Mutable state and simulation rules for one game.

    The game runs until a freshly spawned piece has nowhere to go, at which
    point :attr:`lost` is set for good.  The engine does not refuse further
    updates after that; drivers are expected to stop calling it.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._rng = rng or random.Random(self.config.seed)
        self.board = Board(self.config.width, self.config.height)
        self.bag = PieceBag(self._rng)
        self.actions: Deque[Action] = deque()
        self.elapsed = 0.0  # seconds since the last gravity drop
        self.pace = self.config.pace_start
        self.score = 0
        self.display_score = 0
        self.lines = 0
        self.pieces = 0
        self.lost = False
        self.current = self.spawn_piece()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_lost(self) -> bool:
        return self.lost

    def occupied(self, piece: Piece) -> bool:
        """Return ``True`` if any cell of ``piece`` is off the board or filled."""

        return any(self.board.is_filled(x, y) for x, y in piece.occupied_cells())

    def unoccupied(self, piece: Piece) -> bool:
        return not self.occupied(piece)

    def occupied_cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(x, y, color)`` for every settled cell."""

        return self.board.occupied_cells()

    def active_piece_cells(self) -> Iterator[Tuple[int, int]]:
        return self.current.occupied_cells()

    @property
    def active_color(self) -> str:
        return self.current.color

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def enqueue_action(self, action: Action) -> None:
        """Queue ``action`` to be applied by a later :meth:`update`."""

        self.actions.append(Action(action))

    def handle(self, action: Action) -> None:
        """Apply a single input token immediately."""

        if action is Action.MOVE_LEFT:
            self.move(Direction.LEFT)
        elif action is Action.MOVE_RIGHT:
            self.move(Direction.RIGHT)
        elif action is Action.ROTATE:
            self.rotate()
        elif action is Action.SOFT_DROP:
            self.drop()
        elif action is Action.HARD_DROP:
            self.hard_drop()

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds.

        At most one queued action is applied per call.  The piece then falls
        one row for every full :attr:`pace` interval accumulated, so a long
        stall produces several single-row drops rather than one jump.

        Raises:
            ValueError: If ``dt`` is negative or not finite.
        """

        if not math.isfinite(dt) or dt < 0:
            raise ValueError(f"Elapsed time must be a finite non-negative number, got {dt}")
        if self.actions:
            self.handle(self.actions.popleft())
        self.elapsed += dt
        while self.elapsed > self.pace:
            self.elapsed -= self.pace
            self.drop()
        self.display_score += catch_up_step(self.score - self.display_score)

    def move(self, direction: Direction) -> bool:
        """Move the current piece if the destination is free."""

        candidate = self.current.move(direction)
        if self.unoccupied(candidate):
            self.current = candidate
            return True
        return False

    def rotate(self) -> bool:
        """Rotate the current piece in place if the result is free."""

        candidate = self.current.rotate()
        if self.unoccupied(candidate):
            self.current = candidate
            return True
        return False

    def drop(self) -> bool:
        """Move the piece down one row, locking it if it cannot move.

        Returns ``True`` if the piece moved and ``False`` if it locked.
        """

        if self.move(Direction.DOWN):
            return True
        self.lock()
        return False

    def hard_drop(self) -> None:
        """Drop the piece as far as it goes and lock it there."""

        while self.move(Direction.DOWN):
            pass
        self.lock()

    def lock(self) -> None:
        """Settle the current piece and bring in the next one.

        Awards the lock bonus, writes the piece into the board, discards any
        input buffered for the locked piece, clears completed rows and spawns
        a new piece.  The game is lost if the new piece does not fit.
        """

        self.add_score(LOCK_BONUS)
        self.board.lock_piece(self.current)
        self.pieces += 1
        LOGGER.debug("Locked %s at (%d, %d)", self.current.shape.value, self.current.x, self.current.y)
        self.actions.clear()
        self.remove_lines()
        self.current = self.spawn_piece()
        if self.occupied(self.current):
            self.lose()

    def remove_lines(self) -> int:
        """Clear completed rows, score them and return how many were removed."""

        cleared = self.board.clear_full_rows()
        if cleared:
            self.lines += cleared
            self.add_score(line_score(cleared))
            self.increase_pace(cleared)
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
        return cleared

    def add_score(self, points: int) -> None:
        self.score += points

    def increase_pace(self, lines: int) -> None:
        """Speed up gravity for ``lines`` cleared rows.

        Only takes effect when ``EngineConfig.accelerate`` is enabled.
        """

        if not self.config.accelerate:
            return
        self.pace = next_pace(self.pace, lines, self.config.pace_decrement, self.config.pace_min)

    def lose(self) -> None:
        if not self.lost:
            LOGGER.info("Game over. Score: %d", self.score)
        self.lost = True

    def spawn_piece(self) -> Piece:
        """Return a new piece at the top of the board.

        The shape is the next draw from the bag.  The column is random,
        chosen so the piece's bounding box lies on the board.
        """

        shape = self.bag.draw()
        x = self._rng.randrange(self.board.width - shape.size + 1)
        return Piece(shape, Rotation.UP, x, 0)


__all__ = ["GameState", "LINE_BONUS", "LOCK_BONUS", "line_score"]
