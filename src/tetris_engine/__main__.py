"""Headless ASCII demo for the Tetris engine.

Run with: `python -m tetris_engine`

Plays a game with random inputs at the configured frame rate for a fixed
number of frames, then prints the board with the active piece overlaid and the
score.  Useful as a smoke test that the engine locks pieces, clears lines and
ends games without any front-end attached.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional, Sequence

from . import Action, EngineConfig, GameState, render_grid
from .board import PIECE_VALUES


LOGGER = logging.getLogger(__name__)

_SYMBOLS = {value: shape.value for shape, value in PIECE_VALUES.items()}


def _print_grid(grid: List[List[int]]) -> None:
    for row in grid:
        print("".join(_SYMBOLS.get(cell, ".") for cell in row))


def run(state: GameState, frames: int, rng: random.Random) -> int:
    """Drive ``state`` for up to ``frames`` frames and return the count run."""

    dt = 1.0 / state.config.fps
    actions = list(Action)
    for frame in range(frames):
        if state.is_lost():
            return frame
        # Roughly one input every few frames, like a player tapping keys.
        if rng.random() < 0.2:
            state.enqueue_action(rng.choice(actions))
        state.update(dt)
    return frames


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--frames", type=int, default=3600, help="Number of frames to simulate.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pieces and inputs.")
    parser.add_argument("--width", type=int, default=10, help="Board width in cells.")
    parser.add_argument("--height", type=int, default=20, help="Board height in cells.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    config = EngineConfig(width=args.width, height=args.height, seed=args.seed)
    state = GameState(config)
    frames = run(state, args.frames, random.Random(args.seed))
    LOGGER.info("Simulated %d frame(s), %d piece(s) locked", frames, state.pieces)

    _print_grid(render_grid(state))
    print(f"Score: {state.score:06d}  Lines: {state.lines}")
    if state.is_lost():
        print("Game Over")


if __name__ == "__main__":
    main()
