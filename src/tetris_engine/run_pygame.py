"""Simple pygame front-end for the Tetris engine.

This module is the thin glue the engine leaves to its caller: it turns key
presses into queued actions, calls :meth:`GameState.update` once per frame with
the elapsed time and draws whatever the engine reports.  It is intentionally
lightweight and is meant purely as a demonstration of how the core can be
driven.

Run with: `python -m tetris_engine.run_pygame` (requires the ``play`` extra).
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Optional, Sequence

import pygame

from .actions import Action
from .config import EngineConfig
from .game_state import GameState

# Size of a single board cell in pixels
CELL_SIZE = 30
BACKGROUND = (0, 0, 0)
OUTLINE = (50, 50, 50)

KEY_ACTIONS: Dict[int, Action] = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_UP: Action.ROTATE,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
}

LOGGER = logging.getLogger(__name__)


def _draw_cell(screen: pygame.Surface, x: int, y: int, color: str) -> None:
    rect = pygame.Rect(x * CELL_SIZE, y * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, pygame.Color(color), rect)
    pygame.draw.rect(screen, OUTLINE, rect, 1)


def draw_state(screen: pygame.Surface, state: GameState) -> None:
    """Render settled cells and, while the game is on, the active piece."""

    screen.fill(BACKGROUND)
    for x, y, color in state.occupied_cells():
        _draw_cell(screen, x, y, color)
    if not state.is_lost():
        for x, y in state.active_piece_cells():
            _draw_cell(screen, x, y, state.active_color)


def caption(state: GameState) -> str:
    if state.is_lost():
        return f"Tetris - Game Over - Score: {state.score:06d}"
    return f"Tetris - Score: {state.display_score:06d}"


def handle_key(event: pygame.event.Event, state: GameState) -> None:
    """Queue the engine action bound to ``event``'s key, if any."""

    action = KEY_ACTIONS.get(event.key)
    if action is not None:
        state.enqueue_action(action)


class GameRunner:
    """Own the pygame window and the frame loop around one engine."""

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        self.state = GameState(self.config)
        self._running = False

    def run(self) -> None:
        pygame.init()
        screen = pygame.display.set_mode(
            (self.config.width * CELL_SIZE, self.config.height * CELL_SIZE)
        )
        clock = pygame.time.Clock()
        LOGGER.info("Game started")

        self._running = True
        while self._running:
            dt = clock.tick(self.config.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        self._running = False
                    elif not self.state.is_lost():
                        handle_key(event, self.state)

            # The final board stays on screen once the game is lost.
            if not self.state.is_lost():
                self.state.update(dt)
            draw_state(screen, self.state)
            pygame.display.set_caption(caption(self.state))
            pygame.display.flip()

        pygame.quit()
        LOGGER.info("Game stopped")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play Tetris in a pygame window.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece supply.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (e.g. DEBUG, INFO).")
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    GameRunner(EngineConfig(seed=args.seed)).run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
