#!/usr/bin/env python3
"""
termsnake - single-player snake in the terminal.

Controls: w/a/s/d or the arrow keys to steer, q (or Ctrl-C) to quit.
Settings are read from SNAKE_* environment variables or a .env file
(see config.py).
"""

import logging
import random
import sys
import time
from typing import Callable, Optional, TextIO

from termsnake.config import Settings, load_settings
from termsnake.domain.board import Board
from termsnake.domain.game_state import GameState
from termsnake.players.base import Player
from termsnake.players.registry import create_player
from termsnake.services.renderer import write_frame
from termsnake.services.terminal import raw_mode

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - Board and game state
      - The player supplying staged intents
      - Rounds (one per tick)
    """

    def __init__(
        self,
        player: Player,
        board: Optional[Board] = None,
        state: Optional[GameState] = None,
        rng: Optional[random.Random] = None,
    ):
        self.player = player
        self.state = state or GameState.initial(board)
        self.rng = rng

    @property
    def round_number(self) -> int:
        return self.state.round_number

    @property
    def game_over(self) -> bool:
        return not self.state.snake.alive

    @property
    def end_reason(self) -> Optional[str]:
        """Why the snake died ('wall', 'self' or 'quit'), or None while it is alive."""
        return self.state.snake.death_reason

    def run_round(self) -> bool:
        """
        Execute one tick:
          1) Commit the staged intent unless it reverses the snake
          2) Stop if the head is on a wall, on the tail, or the player quit
          3) Eat food if the head is on it (grow + re-place food)
          4) Shift the tail onto the pre-move positions
          5) Advance the head

        Returns:
            True when the game is over (nothing was mutated this tick).
        """
        if self.game_over:
            return True

        state = self.state
        snake = state.snake

        state.commit_direction(self.player.get_move(state.snapshot()))

        reason = state.end_reason()
        if reason is not None:
            self.end_game(reason)
            return True

        if snake.head == state.food:
            eaten = state.food
            snake.grow(state.direction)
            state.food = state.board.place_food(snake.cells, rng=self.rng)
            logger.debug("Ate food at %s; length %d, new food at %s", eaten, snake.length, state.food)

        snake.advance(state.direction)
        state.round_number += 1
        return False

    def end_game(self, reason: str) -> None:
        snake = self.state.snake
        snake.alive = False
        snake.death_reason = reason
        snake.death_round = self.state.round_number
        logger.info(
            "Game over after %d rounds (%s). Score: %d",
            self.state.round_number, reason, self.state.score,
        )

    def run(
        self,
        tick_seconds: float,
        out: TextIO = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> GameState:
        """
        Render, step, sleep until the game ends. Returns the final state.
        """
        out = out or sys.stdout
        while True:
            write_frame(self.state, out)
            if self.run_round():
                return self.state
            sleep(tick_seconds)


def configure_logging(settings: Settings) -> None:
    kwargs = {}
    if settings.log_file:
        kwargs["filename"] = settings.log_file
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        **kwargs,
    )


def run_game(settings: Settings, stdin=None, stdout: TextIO = None) -> GameState:
    """
    Play one game on the given terminal streams.

    The terminal is in raw mode only while the game runs; it is restored
    on every exit path, including errors from rendering or food placement.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    player = create_player(settings.player, getattr(stdin, "buffer", stdin))
    game = SnakeGame(player)
    logger.info("Starting game: player=%s tick=%.3fs", settings.player, settings.tick_seconds)

    with raw_mode(stdin, stdout):
        player.start()
        try:
            return game.run(settings.tick_seconds, stdout)
        finally:
            player.stop()


def main() -> int:
    settings = load_settings()
    configure_logging(settings)

    final_state = run_game(settings)
    print(f"Game over! Score: {final_state.score}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
