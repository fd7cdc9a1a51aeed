"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from termsnake.domain.constants import OPPOSITE, QUIT, VALID_MOVES, Direction
from termsnake.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a direction that avoids walls, its own tail
    and reversing into its neck.

    When *quit_source* is given (normally a KeyboardPlayer on the same
    terminal) it is started and stopped alongside this player, and a QUIT
    staged there ends the game. Its other keys are ignored.
    """

    def __init__(self, rng: Optional[random.Random] = None, quit_source: Optional[Player] = None):
        self.rng = rng or random.Random()
        self.quit_source = quit_source

    def start(self) -> None:
        if self.quit_source is not None:
            self.quit_source.start()

    def stop(self) -> None:
        if self.quit_source is not None:
            self.quit_source.stop()

    def get_move(self, game_state: GameState) -> Direction:
        if self.quit_source is not None and self.quit_source.get_move(game_state) is QUIT:
            return QUIT

        snake = game_state.snake
        current = game_state.direction
        if current is QUIT:
            return QUIT

        # Filter out moves that:
        # 1. Reverse the committed direction
        # 2. Hit walls
        # 3. Hit own tail (except the tail end, which will move)
        valid_moves: List[Direction] = []
        for move in sorted(VALID_MOVES, key=lambda d: d.value):
            if OPPOSITE[move] is current:
                continue

            target = snake.head.moved(move)
            if game_state.board.is_wall(target):
                continue

            if target in snake.tail[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return current

        return self.rng.choice(valid_moves)
