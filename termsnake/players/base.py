"""
Base player interface for the game engine.
"""

from typing import Optional

from termsnake.domain.constants import Direction
from termsnake.domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player supplies the staged intent for each tick. The game decides
    whether that intent becomes the committed direction.
    """

    def start(self) -> None:
        """Begin producing input (e.g. spawn a reader thread)."""

    def stop(self) -> None:
        """Stop producing input. Safe to call more than once."""

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        """
        Return the staged intent given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction (including QUIT), or None when there is no input yet
        """
        raise NotImplementedError
