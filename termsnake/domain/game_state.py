"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Optional

from .board import Board
from .constants import OPPOSITE, QUIT, START_DIRECTION, START_FOOD, START_HEAD, Direction
from .coord import Coord
from .snake import Snake


class GameState:
    """
    The full state of a single-player game.

    Attributes:
        snake: the player's snake
        food: cell holding the food
        direction: the committed direction driving the head. This is not
            the latest key press; a staged intent only becomes the committed
            direction through commit_direction()
        board: board bounds
        round_number: how many ticks have been applied (0-based)
    """

    def __init__(
        self,
        snake: Snake,
        food: Coord,
        direction: Direction = START_DIRECTION,
        board: Optional[Board] = None,
        round_number: int = 0,
    ):
        self.snake = snake
        self.food = Coord(*food)
        self.direction = direction
        self.board = board or Board()
        self.round_number = round_number

    @classmethod
    def initial(cls, board: Optional[Board] = None) -> "GameState":
        """Head at the start cell, no tail, fixed first food, moving right."""
        return cls(
            snake=Snake(Coord(*START_HEAD)),
            food=Coord(*START_FOOD),
            direction=START_DIRECTION,
            board=board,
        )

    @property
    def score(self) -> int:
        return self.snake.length

    def commit_direction(self, intent: Optional[Direction]) -> Direction:
        """
        Adopt *intent* as the committed direction unless it reverses it.

        QUIT is always adopted. ``None`` (no input yet) changes nothing.
        """
        if intent is None:
            return self.direction
        if intent is QUIT or self.direction is QUIT:
            self.direction = QUIT
        elif OPPOSITE[intent] is not self.direction:
            self.direction = intent
        return self.direction

    def end_reason(self) -> Optional[str]:
        """
        Why the game is over, or None while it is live.

        Returns one of 'wall', 'self' or 'quit'.
        """
        if self.board.is_wall(self.snake.head):
            return "wall"
        if self.snake.hits_self():
            return "self"
        if self.direction is QUIT:
            return "quit"
        return None

    def is_over(self) -> bool:
        return self.end_reason() is not None

    def snapshot(self) -> "GameState":
        """Independent copy for readers outside the tick loop."""
        return GameState(
            snake=self.snake.copy(),
            food=self.food,
            direction=self.direction,
            board=self.board,
            round_number=self.round_number,
        )

    def __repr__(self):
        return (
            f"<GameState round={self.round_number}, head={tuple(self.snake.head)}, "
            f"food={tuple(self.food)}, direction={self.direction.value}, score={self.score}>"
        )
