"""
Snake entity for the game engine.
"""

from typing import List, Optional

from .constants import DIR_DELTA, Direction
from .coord import Coord


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        head: the leading cell
        tail: list of cells, index 0 directly behind the head, last is the tail end
        alive: whether the snake is still alive
        death_reason: e.g., 'wall', 'self', 'quit'
        death_round: the round number when the snake died
    """

    def __init__(self, head: Coord, tail: Optional[List[Coord]] = None):
        self.head = Coord(*head)
        self.tail: List[Coord] = [Coord(*cell) for cell in (tail or [])]
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_round: Optional[int] = None

    @property
    def length(self) -> int:
        return 1 + len(self.tail)

    @property
    def cells(self) -> List[Coord]:
        """Head followed by every tail segment."""
        return [self.head] + self.tail

    def hits_self(self) -> bool:
        return self.head in self.tail

    def next_segment(self, direction: Direction) -> Coord:
        """
        Where a newly grown segment goes.

        With no tail the segment sits one cell behind the head, opposite to
        *direction*. Otherwise the trailing vector of the last two cells of
        head+tail is extended one more cell past the tail end. A single tail
        segment is therefore the anchor for the second one, not the head.
        """
        chain = self.cells
        if len(chain) == 1:
            dx, dy = DIR_DELTA[direction]
            return self.head.offset(-dx, -dy)

        dx, dy = chain[-1] - chain[-2]
        return chain[-1].offset(dx, dy)

    def grow(self, direction: Direction) -> Coord:
        """Append one segment to the tail end and return it."""
        segment = self.next_segment(direction)
        self.tail.append(segment)
        return segment

    def advance(self, direction: Direction) -> None:
        """
        Shift every tail segment into the place of the one ahead of it,
        then move the head one cell in *direction*.
        """
        if self.tail:
            self.tail = [self.head] + self.tail[:-1]
        self.head = self.head.moved(direction)

    def copy(self) -> "Snake":
        clone = Snake(self.head, self.tail)
        clone.alive = self.alive
        clone.death_reason = self.death_reason
        clone.death_round = self.death_round
        return clone

    def __repr__(self):
        return f"<Snake head={tuple(self.head)} length={self.length} alive={self.alive}>"
