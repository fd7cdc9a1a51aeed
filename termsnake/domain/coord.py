"""
Coordinate value type for the grid.
"""

from typing import NamedTuple

from .constants import DIR_DELTA, Direction


class Coord(NamedTuple):
    """An (x, y) grid cell. x grows to the right, y grows downward."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Coord":
        return Coord(self.x + dx, self.y + dy)

    def moved(self, direction: Direction) -> "Coord":
        """Return the neighbouring cell one step in *direction*."""
        dx, dy = DIR_DELTA[direction]
        return self.offset(dx, dy)

    def __sub__(self, other: "Coord") -> tuple:
        return (self.x - other.x, self.y - other.y)
