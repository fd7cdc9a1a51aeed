"""
Board entity - fixed square grid with a one-cell wall ring.
"""

import logging
import random
import time
from typing import Iterable, List, Optional

from .constants import BOARD_SIZE
from .coord import Coord

logger = logging.getLogger(__name__)


class Board:
    """
    A square grid of ``size`` x ``size`` cells.

    Cells with a coordinate of 0 or ``size - 1`` on either axis form the
    wall ring. Everything else is interior (playable). Walls are only drawn
    by the renderer; collision is plain arithmetic against the bounds.
    """

    def __init__(self, size: int = BOARD_SIZE):
        if size < 3:
            raise ValueError(f"Board size must be at least 3, got {size}.")
        self.size = size

    @property
    def min_bound(self) -> int:
        return 0

    @property
    def max_bound(self) -> int:
        return self.size - 1

    def is_wall(self, cell: Coord) -> bool:
        x, y = cell
        return x in (self.min_bound, self.max_bound) or y in (self.min_bound, self.max_bound)

    def is_interior(self, cell: Coord) -> bool:
        x, y = cell
        return self.min_bound < x < self.max_bound and self.min_bound < y < self.max_bound

    def interior_cells(self) -> List[Coord]:
        """All interior cells in a fixed column-major scan order."""
        return [
            Coord(x, y)
            for x in range(self.min_bound + 1, self.max_bound)
            for y in range(self.min_bound + 1, self.max_bound)
        ]

    def free_cells(self, occupied: Iterable[Coord]) -> List[Coord]:
        taken = set(occupied)
        return [cell for cell in self.interior_cells() if cell not in taken]

    def place_food(self, occupied: Iterable[Coord], rng: Optional[random.Random] = None) -> Coord:
        """
        Pick a uniformly random interior cell not in *occupied*.

        Args:
            occupied: cells held by the snake (head and every tail segment)
            rng: random source; a fresh time-seeded one is used when omitted

        Returns:
            The chosen cell.

        Raises:
            RuntimeError: if every interior cell is occupied.
        """
        candidates = self.free_cells(occupied)
        if not candidates:
            raise RuntimeError("No free interior cell left to place food; the board is full.")

        if rng is None:
            rng = random.Random(time.time_ns())
        cell = rng.choice(candidates)
        logger.debug("Placed food at %s (%d candidates)", cell, len(candidates))
        return cell

    def __repr__(self):
        return f"<Board size={self.size}>"
