"""
Game constants for termsnake.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """Movement directions plus the QUIT intent."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"
    UP = "UP"
    DOWN = "DOWN"
    QUIT = "QUIT"


LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
UP = Direction.UP
DOWN = Direction.DOWN
QUIT = Direction.QUIT
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# (dx, dy) per movement direction. y grows downward (screen rows).
DIR_DELTA: Dict[Direction, Tuple[int, int]] = {
    LEFT:  (-1,  0),
    RIGHT: ( 1,  0),
    UP:    ( 0, -1),
    DOWN:  ( 0,  1),
}

OPPOSITE: Dict[Direction, Direction] = {
    LEFT: RIGHT,
    RIGHT: LEFT,
    UP: DOWN,
    DOWN: UP,
}

# Raw key bytes -> intent
KEY_BINDINGS: Dict[bytes, Direction] = {
    b"a": LEFT,
    b"d": RIGHT,
    b"w": UP,
    b"s": DOWN,
    b"q": QUIT,
    b"\x03": QUIT,  # Ctrl-C arrives as a byte in raw mode
}

# Final byte of an ANSI arrow-key sequence (ESC [ X) -> direction
ARROW_KEYS: Dict[bytes, Direction] = {
    b"A": UP,
    b"B": DOWN,
    b"C": RIGHT,
    b"D": LEFT,
}

# Game settings
BOARD_SIZE = 20
START_HEAD = (4, 1)
START_FOOD = (4, 8)
START_DIRECTION = RIGHT
TICK_SECONDS = 0.1
