"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
terminal concerns (raw mode, rendering, keyboard threads).
"""

from .constants import UP, DOWN, LEFT, RIGHT, QUIT, VALID_MOVES, Direction
from .coord import Coord
from .board import Board
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'QUIT', 'VALID_MOVES', 'Direction',
    'Coord',
    'Board',
    'Snake',
    'GameState',
]
