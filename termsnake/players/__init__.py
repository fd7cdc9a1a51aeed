"""
Player implementations for termsnake.

This module contains the player abstractions and implementations
that supply the staged intent driving the snake.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer, StagedIntent
from .random_player import RandomPlayer
from .registry import create_player, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'KeyboardPlayer',
    'StagedIntent',
    'RandomPlayer',
    'create_player',
    'AVAILABLE_PLAYERS',
]
