"""
Registry for player kinds.

Maps a kind key (e.g. 'keyboard', 'random') to a factory that builds the
player. To add a new kind, write the Player subclass and add an entry to
PLAYER_FACTORIES.
"""

from typing import BinaryIO, Callable, Dict

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer


PLAYER_FACTORIES: Dict[str, Callable[[BinaryIO], Player]] = {
    "keyboard": lambda stream: KeyboardPlayer(stream),
    # q / Ctrl-C on the terminal still ends an autopilot game
    "random": lambda stream: RandomPlayer(quit_source=KeyboardPlayer(stream)),
}

# Canonical list of available kinds (for config validation)
AVAILABLE_PLAYERS = list(PLAYER_FACTORIES.keys())


def create_player(kind: str, stream: BinaryIO) -> Player:
    """
    Build a player of the given kind.

    Args:
        kind: One of 'keyboard' or 'random'. Empty means 'keyboard'.
        stream: Binary input stream handed to players that read keys.

    Returns:
        A new Player instance.

    Raises:
        ValueError: If kind is not recognized.
    """
    kind = (kind or "keyboard").strip().lower()

    if kind not in PLAYER_FACTORIES:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player kind '{kind}'. Available kinds: {available}")

    return PLAYER_FACTORIES[kind](stream)
