"""
Runtime settings for termsnake.

Values come from the environment (optionally seeded from a .env file by
python-dotenv). With nothing set the game runs at the reference speed with
keyboard input.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from termsnake.domain.constants import TICK_SECONDS
from termsnake.players.registry import AVAILABLE_PLAYERS


@dataclass(frozen=True)
class Settings:
    tick_seconds: float = TICK_SECONDS
    player: str = "keyboard"
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def _tick_seconds(raw: Optional[str]) -> float:
    if raw is None or raw.strip() == "":
        return TICK_SECONDS
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"SNAKE_TICK_SECONDS must be a number, got {raw!r}")
    if value <= 0:
        raise ValueError(f"SNAKE_TICK_SECONDS must be positive, got {value}")
    return value


def load_settings(load_env_file: bool = True) -> Settings:
    """
    Build Settings from SNAKE_* environment variables.

    Raises:
        ValueError: if a variable holds an unusable value.
    """
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    player = (os.getenv("SNAKE_PLAYER") or "keyboard").strip().lower()
    if player not in AVAILABLE_PLAYERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"SNAKE_PLAYER must be one of: {available}; got {player!r}")

    log_level = (os.getenv("SNAKE_LOG_LEVEL") or "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"SNAKE_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(
        tick_seconds=_tick_seconds(os.getenv("SNAKE_TICK_SECONDS")),
        player=player,
        log_level=log_level,
        log_file=os.getenv("SNAKE_LOG_FILE") or None,
    )
