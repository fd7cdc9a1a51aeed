"""
Keyboard player - reads raw key bytes on a background thread.

The reader thread and the tick loop share a single latest-value register
(StagedIntent). Every recognised key press overwrites it; the tick loop
reads whatever is there without consuming it.
"""

import io
import logging
import os
import select
import threading
from typing import BinaryIO, Optional

from termsnake.domain.constants import ARROW_KEYS, KEY_BINDINGS, QUIT, Direction
from termsnake.domain.game_state import GameState
from .base import Player

logger = logging.getLogger(__name__)

ESC = b"\x1b"
CSI = b"["

# How often a blocked reader wakes up to check for stop()
POLL_SECONDS = 0.05


class StagedIntent:
    """Lock-guarded latest-value cell. Last write wins."""

    def __init__(self, value: Optional[Direction] = None):
        self._value = value
        self._lock = threading.Lock()

    def set(self, value: Direction) -> None:
        with self._lock:
            self._value = value

    def get(self) -> Optional[Direction]:
        with self._lock:
            return self._value


class KeyDecoder:
    """
    Turns a byte stream into intents.

    Plain WASD/q bytes map directly. ANSI arrow keys arrive as three bytes
    (ESC, '[', letter) and are only mapped once the whole sequence is seen,
    so the trailing letter is never taken for a plain key. A byte that does
    not complete an arrow sequence is decoded as a plain key.
    """

    def __init__(self):
        self._pending = b""

    def feed(self, byte: bytes) -> Optional[Direction]:
        if self._pending == ESC:
            self._pending = b""
            if byte == CSI:
                self._pending = ESC + CSI
                return None
        elif self._pending == ESC + CSI:
            self._pending = b""
            if byte in ARROW_KEYS:
                return ARROW_KEYS[byte]
        if byte == ESC:
            self._pending = ESC
            return None
        return KEY_BINDINGS.get(byte)


class KeyboardPlayer(Player):
    """
    Player driven by the controlling terminal.

    The stream is expected to already be in raw mode (see
    services.terminal.raw_mode). Any binary stream works; streams with a
    file descriptor are polled with select so stop() is honoured promptly.
    """

    def __init__(self, stream: BinaryIO, poll_seconds: float = POLL_SECONDS):
        self.stream = stream
        self.poll_seconds = poll_seconds
        self.intent = StagedIntent()
        self._decoder = KeyDecoder()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._read_loop, name="keyboard-reader", daemon=True)
        self._thread.start()
        logger.debug("Keyboard reader started")

    def stop(self, timeout: Optional[float] = 1.0) -> None:
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def get_move(self, game_state: GameState) -> Optional[Direction]:
        return self.intent.get()

    def _fileno(self) -> Optional[int]:
        try:
            return self.stream.fileno()
        except (AttributeError, io.UnsupportedOperation, ValueError):
            return None

    def _read_byte(self, fd: Optional[int]) -> Optional[bytes]:
        """
        Read one byte. Returns None when stop() was requested first and
        b"" on end of stream.
        """
        if fd is None:
            return self.stream.read(1)

        while not self._stop_event.is_set():
            readable, _, _ = select.select([fd], [], [], self.poll_seconds)
            if readable:
                return os.read(fd, 1)
        return None

    def _read_loop(self) -> None:
        fd = self._fileno()
        try:
            while not self._stop_event.is_set():
                try:
                    byte = self._read_byte(fd)
                except (OSError, ValueError) as e:
                    logger.error("Error reading from stdin: %s", e)
                    break

                if byte is None:
                    break
                if not byte:
                    logger.warning("Input stream closed; no further key presses will be read")
                    break

                direction = self._decoder.feed(byte)
                if direction is None:
                    continue

                self.intent.set(direction)
                if direction is QUIT:
                    break
        finally:
            logger.debug("Keyboard reader stopped")
