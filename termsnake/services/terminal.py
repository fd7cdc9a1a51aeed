"""
Terminal mode control.

raw_mode() switches the controlling terminal to raw, non-echoing input for
the duration of a with-block and always restores it, along with the
cursor, however the block exits.
"""

import logging
import sys
import termios
import tty
from contextlib import contextmanager
from typing import Iterator, TextIO

from termsnake.services.renderer import HIDE_CURSOR, SHOW_CURSOR

logger = logging.getLogger(__name__)


def _is_tty(stream) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def raw_mode(stdin=None, stdout: TextIO = None) -> Iterator[None]:
    """
    Put *stdin* in raw mode and hide the cursor on *stdout*.

    Non-TTY input (pipes, test streams) is left untouched. Restoration is
    best-effort: failures are logged and never mask the original exit.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    fd = None
    saved = None
    if _is_tty(stdin):
        fd = stdin.fileno()
        saved = termios.tcgetattr(fd)
        tty.setraw(fd)
    else:
        logger.debug("stdin is not a terminal; leaving input mode unchanged")

    try:
        stdout.write(HIDE_CURSOR)
        stdout.flush()
        yield
    finally:
        if saved is not None:
            try:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            except (termios.error, OSError) as e:
                logger.warning("Could not restore terminal mode: %s", e)
        try:
            stdout.write(SHOW_CURSOR)
            stdout.flush()
        except (OSError, ValueError) as e:
            logger.warning("Could not show cursor: %s", e)
