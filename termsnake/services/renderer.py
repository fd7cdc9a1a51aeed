"""
Frame renderer for termsnake.

render_frame() is a pure function of the game state; write_frame() puts
the frame on the terminal after a full-screen clear.
"""

import sys
from typing import List, TextIO

from termsnake.domain.game_state import GameState

CLEAR_SCREEN = "\033[H\033[2J"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

# Raw mode turns off output newline translation, so rows end in CR LF.
LINE_END = "\r\n"

WALL = "#"
EMPTY = "."
FOOD = "A"
SNAKE = "O"


def build_board(state: GameState) -> List[List[str]]:
    """Return the grid of glyphs, indexed [y][x]."""
    board = state.board
    size = board.size
    grid = [
        [WALL if board.is_wall((x, y)) else EMPTY for x in range(size)]
        for y in range(size)
    ]

    fx, fy = state.food
    grid[fy][fx] = FOOD

    # Head and tail share a glyph. A head that has just moved onto the
    # wall ring is still drawn.
    for x, y in state.snake.cells:
        if 0 <= x < size and 0 <= y < size:
            grid[y][x] = SNAKE

    return grid


def render_frame(state: GameState) -> str:
    """
    Serialize *state* into a text frame.

    The first line is ``Score: <snake length>``, followed by one line per
    board row with one glyph per column.
    """
    lines = [f"Score: {state.score}"]
    lines.extend("".join(row) for row in build_board(state))
    return LINE_END.join(lines) + LINE_END


def write_frame(state: GameState, out: TextIO = None) -> None:
    """Clear the screen and draw *state*. Write errors propagate."""
    out = out or sys.stdout
    out.write(CLEAR_SCREEN + render_frame(state))
    out.flush()
