"""
Tests for the domain package - coordinates, board, snake and game state.
"""

import random
import sys
import os

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.domain import (
    Board,
    Coord,
    GameState,
    Snake,
    UP, DOWN, LEFT, RIGHT, QUIT,
)


class TestCoord:
    """Tests for the Coord value type."""

    def test_coord_equality_is_componentwise(self):
        """Coordinates compare by value, including against plain tuples."""
        assert Coord(3, 4) == Coord(3, 4)
        assert Coord(3, 4) != Coord(4, 3)
        assert Coord(3, 4) == (3, 4)

    def test_coord_is_immutable(self):
        """Coordinates cannot be changed in place."""
        cell = Coord(1, 2)
        with pytest.raises(AttributeError):
            cell.x = 5

    def test_moved_follows_screen_axes(self):
        """x grows to the right and y grows downwards."""
        cell = Coord(5, 5)
        assert cell.moved(LEFT) == (4, 5)
        assert cell.moved(RIGHT) == (6, 5)
        assert cell.moved(UP) == (5, 4)
        assert cell.moved(DOWN) == (5, 6)


class TestBoard:
    """Tests for the Board bounds and food placement."""

    def test_wall_ring(self):
        """Only the outermost ring of cells is wall."""
        board = Board(20)
        assert board.is_wall(Coord(0, 5))
        assert board.is_wall(Coord(19, 5))
        assert board.is_wall(Coord(5, 0))
        assert board.is_wall(Coord(5, 19))
        assert not board.is_wall(Coord(1, 1))
        assert not board.is_wall(Coord(18, 18))

    def test_interior_cells_exclude_walls(self):
        """Interior cells cover the board minus its wall ring."""
        board = Board(20)
        cells = board.interior_cells()
        assert len(cells) == 18 * 18
        assert all(board.is_interior(c) for c in cells)
        assert len(set(cells)) == len(cells)

    def test_place_food_avoids_occupied_cells(self):
        """Food never lands on an occupied cell."""
        board = Board(5)
        occupied = [Coord(1, 1), Coord(1, 2), Coord(2, 2), Coord(3, 3)]
        rng = random.Random(1234)

        for _ in range(50):
            food = board.place_food(occupied, rng=rng)
            assert food not in occupied
            assert board.is_interior(food)

    def test_place_food_uses_only_free_cell(self):
        """With one free cell left, food goes there."""
        board = Board(4)
        occupied = [Coord(1, 1), Coord(1, 2), Coord(2, 1)]
        assert board.place_food(occupied) == Coord(2, 2)

    def test_place_food_on_full_board_raises(self):
        """A board with no free cell cannot take food."""
        board = Board(3)
        with pytest.raises(RuntimeError, match="board is full"):
            board.place_food([Coord(1, 1)])

    def test_board_too_small_rejected(self):
        """A board needs at least one interior cell."""
        with pytest.raises(ValueError):
            Board(2)


class TestSnake:
    """Tests for the Snake entity."""

    def test_snake_initialization(self):
        """A new snake is a live head with no tail."""
        snake = Snake(Coord(4, 1))
        assert snake.head == (4, 1)
        assert snake.tail == []
        assert snake.length == 1
        assert snake.alive is True
        assert snake.death_reason is None
        assert snake.death_round is None

    def test_cells_lists_head_first(self):
        """cells() starts at the head and follows the tail."""
        snake = Snake(Coord(5, 5), [Coord(4, 5), Coord(3, 5)])
        assert snake.cells == [(5, 5), (4, 5), (3, 5)]

    def test_first_segment_goes_behind_the_head(self):
        """The first grown segment sits opposite the heading."""
        snake = Snake(Coord(5, 5))
        assert snake.next_segment(RIGHT) == (4, 5)
        assert snake.next_segment(LEFT) == (6, 5)
        assert snake.next_segment(UP) == (5, 6)
        assert snake.next_segment(DOWN) == (5, 4)

    def test_second_segment_anchors_on_tail_not_head(self):
        """A lone tail segment below the head extends further down even after a turn."""
        snake = Snake(Coord(5, 5), [Coord(5, 6)])
        assert snake.next_segment(LEFT) == (5, 7)

    def test_long_tail_extends_straight_from_its_end(self):
        """Later segments continue the line of the last two cells."""
        snake = Snake(Coord(5, 5), [Coord(4, 5), Coord(4, 6)])
        assert snake.next_segment(RIGHT) == (4, 7)

        snake = Snake(Coord(5, 5), [Coord(5, 6), Coord(6, 6), Coord(7, 6)])
        assert snake.next_segment(UP) == (8, 6)

        snake = Snake(Coord(5, 5), [Coord(5, 4), Coord(5, 3)])
        assert snake.next_segment(DOWN) == (5, 2)

    def test_grow_appends_exactly_one_segment(self):
        """Each grow adds one segment and nothing else."""
        snake = Snake(Coord(5, 5), [Coord(4, 5)])
        segment = snake.grow(RIGHT)
        assert segment == (3, 5)
        assert snake.tail == [(4, 5), (3, 5)]

    def test_advance_shifts_tail_onto_previous_positions(self):
        """Every segment takes the place of the one ahead of it."""
        snake = Snake(Coord(5, 5), [Coord(4, 5), Coord(3, 5), Coord(3, 6)])
        old_head, old_tail = snake.head, list(snake.tail)

        snake.advance(UP)

        assert snake.head == (5, 4)
        assert snake.tail[0] == old_head
        for i in range(1, len(snake.tail)):
            assert snake.tail[i] == old_tail[i - 1]

    def test_hits_self(self):
        """The head on any tail cell counts as a collision."""
        assert Snake(Coord(5, 5), [Coord(4, 5), Coord(5, 5)]).hits_self()
        assert not Snake(Coord(5, 5), [Coord(4, 5)]).hits_self()

    def test_copy_is_independent(self):
        """A copied snake shares no state with its source."""
        snake = Snake(Coord(5, 5), [Coord(4, 5)])
        clone = snake.copy()
        snake.advance(RIGHT)
        assert clone.head == (5, 5)
        assert clone.tail == [(4, 5)]


class TestGameState:
    """Tests for GameState direction handling and terminal conditions."""

    @pytest.mark.parametrize("committed, reverse", [
        (RIGHT, LEFT), (LEFT, RIGHT), (UP, DOWN), (DOWN, UP),
    ])
    def test_reversal_is_rejected(self, committed, reverse):
        """Turning straight back keeps the committed direction."""
        state = GameState(Snake(Coord(5, 5)), Coord(9, 9), direction=committed)
        assert state.commit_direction(reverse) is committed
        assert state.direction is committed

    @pytest.mark.parametrize("committed, turn", [
        (RIGHT, UP), (RIGHT, DOWN), (LEFT, UP), (LEFT, DOWN),
        (UP, LEFT), (UP, RIGHT), (DOWN, LEFT), (DOWN, RIGHT),
    ])
    def test_perpendicular_turn_is_adopted(self, committed, turn):
        """A quarter turn becomes the committed direction."""
        state = GameState(Snake(Coord(5, 5)), Coord(9, 9), direction=committed)
        assert state.commit_direction(turn) is turn

    def test_no_input_keeps_direction(self):
        """No key press yet means the snake carries on."""
        state = GameState(Snake(Coord(5, 5)), Coord(9, 9), direction=DOWN)
        assert state.commit_direction(None) is DOWN

    def test_quit_is_always_adopted(self):
        """QUIT is committed whatever the heading."""
        for committed in (LEFT, RIGHT, UP, DOWN):
            state = GameState(Snake(Coord(5, 5)), Coord(9, 9), direction=committed)
            assert state.commit_direction(QUIT) is QUIT

    def test_initial_state(self):
        """The game starts at (4, 1) heading right with food at (4, 8)."""
        state = GameState.initial()
        assert state.snake.head == (4, 1)
        assert state.snake.tail == []
        assert state.food == (4, 8)
        assert state.direction is RIGHT
        assert state.score == 1
        assert state.end_reason() is None

    def test_head_on_right_wall_is_terminal(self):
        """A head sitting on the wall ends the game."""
        state = GameState(Snake(Coord(19, 5)), Coord(9, 9), direction=RIGHT)
        assert state.board.max_bound == 19
        assert state.is_over()
        assert state.end_reason() == "wall"

    def test_head_on_tail_is_terminal(self):
        """A head sitting on its own tail ends the game."""
        state = GameState(Snake(Coord(5, 5), [Coord(5, 6), Coord(5, 5)]), Coord(9, 9))
        assert state.end_reason() == "self"

    def test_quit_is_terminal(self):
        """A committed QUIT ends the game."""
        state = GameState(Snake(Coord(5, 5)), Coord(9, 9), direction=QUIT)
        assert state.end_reason() == "quit"

    def test_snapshot_is_independent(self):
        """Changing a snapshot leaves the live state alone."""
        state = GameState(Snake(Coord(5, 5), [Coord(4, 5)]), Coord(9, 9))
        snap = state.snapshot()
        state.snake.advance(RIGHT)
        state.food = Coord(1, 1)
        assert snap.snake.head == (5, 5)
        assert snap.food == (9, 9)

    def test_gamestate_repr(self):
        """repr() shows the round and the score."""
        repr_str = repr(GameState.initial())
        assert "round=0" in repr_str
        assert "score=1" in repr_str
