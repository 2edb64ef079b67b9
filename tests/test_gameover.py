from unittest import TestCase, main

import numpy as np

from tilt2048.core.board import Board
from tilt2048.core.gameover import (
    at_least_one_move_exists,
    empty_space_exists,
    is_game_over,
    max_tile_exists,
    movable_sides,
)
from tilt2048.core.side import Side

DEADLOCK = [[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]]


class TestGameOver(TestCase):
    def test_empty_space(self):
        """
        Test if empty cells are detected.
        """
        self.assertTrue(empty_space_exists(Board(4)))
        self.assertTrue(empty_space_exists(Board.from_grid([[2, 4], [0, 8]])))
        self.assertFalse(empty_space_exists(Board.from_grid([[2, 4], [4, 8]])))

    def test_max_tile(self):
        """
        Test if the max piece is detected anywhere on the board.
        """
        self.assertFalse(max_tile_exists(Board.from_grid([[1024, 0], [0, 4096]])))
        self.assertTrue(max_tile_exists(Board.from_grid([[0, 0], [0, 2048]])))
        self.assertTrue(max_tile_exists(Board.from_grid([[0, 16], [0, 0]]), max_piece=16))

    def test_move_exists(self):
        """
        Test if moves are found on edges and in the interior, along both axes.
        """
        # ##>: Equal pair on the top edge, horizontally.
        self.assertTrue(at_least_one_move_exists(Board.from_grid([[2, 4, 2], [4, 2, 4], [8, 8, 2]])))
        # ##>: Equal pair on the right edge, vertically.
        self.assertTrue(at_least_one_move_exists(Board.from_grid([[2, 4, 2], [4, 2, 8], [2, 4, 8]])))
        # ##>: Equal pair in the interior.
        self.assertTrue(at_least_one_move_exists(Board.from_grid([[2, 4, 2], [4, 16, 4], [2, 16, 2]])))
        # ##>: Empty cell in a corner.
        self.assertTrue(at_least_one_move_exists(Board.from_grid([[2, 4, 2], [4, 2, 4], [2, 4, 0]])))

    def test_no_move(self):
        """
        Test if a full board without equal neighbours has no move.
        """
        self.assertFalse(at_least_one_move_exists(Board.from_grid(DEADLOCK)))
        self.assertFalse(at_least_one_move_exists(Board.from_grid([[2]])))
        # ##>: Equal values on a diagonal don't merge.
        self.assertFalse(at_least_one_move_exists(Board.from_grid([[2, 4], [4, 2]])))

    def test_is_game_over(self):
        """
        Test both ways of ending a game.
        """
        self.assertTrue(is_game_over(Board.from_grid(DEADLOCK)))
        # ##>: The max piece ends the game even with moves left.
        self.assertTrue(is_game_over(Board.from_grid([[2048, 0], [0, 0]])))
        self.assertFalse(is_game_over(Board.from_grid([[1024, 1024], [0, 0]])))
        self.assertFalse(is_game_over(Board(4)))

    def test_predicates_are_pure(self):
        """
        Test if the predicates leave the board untouched.
        """
        board = Board.from_grid([[2, 2, 0], [4, 0, 4], [0, 8, 8]])
        values = board.values()
        is_game_over(board)
        movable_sides(board)
        np.testing.assert_array_equal(board.values(), values)


class TestMovableSides(TestCase):
    def test_single_tile(self):
        """
        Test if a tile in a corner can only move away from its edges.
        """
        board = Board.from_grid([[2, 0, 0], [0, 0, 0], [0, 0, 0]])
        self.assertEqual(movable_sides(board), [Side.NORTH, Side.EAST])

    def test_merge_only(self):
        """
        Test if a merge along one axis makes both of its sides movable.
        """
        board = Board.from_grid([[2, 2], [4, 8]])
        self.assertEqual(movable_sides(board), [Side.EAST, Side.WEST])

    def test_no_sides(self):
        """
        Test if empty and deadlocked boards have no movable side.
        """
        self.assertEqual(movable_sides(Board(4)), [])
        self.assertEqual(movable_sides(Board.from_grid(DEADLOCK)), [])


if __name__ == '__main__':
    main()
