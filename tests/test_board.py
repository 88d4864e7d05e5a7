# -*-  coding: utf-8 -*-
"""
Set of test for the board functions.
"""
from unittest import TestCase, main

import numpy as np
from numpy.random import default_rng

from twentyfortyeight.core.gameboard import (
    add_random_tile,
    is_done,
    merge_row,
    next_state,
    rotate_board,
    slide_and_merge,
)
from twentyfortyeight.core.gamemove import Direction, can_move


class TestMergeRow(TestCase):
    """
    Test for the row merge.
    Rows are merged towards their start, each tile merging at most once.
    """

    def test_merge_pair(self):
        """A pair of equal tiles merges into one tile."""
        score, result = merge_row(np.array([2, 2, 0, 0]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4]))

    def test_merge_four_equal_tiles(self):
        """Four equal tiles give two merged tiles, not one."""
        score, result = merge_row(np.array([2, 2, 2, 2]))
        self.assertEqual(score, 8)
        np.testing.assert_array_equal(result, np.array([4, 4]))

    def test_merge_pending_flushed(self):
        """A tile different from the pending one flushes it."""
        score, result = merge_row(np.array([4, 2, 2, 0]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4, 4]))

    def test_merge_three_equal_tiles(self):
        """Only the first two of three equal tiles merge."""
        score, result = merge_row(np.array([0, 8, 8, 8]))
        self.assertEqual(score, 16)
        np.testing.assert_array_equal(result, np.array([16, 8]))

    def test_merge_skips_gaps(self):
        """Empty cells between equal tiles do not prevent merging."""
        score, result = merge_row(np.array([2, 0, 0, 2]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4]))

    def test_no_merge(self):
        """A full row without equal neighbours is unchanged."""
        score, result = merge_row(np.array([2, 4, 8, 16]))
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result, np.array([2, 4, 8, 16]))


class TestSlideAndMerge(TestCase):
    """Test for sliding the whole board to the left."""

    def test_slide_and_merge(self):
        """Rows are compacted to the left with trailing empty cells."""
        board = np.array([[2, 2, 0, 0], [0, 4, 0, 4], [2, 4, 8, 16], [0, 0, 0, 2]])
        score, result = slide_and_merge(board)
        self.assertEqual(score, 12)
        np.testing.assert_array_equal(result, np.array([[4, 0, 0, 0], [8, 0, 0, 0], [2, 4, 8, 16], [2, 0, 0, 0]]))

    def test_input_untouched(self):
        """The input board is not modified."""
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        slide_and_merge(board)
        np.testing.assert_array_equal(board[0], np.array([2, 2, 0, 0]))


class TestRotation(TestCase):
    """Test for board rotation."""

    def test_four_rotations_round_trip(self):
        """Rotating four times by a quarter turn returns the original board."""
        board = np.arange(16).reshape(4, 4)
        result = board
        for _ in range(4):
            result = rotate_board(result)
        np.testing.assert_array_equal(result, board)

    def test_rotation_and_inverse(self):
        """A rotation followed by its inverse returns the original board."""
        board = np.arange(16).reshape(4, 4)
        for direction in Direction:
            np.testing.assert_array_equal(rotate_board(rotate_board(board, k=direction), k=-direction), board)

    def test_up_maps_top_row_to_left_column(self):
        """After the up rotation, sliding left moves tiles towards the top."""
        board = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [2, 0, 0, 0]])
        self.assertTrue(can_move(rotate_board(board, k=Direction.UP)))
        self.assertFalse(can_move(rotate_board(board, k=Direction.DOWN)))
        self.assertFalse(can_move(rotate_board(board, k=Direction.LEFT)))
        self.assertTrue(can_move(rotate_board(board, k=Direction.RIGHT)))


class TestNextState(TestCase):
    """Test for applying a move and dropping a new tile."""

    def test_directions(self):
        """Each direction compacts tiles towards its edge."""
        board = np.array([[0, 0, 0, 0], [0, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        expected = {
            Direction.LEFT: (1, 0),
            Direction.RIGHT: (1, 3),
            Direction.UP: (0, 1),
            Direction.DOWN: (3, 1),
        }
        for direction, cell in expected.items():
            new_board, reward = next_state(board, direction, generator=default_rng(0))
            self.assertEqual(new_board[cell], 2)
            self.assertEqual(reward, 0)
            self.assertEqual(np.count_nonzero(new_board), 2)

    def test_merge_vertical(self):
        """Equal tiles of a column merge when moving down."""
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        new_board, reward = next_state(board, Direction.DOWN, generator=default_rng(0))
        self.assertEqual(new_board[3, 0], 4)
        self.assertEqual(reward, 4)

    def test_invalid_move(self):
        """A move that changes nothing returns the same board and no reward."""
        board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        new_board, reward = next_state(board, Direction.LEFT)
        self.assertIs(new_board, board)
        self.assertEqual(reward, 0)
        self.assertEqual(np.count_nonzero(board), 1)


class TestRandomTile(TestCase):
    """Test for the random tile insertion."""

    def test_add_tile(self):
        """One empty cell receives a 2 or a 4."""
        board = np.zeros((4, 4), dtype=np.int64)
        add_random_tile(board, generator=default_rng(1))
        self.assertEqual(np.count_nonzero(board), 1)
        self.assertIn(board[board != 0][0], [2, 4])

    def test_last_empty_cell(self):
        """The only empty cell is the one filled."""
        board = np.full((4, 4), 8)
        board[2, 1] = 0
        add_random_tile(board)
        self.assertNotEqual(board[2, 1], 0)

    def test_full_board_noop(self):
        """A full board is left unchanged."""
        board = np.full((4, 4), 2)
        add_random_tile(board)
        np.testing.assert_array_equal(board, np.full((4, 4), 2))

    def test_tile_distribution(self):
        """Twos are far more frequent than fours."""
        generator = default_rng(7)
        values = []
        for _ in range(1000):
            board = np.zeros((4, 4), dtype=np.int64)
            add_random_tile(board, generator=generator)
            values.append(int(board.max()))
        self.assertEqual(set(values), {2, 4})
        self.assertGreater(values.count(2), 800)


class TestIsDone(TestCase):
    """Test for the end of game detection."""

    def test_full_board_without_pairs(self):
        """A full board without equal neighbours is over."""
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertTrue(is_done(board))

    def test_horizontal_pair(self):
        """An equal pair in a row keeps the game going."""
        board = np.array([[2, 2, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(is_done(board))

    def test_vertical_pair(self):
        """An equal pair in a column keeps the game going."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [2, 8, 16, 32]])
        self.assertFalse(is_done(board))

    def test_empty_cell(self):
        """An empty cell keeps the game going."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 0, 4], [4, 2, 4, 2]])
        self.assertFalse(is_done(board))

    def test_checkerboard(self):
        """A full checkerboard of two values is over."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertTrue(is_done(board))


if __name__ == '__main__':
    main()
