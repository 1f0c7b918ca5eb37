from unittest import TestCase, main

import numpy as np
from numpy import array

from gridengine.core.gameboard import move_board
from gridengine.core.gamemove import Direction, InvalidDirectionError, can_move, illegal_directions, legal_directions

generator = np.random.default_rng(42)


def generate_random_board(size: int = 4) -> np.ndarray:
    """Generate a random 2048 game board."""
    board = np.zeros((size, size), dtype=np.int64)
    num_tiles = generator.integers(1, size * size + 1)
    tile_values = generator.choice([2, 4, 8, 16, 32, 64], size=num_tiles)
    indices = generator.choice(size * size, size=num_tiles, replace=False)
    board.flat[indices] = tile_values
    return board


class TestDirection(TestCase):
    def test_parse_members_and_values(self):
        """
        Test if members and integer values are accepted.
        """
        self.assertIs(Direction.parse(Direction.UP), Direction.UP)
        self.assertIs(Direction.parse(0), Direction.LEFT)
        self.assertIs(Direction.parse(3), Direction.DOWN)
        self.assertIs(Direction.parse(np.int64(2)), Direction.RIGHT)
        self.assertIs(Direction.parse(np.random.default_rng(0).integers(1, 2)), Direction.UP)

    def test_parse_rejects_numpy_out_of_range(self):
        """
        Test if numpy integers outside the four directions are rejected.
        """
        for value in (np.int64(4), np.int32(-1), np.bool_(True)):
            with self.subTest(value=value), self.assertRaises(InvalidDirectionError):
                Direction.parse(value)

    def test_parse_names(self):
        """
        Test if names are accepted in any case.
        """
        self.assertIs(Direction.parse('left'), Direction.LEFT)
        self.assertIs(Direction.parse(' Up '), Direction.UP)
        self.assertIs(Direction.parse('RIGHT'), Direction.RIGHT)

    def test_parse_rejects_unknown(self):
        """
        Test if anything else is rejected.
        """
        for value in (4, -1, True, None, 'diagonal', '', 1.0, [0]):
            with self.subTest(value=value), self.assertRaises(InvalidDirectionError):
                Direction.parse(value)

    def test_error_is_value_error(self):
        """
        Test if the error can be caught as a ValueError.
        """
        with self.assertRaises(ValueError):
            Direction.parse('north')


class TestGameMove(TestCase):
    def test_illegal_directions(self):
        """
        Test if illegal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        illegal = illegal_directions(board)
        self.assertEqual(set(illegal), {Direction.LEFT})

    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_locked_board(self):
        """
        Test if a locked board has no legal direction.
        """
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_directions(board), [])
        self.assertFalse(can_move(board))

    def test_can_move(self):
        """
        Test if left moves are detected, by slide or by merge.
        """
        self.assertTrue(can_move(array([[0, 2], [0, 0]])))
        self.assertTrue(can_move(array([[2, 2], [0, 0]])))
        self.assertFalse(can_move(array([[2, 0], [4, 0]])))

    def test_can_move_matches_left_move(self):
        """
        Test if a left move is possible exactly when moving left changes the board.
        """
        for _ in range(100):
            board = generate_random_board()
            with self.subTest(board=board.tolist()):
                self.assertEqual(can_move(board), move_board(board, Direction.LEFT).moved)

    def test_agrees_with_moves(self):
        """
        Test if a direction is legal exactly when moving that way changes the board.
        """
        for _ in range(200):
            board = generate_random_board()
            legal = set(legal_directions(board))
            for direction in Direction:
                with self.subTest(board=board.tolist(), direction=direction):
                    self.assertEqual(move_board(board, direction).moved, direction in legal)


if __name__ == '__main__':
    main()
