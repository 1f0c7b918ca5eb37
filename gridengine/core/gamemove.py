"""
Move directions for the 2048 grid engine, and the queries telling which directions can change a board.
"""

from __future__ import annotations

from enum import IntEnum
from numbers import Integral

from numpy import ndarray


class InvalidDirectionError(ValueError):
    """Raised when a move is requested with something that is not one of the four directions."""


class Direction(IntEnum):
    """
    The four directions of travel.

    The value of each member is the number of counter-clockwise quarter turns which brings the
    direction onto ``LEFT``. Every move is computed as a left slide on the rotated board.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: Direction | int | str) -> Direction:
        """
        Convert user input into a direction.

        Parameters
        ----------
        value : Direction, int or str
            A member, its integer value (0: left, 1: up, 2: right, 3: down) or its name in any case.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        InvalidDirectionError
            If the value does not name one of the four directions.
        """
        if isinstance(value, cls):
            return value

        # ##: Booleans are integers, but never a direction.
        if isinstance(value, Integral) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidDirectionError(f'Unknown direction: {value!r}') from None

        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise InvalidDirectionError(f'Unknown direction: {value!r}') from None

        raise InvalidDirectionError(f'Unknown direction: {value!r}')


def legal_directions_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move would change the board.

    Notes
    -----
    Horizontal and vertical adjacencies are computed once, then shared by opposite directions.
    """
    # ##>: Horizontal adjacency, shared by left and right.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = (left_cols != 0) & (left_cols == right_cols)

    # ##>: Vertical adjacency, shared by up and down.
    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = (top_rows != 0) & (top_rows == bottom_rows)

    # ##>: A tile can slide into an empty neighbour in the direction of travel.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def illegal_directions(board: ndarray) -> list[Direction]:
    """
    Directions which would leave the board unchanged.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        The no-op directions, in enum order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if not mask[direction]]


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Directions which would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        The directions producing a move, in enum order.
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction]]


def can_move(board: ndarray) -> bool:
    """
    Check if any tile can move left on the given board.

    For other directions, rotate the board before calling this function.
    """
    return legal_directions_mask(board)[Direction.LEFT]
