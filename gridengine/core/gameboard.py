"""
Core functionality of the 2048 grid engine: line transforms, directional moves, tile spawns and terminal checks.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array_equal, ndarray, rot90, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from gridengine.core.gamemove import Direction

# ##>: Board side and the tile which wins the game.
GRID_SIZE = 4
WIN_TILE = 2048

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for fast sampling.
_TILE_VALUES = [2, 4]
_TILE_PROBS = [0.9, 0.1]

# ##>: Fallback generator for callers which do not own one.
_GENERATOR = default_rng(PCG64DXSM())


class GameStatus(str, Enum):
    """
    Status of a game, derived from the board after each move.
    """

    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


class MoveResult(NamedTuple):
    """
    Outcome of a directional move.

    Attributes
    ----------
    board : ndarray
        The board after sliding and merging, without any new tile.
    score : int
        Sum of the tiles created by merges.
    moved : bool
        Whether any cell changed.
    """

    board: ndarray
    score: int
    moved: bool


def transform_line(line: ndarray) -> tuple[int, ndarray]:
    """
    Slide and merge one line towards its start, and compute the score.

    Parameters
    ----------
    line : ndarray
        A 1D array holding a row or column in travel order.

    Returns
    -------
    score : int
        The total value of the tiles created by merging.
    new_line : ndarray
        The line after the move, padded with zeros to its original length.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging is a single pass from the start of the line: when three equal tiles are in a row the
      first two merge, and a merged tile never merges again in the same move.
    - The input line is not modified.
    """
    result = zeros_like(line)
    non_zero = line[line != 0]

    # ##: Nothing to merge.
    if len(non_zero) <= 1:
        result[: len(non_zero)] = non_zero
        return 0, result

    merged = []
    score = 0

    # ##: Walk the compacted line, consuming both tiles of a merge.
    i = 0
    while i < len(non_zero) - 1:
        if non_zero[i] == non_zero[i + 1]:
            value = int(non_zero[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(non_zero[i])
            i += 1

    if i == len(non_zero) - 1:
        merged.append(non_zero[-1])

    result[: len(merged)] = merged
    return score, result


def slide_and_merge(board: ndarray) -> tuple[int, ndarray, bool]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D NumPy array.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.
    moved : bool
        True if at least one row changed.

    Notes
    -----
    For other directions, rotate the board before calling this function.
    """
    result = zeros_like(board)
    score = 0
    moved = False

    for i, row in enumerate(board):
        row_score, new_row = transform_line(row)
        score += row_score
        result[i] = new_row
        moved = moved or not array_equal(row, new_row)

    return score, result, moved


def move_board(board: ndarray, direction: Direction | int | str) -> MoveResult:
    """
    Apply a move in the given direction, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. It is not modified.
    direction : Direction, int or str
        The direction of travel (0: left, 1: up, 2: right, 3: down).

    Returns
    -------
    MoveResult
        The new board, the score gained and whether anything moved.

    Raises
    ------
    InvalidDirectionError
        If the direction is not one of the four directions.

    Notes
    -----
    The board is rotated so that the direction of travel points left, slid left, then rotated back.
    """
    turns = int(Direction.parse(direction))
    score, updated_board, moved = slide_and_merge(rot90(board, k=turns))
    return MoveResult(rot90(updated_board, k=-turns).copy(), score, moved)


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    Positions of the empty cells, as (row, col), in row-major order.
    """
    return [(int(cell[0]), int(cell[1])) for cell in argwhere(board == 0)]


def spawn_tile(board: ndarray, generator: Generator | None = None) -> bool:
    """
    Put a new tile on a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. **Modified in-place.**
    generator : Generator, optional
        Random number generator to draw from. A module-level generator is used when omitted.

    Returns
    -------
    bool
        True if a tile was added, False if the board had no empty cell.

    Notes
    -----
    - The cell is chosen uniformly among empty cells.
    - The new tile is a 2 with probability 0.9 and a 4 with probability 0.1.
    """
    rng = generator if generator is not None else _GENERATOR

    available_cells = argwhere(board == 0)
    if len(available_cells) == 0:
        return False

    row, col = available_cells[rng.integers(len(available_cells))]
    board[row, col] = rng.choice(_TILE_VALUES, p=_TILE_PROBS)
    return True


def fill_cells(board: ndarray, number_tile: int, generator: Generator | None = None) -> ndarray:
    """
    Fill empty cells with new tiles (2 or 4).

    Parameters
    ----------
    board : ndarray
        The current state of the game board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    generator : Generator, optional
        Random number generator to draw from. A module-level generator is used when omitted.

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    If there are fewer empty cells than requested, all available cells are filled.
    """
    rng = generator if generator is not None else _GENERATOR

    available_cells = argwhere(board == 0)
    number_tile = min(number_tile, len(available_cells))
    if number_tile > 0:
        values = rng.choice(_TILE_VALUES, size=number_tile, p=_TILE_PROBS)

        # ##: Distinct cells, chosen uniformly.
        chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
        board[tuple(available_cells[chosen_indices].T)] = values
    return board


def is_game_over(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if no move can change the board, False otherwise.

    Notes
    -----
    The neighbour comparison only makes sense on a full board, so any empty cell answers False
    first. Each cell is then compared to its right and below neighbours, which covers every
    adjacent pair exactly once.
    """
    if not np_all(board != 0):
        return False
    return not (np_any(board[:-1] == board[1:]) or np_any(board[:, :-1] == board[:, 1:]))


def has_won(board: ndarray, win_tile: int = WIN_TILE) -> bool:
    """
    Check if the winning tile is on the board.
    """
    return bool(np_any(board == win_tile))


def game_status(board: ndarray, win_tile: int = WIN_TILE) -> GameStatus:
    """
    Derive the status of a game from its board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.
    win_tile : int, optional
        The tile value which wins the game (default is 2048).

    Returns
    -------
    GameStatus
        LOST when no move is possible, WON when a tile reached the winning value, IN_PROGRESS otherwise.
    """
    if is_game_over(board):
        return GameStatus.LOST
    if board.max() >= win_tile:
        return GameStatus.WON
    return GameStatus.IN_PROGRESS
