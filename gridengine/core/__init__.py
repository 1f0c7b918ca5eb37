# -*- coding: utf-8 -*-
"""
Pure functions of the 2048 grid engine.

It includes the move directions, the single-line slide and merge, directional moves, tile spawns and the
win and game-over checks. Nothing here keeps state between calls.
"""

from .gameboard import (
    GRID_SIZE,
    TILE_SPAWN_PROBS,
    WIN_TILE,
    GameStatus,
    MoveResult,
    empty_cells,
    fill_cells,
    game_status,
    has_won,
    is_game_over,
    move_board,
    slide_and_merge,
    spawn_tile,
    transform_line,
)
from .gamemove import Direction, InvalidDirectionError, can_move, illegal_directions, legal_directions

__all__ = [
    "GRID_SIZE",
    "WIN_TILE",
    "TILE_SPAWN_PROBS",
    "Direction",
    "InvalidDirectionError",
    "GameStatus",
    "MoveResult",
    "transform_line",
    "slide_and_merge",
    "move_board",
    "empty_cells",
    "spawn_tile",
    "fill_cells",
    "is_game_over",
    "has_won",
    "game_status",
    "legal_directions",
    "illegal_directions",
    "can_move",
]
