"""
Configuration of a grid engine.
"""

from dataclasses import dataclass

from gridengine.core.gameboard import GRID_SIZE, WIN_TILE


@dataclass
class EngineConfig:
    """
    Configuration of a grid engine.

    Attributes
    ----------
    size : int
        Side of the square board.
    win_tile : int
        Tile value which wins the game. Must be a power of two.
    seed : int, optional
        Seed of the engine's random generator. None draws fresh entropy.
    """

    size: int = GRID_SIZE
    win_tile: int = WIN_TILE
    seed: int | None = None

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')

        # ##: Only a merge can create the winning tile, so it is a power of two above the spawned values.
        if self.win_tile < 4 or self.win_tile & (self.win_tile - 1):
            raise ValueError(f'win_tile must be a power of two >= 4, got {self.win_tile}')
