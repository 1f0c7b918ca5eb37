# -*- coding: utf-8 -*-
"""
Core mechanics of the 2048 tile-merging game.
"""

from .core import Direction, GameStatus, InvalidDirectionError, move_board
from .envs import EngineConfig, GridEngine

__all__ = ["GridEngine", "EngineConfig", "Direction", "GameStatus", "InvalidDirectionError", "move_board"]
