# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 game.

This module provides the `GridEngine` class, which owns a game board, its score and a single level of undo.
"""

from .config import EngineConfig
from .engine import GridEngine, Snapshot, Step

__all__ = ["GridEngine", "EngineConfig", "Snapshot", "Step"]
