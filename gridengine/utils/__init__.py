# -*- coding: utf-8 -*-
"""
Collaborators of the grid engine: best score persistence and rendering.
"""

from .render import ConsoleRenderer, Renderer
from .storage import MemoryScoreStore, ScoreStore

__all__ = ["ScoreStore", "MemoryScoreStore", "Renderer", "ConsoleRenderer"]
