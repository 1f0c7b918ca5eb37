# -*- coding: utf-8 -*-
"""
Best score persistence used by the grid engine.
"""
from abc import ABC, abstractmethod
from typing import Optional


class ScoreStore(ABC):
    """
    Base class for best score persistence.
    """

    @abstractmethod
    def load_best_score(self) -> Optional[int]:
        """
        Returns the stored best score, or None if nothing was stored yet.
        """

    @abstractmethod
    def save_best_score(self, score: int):
        """
        Stores a new best score.

        Parameters
        ----------
        score: int
            The best score to keep
        """


class MemoryScoreStore(ScoreStore):
    """
    Keep the best score in memory, for the lifetime of the process.
    """

    def __init__(self, best_score: Optional[int] = None):
        self._best_score = best_score

    def load_best_score(self) -> Optional[int]:
        return self._best_score

    def save_best_score(self, score: int):
        self._best_score = score
