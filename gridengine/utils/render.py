# -*- coding: utf-8 -*-
"""
Renderers receiving the grid engine state after every visible change.
"""
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from numpy import ndarray


class Renderer(ABC):
    """
    Base Renderer class.
    """

    @abstractmethod
    def render(self, board: ndarray, score: int, best_score: int):
        """
        Draw the current state of a game.

        Parameters
        ----------
        board: ndarray
            Game board to draw
        score: int
            Current score
        best_score: int
            Best score known to the engine
        """


class ConsoleRenderer(Renderer):
    """
    Print the game board to a text stream.

    Each row is printed with tab-separated values, followed by the score line.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def render(self, board: ndarray, score: int, best_score: int):
        # ##: Resolve stdout lazily, so that redirections made after construction are honoured.
        stream = self._stream if self._stream is not None else sys.stdout
        for row in board.tolist():
            print(' \t'.join(map(str, row)), file=stream)
        print(f'score={score} best={best_score}', file=stream)
