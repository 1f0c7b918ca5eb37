"""2048 grid engine: one game, its score, its best score and a single level of undo."""

import logging
from typing import NamedTuple

from numpy import int64, ndarray, zeros
from numpy.random import PCG64DXSM, default_rng

from gridengine.core.gameboard import GameStatus, fill_cells, game_status, has_won, is_game_over, move_board, spawn_tile
from gridengine.core.gamemove import Direction, legal_directions
from gridengine.envs.config import EngineConfig
from gridengine.utils.render import Renderer
from gridengine.utils.storage import MemoryScoreStore, ScoreStore

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Snapshot(NamedTuple):
    """
    Board and score saved right before a move, restored by an undo.
    """

    board: ndarray
    score: int


class Step(NamedTuple):
    """
    Outcome of a move on the engine.

    Attributes
    ----------
    board : ndarray
        Copy of the board after the move and the new tile.
    reward : int
        Score gained by the move.
    moved : bool
        Whether the move changed the board. A move which changed nothing leaves the engine untouched.
    status : GameStatus
        Status of the game after the move.
    won : bool
        True only for the move which first brought the winning tile on the board.
    """

    board: ndarray
    reward: int
    moved: bool
    status: GameStatus
    won: bool


class GridEngine:
    """
    2048 game engine.

    This class owns the state of a single game and applies moves, spawns, undo and terminal checks to it.
    Independent engines share nothing, so several games can live side by side.

    Notes
    -----
    An engine is not safe for concurrent use: callers sharing one must serialize `new_game`, `move` and `undo`.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        store: ScoreStore | None = None,
        renderer: Renderer | None = None,
    ):
        """
        Initialize the engine and start a first game.

        Parameters
        ----------
        config : EngineConfig, optional
            Board size, winning tile and seed (default is a 4x4 board won at 2048).
        store : ScoreStore, optional
            Where the best score is loaded from and saved to (default keeps it in memory).
        renderer : Renderer, optional
            Called after every visible change of the game (default renders nothing).
        """
        self.config = config if config is not None else EngineConfig()
        self.size = self.config.size
        self._store = store if store is not None else MemoryScoreStore()
        self._renderer = renderer
        self._generator = default_rng(PCG64DXSM(self.config.seed))

        self._board: ndarray = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._won = False
        self._snapshot: Snapshot | None = None

        # ##: The best score is read once, at startup.
        stored = self._store.load_best_score()
        self._best_score = int(stored) if stored is not None and stored > 0 else 0

        self.new_game()

    @property
    def board(self) -> ndarray:
        """
        Copy of the current game board.
        """
        return self._board.copy()

    @property
    def score(self) -> int:
        """
        Score of the current game.
        """
        return self._score

    @property
    def best_score(self) -> int:
        """
        Highest score known to the engine, across games.
        """
        return self._best_score

    @property
    def won(self) -> bool:
        """
        Whether the winning tile was reached during this game, even if it was merged further since.
        """
        return self._won

    @property
    def status(self) -> GameStatus:
        """
        Status of the game, derived from the current board.
        """
        return game_status(self._board, self.config.win_tile)

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no more moves are possible, False otherwise.
        """
        return is_game_over(self._board)

    @property
    def can_undo(self) -> bool:
        """
        Whether a move can be undone.
        """
        return self._snapshot is not None

    @property
    def max_tile(self) -> int:
        """
        Highest tile on the board.
        """
        return int(self._board.max())

    @property
    def legal_directions(self) -> list[Direction]:
        """
        Directions which would change the board.
        """
        return legal_directions(self._board)

    def new_game(self, seed: int | None = None) -> ndarray:
        """
        Start a new game: an empty board with two random tiles and a zero score.

        Parameters
        ----------
        seed : int, optional
            Reseed the engine's generator, for a reproducible game.

        Returns
        -------
        ndarray
            Copy of the new game board.

        Notes
        -----
        - Undo is unavailable until a move is made.
        - The best score is kept.
        """
        if seed is not None:
            self._generator = default_rng(PCG64DXSM(seed))

        self._board = zeros((self.size, self.size), dtype=int64)
        self._score = 0
        self._won = False
        self._snapshot = None

        fill_cells(self._board, 2, self._generator)

        _logger.info('New %dx%d game started', self.size, self.size)
        self.render()
        return self.board

    def spawn_tile(self) -> bool:
        """
        Put a new tile (2 or 4) on a random empty cell of the board.

        Returns
        -------
        bool
            True if a tile was added, False if the board is full.
        """
        spawned = spawn_tile(self._board, self._generator)
        _logger.debug('Spawn %s', 'done' if spawned else 'skipped, board is full')
        if spawned:
            self.render()
        return spawned

    def move(self, direction: Direction | int | str) -> Step:
        """
        Apply a move to the game.

        Parameters
        ----------
        direction : Direction, int or str
            The direction of travel (0: left, 1: up, 2: right, 3: down, or the direction name).

        Returns
        -------
        Step
            The new board, the reward, whether it moved, the game status and whether the game was just won.

        Raises
        ------
        InvalidDirectionError
            If the direction is not one of the four directions. The game is left untouched.

        Notes
        -----
        - A move which changes nothing returns a zero reward, adds no tile and keeps the previous undo.
        - After a successful move: the previous state is saved for undo, the score is increased, a new tile is
          added, the best score is updated and the win is checked.
        """
        direction = Direction.parse(direction)
        result = move_board(self._board, direction)
        _logger.debug('Move %s: moved=%s reward=%d', direction.name, result.moved, result.score)

        if not result.moved:
            return Step(self.board, 0, False, self.status, False)

        self._snapshot = Snapshot(self._board.copy(), self._score)
        self._board = result.board
        self._score += result.score
        spawn_tile(self._board, self._generator)

        self._update_best_score()
        won = self._latch_win()

        status = self.status
        if status is GameStatus.LOST:
            _logger.info('Game over with score %d and max tile %d', self._score, self.max_tile)

        self.render()
        return Step(self.board, result.score, True, status, won)

    def undo(self) -> bool:
        """
        Restore the board and score saved before the last move.

        Returns
        -------
        bool
            True if a move was undone, False if there was nothing to undo.

        Notes
        -----
        Only one move can be undone: a second undo without a move in between does nothing.
        """
        if self._snapshot is None:
            _logger.debug('Nothing to undo')
            return False

        self._board, self._score = self._snapshot.board.copy(), self._snapshot.score
        self._snapshot = None

        _logger.debug('Undo restored score %d', self._score)
        self.render()
        return True

    def render(self) -> None:
        """
        Hand the current state to the renderer, if any.
        """
        if self._renderer is not None:
            self._renderer.render(self.board, self._score, self._best_score)

    def _update_best_score(self) -> None:
        if self._score > self._best_score:
            self._best_score = self._score
            self._store.save_best_score(self._best_score)
            _logger.info('New best score: %d', self._best_score)

    def _latch_win(self) -> bool:
        # ##: A game is won once, later tiles of the same value do not count again.
        if self._won or not has_won(self._board, self.config.win_tile):
            return False
        self._won = True
        _logger.info('Tile %d reached with score %d', self.config.win_tile, self._score)
        return True
