"""State of one game: board, score, max score and terminal flag."""

import logging
from collections.abc import Sequence

from tilt2048.config import GameConfig
from tilt2048.core.board import Board
from tilt2048.core.gameover import is_game_over, movable_sides
from tilt2048.core.side import Side
from tilt2048.core.tile import Tile
from tilt2048.core.tilt import tilt_up
from tilt2048.utils.render import render_game

logger = logging.getLogger(__name__)


class GameSession:
    """
    A game of 2048.

    This class composes the board with the score bookkeeping, and exposes the operations a player (or the
    component spawning new tiles) performs on the game. Placing new tiles is left to the caller.
    """

    def __init__(self, size: int | None = None, config: GameConfig | None = None):
        """
        Initialize a game on an empty board with a score of 0.

        Parameters
        ----------
        size : int, optional
            The size of the square grid, defaults to the size of the configuration.
        config : GameConfig, optional
            Rules of the game (default is a 4x4 board ending at 2048).
        """
        if config is None:
            config = GameConfig() if size is None else GameConfig(size=size)
        elif size is not None and size != config.size:
            raise ValueError(f'Size {size} conflicts with the configured size {config.size}.')

        self._config = config
        self._board = Board(config.size)
        self._score = 0
        self._max_score = 0
        self._game_over = False

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[int | None]],
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
        config: GameConfig | None = None,
    ) -> 'GameSession':
        """
        Build a game in a given state.

        Parameters
        ----------
        grid : Sequence[Sequence[int | None]]
            ``grid[row][col]`` is the value of the tile at (col, row), ``0`` or None for an empty cell.
            Row 0 is the bottom row.
        score : int, optional
            Current score.
        max_score : int, optional
            Best score of the previous games.
        game_over : bool, optional
            Whether the game has ended.
        config : GameConfig, optional
            Rules of the game. Its size is replaced by the size of the grid.

        Returns
        -------
        GameSession
            The game, exactly in the given state.

        Notes
        -----
        The game over flag is stored as given and is what rendering and equality report. It is only recomputed
        from the board by the next ``tilt``, ``add_tile`` or ``game_over()`` call, which also updates the max
        score when the game is over.
        """
        board = Board.from_grid(grid)
        if score < 0 or max_score < 0:
            raise ValueError(f'Scores must be non-negative, got {score} and {max_score}.')

        max_piece = config.max_piece if config is not None else GameConfig().max_piece
        session = cls(config=GameConfig(size=board.size, max_piece=max_piece))
        session._board = board
        session._score = score
        session._max_score = max_score
        session._game_over = game_over
        return session

    @property
    def config(self) -> GameConfig:
        """Rules of the game."""
        return self._config

    @property
    def size(self) -> int:
        """Number of cells on one side of the board."""
        return self._board.size

    @property
    def score(self) -> int:
        """Current score."""
        return self._score

    @property
    def max_score(self) -> int:
        """Best score reached, updated when a game ends."""
        return self._max_score

    @property
    def board(self) -> Board:
        """The board of the game."""
        return self._board

    def tile(self, col: int, row: int) -> Tile | None:
        """
        Return the tile at (col, row), where (0, 0) is the lower-left corner.

        Raises
        ------
        IndexError
            If (col, row) is outside of the board.
        """
        return self._board.tile(col, row)

    def game_over(self) -> bool:
        """
        Check if the game is over.

        Returns
        -------
        bool
            True if a tile reached the max piece, or no move is left.

        Notes
        -----
        When the game is over, the max score is raised to the current score if it's lower.
        """
        self._check_game_over()
        return self._game_over

    def clear(self):
        """Empty the board and reset the score. The max score is kept."""
        self._score = 0
        self._game_over = False
        self._board.clear()

    def add_tile(self, tile: Tile):
        """
        Add a tile to the board.

        Parameters
        ----------
        tile : Tile
            Tile to add, its cell must be empty.

        Raises
        ------
        ValueError
            If the cell is already occupied.
        """
        self._board.add_tile(tile)
        self._check_game_over()

    def tilt(self, side: Side | str) -> bool:
        """
        Tilt the board towards a side.

        Every tile slides as far as possible towards the side. Two tiles adjacent in the direction of motion with
        the same value merge into one tile of twice the value, which is added to the score. A tile resulting from a
        merge doesn't merge again in the same tilt. When three adjacent tiles have the same value, the leading two
        merge and the trailing one doesn't.

        Parameters
        ----------
        side : Side | str
            Side to tilt towards.

        Returns
        -------
        bool
            True if the tilt changed the board.

        Raises
        ------
        ValueError
            If side isn't a side.
        """
        side = Side.parse(side)
        with self._board.viewing_from(side) as view:
            changed, score = tilt_up(view)

        self._score += score
        logger.debug('Tilted %s: changed=%s, score +%d.', side.name, changed, score)
        self._check_game_over()
        return changed

    def movable_sides(self) -> list[Side]:
        """Sides a tilt towards would change the board."""
        return movable_sides(self._board)

    def _check_game_over(self):
        was_over = self._game_over
        self._game_over = is_game_over(self._board, self._config.max_piece)
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
            if not was_over:
                logger.info('Game over with a score of %d (max: %d).', self._score, self._max_score)

    def render(self) -> None:
        """
        Render the game. This method prints the board, the score and the game status to the console.
        """
        print(self)

    def __str__(self):
        return render_game(self._board, self._score, self._max_score, self._game_over)

    def __eq__(self, other):
        if not isinstance(other, GameSession):
            return NotImplemented
        return (
            self._board == other._board
            and self._score == other._score
            and self._max_score == other._max_score
            and self._game_over == other._game_over
        )

    def __repr__(self):
        return (
            f'GameSession({self._board.to_grid()}, score={self._score}, max_score={self._max_score}, '
            f'game_over={self._game_over})'
        )
