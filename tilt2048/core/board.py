"""
Grid of tiles and the reoriented views used to tilt it towards any side.
"""

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from numpy import argwhere, array, array_equal, int64, ndarray, rot90, zeros

from tilt2048.config import DEFAULT_SIZE, MAX_TILE_VALUE, is_integer, is_tile_value
from tilt2048.core.side import Side
from tilt2048.core.tile import Tile

logger = logging.getLogger(__name__)


class BoardView:
    """
    Read/write access to the cells of a board through one orientation.

    Cells are addressed as (col, row). The view holds a numpy view of the board storage, so every
    change made through it is a change of the board itself.
    """

    def __init__(self, cells: ndarray):
        self._cells = cells

    @property
    def size(self) -> int:
        """Number of cells on one side of the board."""
        return self._cells.shape[0]

    def _check_bounds(self, col: int, row: int):
        if not (0 <= col < self.size and 0 <= row < self.size):
            raise IndexError(f'Cell ({col}, {row}) is outside of a board of size {self.size}.')

    def tile(self, col: int, row: int) -> Tile | None:
        """
        Return the tile at (col, row).

        Parameters
        ----------
        col : int
            Column, ``0 <= col < size``.
        row : int
            Row, ``0 <= row < size``.

        Returns
        -------
        Tile | None
            The tile occupying the cell, None if the cell is empty.

        Raises
        ------
        IndexError
            If (col, row) is outside of the board.
        """
        self._check_bounds(col, row)
        value = int(self._cells[col, row])
        if value == 0:
            return None
        return Tile(value, col, row)

    def add_tile(self, tile: Tile):
        """
        Place a tile on its cell.

        Raises
        ------
        IndexError
            If the tile position is outside of the board.
        ValueError
            If the cell is already occupied.
        """
        self._check_bounds(tile.col, tile.row)
        if self._cells[tile.col, tile.row] != 0:
            raise ValueError(f'Cell ({tile.col}, {tile.row}) is already occupied.')
        self._cells[tile.col, tile.row] = tile.value

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """
        Move a tile to (col, row), merging it with the tile already there.

        Parameters
        ----------
        col : int
            Destination column.
        row : int
            Destination row.
        tile : Tile
            Tile to move, read from this view.

        Returns
        -------
        bool
            True if the move merged two tiles.

        Raises
        ------
        IndexError
            If the tile or the destination is outside of the board.
        ValueError
            If the tile isn't on the board, the destination holds a tile of another value, or merging would exceed
            ``MAX_TILE_VALUE``.
        """
        self._check_bounds(tile.col, tile.row)
        self._check_bounds(col, row)
        if self._cells[tile.col, tile.row] != tile.value:
            raise ValueError(f'{tile} is not on the board.')
        if (col, row) == (tile.col, tile.row):
            return False

        # ##: Destination is either empty or holds an equal tile.
        target = self._cells[col, row]
        if target == 0:
            self._cells[col, row] = tile.value
            merged = False
        elif target == tile.value:
            if tile.value > MAX_TILE_VALUE // 2:
                raise ValueError(f'Cannot merge {tile}, the result would exceed {MAX_TILE_VALUE}.')
            self._cells[col, row] = tile.merged_into(col, row).value
            merged = True
        else:
            raise ValueError(f'Cannot move {tile} onto a tile of value {target}.')
        self._cells[tile.col, tile.row] = 0
        return merged


class Board:
    """
    Square grid of tiles.

    Cells are stored as ``[col, row]`` with (0, 0) in the lower-left corner: row ``size - 1`` is the NORTH edge
    and column ``size - 1`` the EAST edge. This storage orientation never changes; other orientations are only
    available through :meth:`viewing_from`.
    """

    def __init__(self, size: int = DEFAULT_SIZE):
        """
        Initialize an empty board.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        """
        if size < 1:
            raise ValueError(f'Board size must be a positive integer, got {size}.')
        self._cells = zeros((size, size), dtype=int64)
        self._canonical = BoardView(self._cells)

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int | None]]) -> 'Board':
        """
        Build a board from explicit values.

        Parameters
        ----------
        grid : Sequence[Sequence[int | None]]
            ``grid[row][col]`` is the value of the tile at (col, row), ``0`` or None for an empty cell.
            Row 0 is the bottom (SOUTH) row.

        Returns
        -------
        Board
            Board holding the given tiles.

        Raises
        ------
        ValueError
            If the grid isn't a non-empty square, or holds a value that isn't a tile value.
        """
        size = len(grid)
        if size == 0 or any(len(line) != size for line in grid):
            raise ValueError('Grid must be a non-empty square matrix.')

        # ##: Check values before the cast, which would truncate floats.
        for line in grid:
            for value in line:
                if value is None or (is_integer(value) and value == 0):
                    continue
                if not is_tile_value(value):
                    raise ValueError(
                        f'Tile value must be a power of two between 2 and {MAX_TILE_VALUE}, got {value!r}.'
                    )
        values = array([[0 if value is None else value for value in line] for line in grid], dtype=int64)

        board = cls(size)
        board._cells[:] = values.T
        return board

    @property
    def size(self) -> int:
        """Number of cells on one side of the board."""
        return self._canonical.size

    def tile(self, col: int, row: int) -> Tile | None:
        """Return the tile at (col, row), None if the cell is empty."""
        return self._canonical.tile(col, row)

    def add_tile(self, tile: Tile):
        """Place a tile on its cell, which must be empty."""
        self._canonical.add_tile(tile)
        logger.debug('Added tile %d at (%d, %d).', tile.value, tile.col, tile.row)

    def move(self, col: int, row: int, tile: Tile) -> bool:
        """Move a tile to (col, row). Return True if it merged with the tile there."""
        return self._canonical.move(col, row, tile)

    @contextmanager
    def viewing_from(self, side: Side | str) -> Iterator[BoardView]:
        """
        Address the board as if it was seen from a side.

        Inside the block, the returned view reads and moves tiles with row ``size - 1`` on the requested
        side. The board keeps its storage orientation: once the block exits, every access through the board
        uses canonical coordinates again. If the block raises, the cells are restored to their state on entry.

        Parameters
        ----------
        side : Side | str
            Side that becomes "up" in the view.

        Yields
        ------
        BoardView
            View sharing the board storage.
        """
        side = Side.parse(side)
        snapshot = self._cells.copy()
        try:
            yield BoardView(rot90(self._cells, k=side.value))
        except Exception:
            self._cells[:] = snapshot
            raise

    def clear(self):
        """Remove all tiles."""
        self._cells.fill(0)

    def values(self) -> ndarray:
        """Copy of the cell values, indexed ``[col, row]``, 0 for empty cells."""
        return self._cells.copy()

    def to_grid(self) -> list[list[int]]:
        """Cell values as ``grid[row][col]``, the layout accepted by :meth:`from_grid`."""
        return self._cells.T.tolist()

    def tiles(self) -> Iterator[Tile]:
        """Iterate over the tiles on the board, column by column."""
        for col, row in argwhere(self._cells != 0):
            yield Tile(int(self._cells[col, row]), int(col), int(row))

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(array_equal(self._cells, other._cells))

    def __repr__(self):
        return f'Board({self.to_grid()})'
