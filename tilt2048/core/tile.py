"""Tile placed on the board."""

from dataclasses import dataclass

from tilt2048.config import MAX_TILE_VALUE, is_tile_value


@dataclass(frozen=True)
class Tile:
    """
    A value-bearing piece occupying one cell.

    Attributes
    ----------
    value : int
        Power of two, from 2 to ``MAX_TILE_VALUE``.
    col : int
        Column of the cell holding the tile.
    row : int
        Row of the cell holding the tile.
    """

    value: int
    col: int
    row: int

    def __post_init__(self):
        if not is_tile_value(self.value):
            raise ValueError(f'Tile value must be a power of two between 2 and {MAX_TILE_VALUE}, got {self.value!r}.')

    def moved_to(self, col: int, row: int) -> 'Tile':
        """Same tile relocated to (col, row)."""
        return Tile(self.value, col, row)

    def merged_into(self, col: int, row: int) -> 'Tile':
        """Tile resulting from merging this tile with an equal one at (col, row)."""
        return Tile(self.value * 2, col, row)
