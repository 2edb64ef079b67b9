# -*- coding: utf-8 -*-
"""
Game specific configuration.
"""
from dataclasses import dataclass

from numpy import integer

# ##: Default number of cells on one side of the board.
DEFAULT_SIZE = 4

# ##: Largest piece value, reaching it ends the game.
MAX_PIECE = 2048

# ##: Largest tile value a cell can store.
MAX_TILE_VALUE = 2**62


def is_integer(value) -> bool:
    """Check whether a value is an integer, booleans excluded."""
    return isinstance(value, (int, integer)) and not isinstance(value, bool)


def is_power_of_two(value: int) -> bool:
    """
    Check whether a value is a strictly positive power of two.

    Parameters
    ----------
    value : int
        Value to check.

    Returns
    -------
    bool
        True if value is an integer among 1, 2, 4, 8, ...
    """
    return is_integer(value) and value > 0 and value & (value - 1) == 0


def is_tile_value(value: int) -> bool:
    """
    Check whether a value can be carried by a tile.

    Parameters
    ----------
    value : int
        Value to check.

    Returns
    -------
    bool
        True if value is a power of two between 2 and ``MAX_TILE_VALUE``.
    """
    return is_power_of_two(value) and 2 <= value <= MAX_TILE_VALUE


@dataclass(frozen=True)
class GameConfig:
    """
    Rules of one game.

    Attributes
    ----------
    size : int
        Number of cells on one side of the square board.
    max_piece : int
        Tile value that ends the game as soon as it appears on the board.
    """

    size: int = DEFAULT_SIZE
    max_piece: int = MAX_PIECE

    def __post_init__(self):
        if not is_integer(self.size) or self.size < 1:
            raise ValueError(f'Board size must be a positive integer, got {self.size}.')
        if not is_tile_value(self.max_piece) or self.max_piece < 4:
            raise ValueError(f'Max piece must be a power of two greater than 2, got {self.max_piece}.')
