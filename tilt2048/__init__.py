"""Rules engine of the 2048 sliding-tile puzzle."""

from .config import DEFAULT_SIZE, MAX_PIECE, GameConfig
from .core import Board, Side, Tile
from .game import GameSession

__all__ = ["GameSession", "GameConfig", "Board", "Side", "Tile", "DEFAULT_SIZE", "MAX_PIECE"]
