# -*- coding: utf-8 -*-
"""
This module provides the rules of a 2048-like game.

It includes the board and its reoriented views, the tiles, the sides a board can be tilted towards, the upward
slide-and-merge algorithm reused for every side, and the predicates deciding whether the game is over.
"""

from .board import Board, BoardView
from .gameover import at_least_one_move_exists, empty_space_exists, is_game_over, max_tile_exists, movable_sides
from .side import Side
from .tile import Tile
from .tilt import tilt_up

__all__ = [
    "Board",
    "BoardView",
    "Side",
    "Tile",
    "tilt_up",
    "empty_space_exists",
    "max_tile_exists",
    "at_least_one_move_exists",
    "is_game_over",
    "movable_sides",
]
