# -*- coding: utf-8 -*-
"""
Game sessions built on top of the board rules.

`GameSession` keeps the score, the best score across games and the game over status, and is the entry point for
tilting the board and adding tiles.
"""

from .session import GameSession

__all__ = ["GameSession"]
