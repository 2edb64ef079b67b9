# -*- coding: utf-8 -*-
"""
Utilities for drawing game boards as text.
"""

from .render import render_board, render_game

__all__ = ["render_board", "render_game"]
