"""
Predicates deciding whether a game has ended, and which tilts can still change the board.
"""

from numpy import ndarray, rot90

from tilt2048.config import MAX_PIECE
from tilt2048.core.board import Board
from tilt2048.core.side import Side


def empty_space_exists(board: Board) -> bool:
    """
    Check if at least one cell of the board is empty.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    bool
        True if a cell holds no tile.
    """
    return bool((board.values() == 0).any())


def max_tile_exists(board: Board, max_piece: int = MAX_PIECE) -> bool:
    """
    Check if a tile reached the maximum value.

    Parameters
    ----------
    board : Board
        The board to check.
    max_piece : int, optional
        Value ending the game (default is 2048).

    Returns
    -------
    bool
        True if any tile is equal to ``max_piece``.
    """
    return bool((board.values() == max_piece).any())


def at_least_one_move_exists(board: Board) -> bool:
    """
    Check if any tilt can still be played.

    Parameters
    ----------
    board : Board
        The board to check.

    Returns
    -------
    bool
        True if a cell is empty, or two orthogonally adjacent tiles have the same value.

    Notes
    -----
    Adjacent pairs are compared with shifted slices, so cells on the edges are only compared with the
    neighbours that exist.
    """
    cells = board.values()
    if (cells == 0).any():
        return True
    return bool((cells[:-1] == cells[1:]).any() or (cells[:, :-1] == cells[:, 1:]).any())


def is_game_over(board: Board, max_piece: int = MAX_PIECE) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : Board
        The board to check.
    max_piece : int, optional
        Value ending the game (default is 2048).

    Returns
    -------
    bool
        True if a tile reached ``max_piece`` or no move is left.
    """
    return max_tile_exists(board, max_piece) or not at_least_one_move_exists(board)


def _can_tilt_up(cells: ndarray) -> bool:
    below, above = cells[:, :-1], cells[:, 1:]
    # ##>: A tile with an empty cell above it slides.
    can_slide = (below != 0) & (above == 0)
    # ##>: Two adjacent equal tiles merge.
    can_merge = (below != 0) & (below == above)
    return bool(can_slide.any() or can_merge.any())


def movable_sides(board: Board) -> list[Side]:
    """
    Determine the sides a tilt towards would change the board.

    Parameters
    ----------
    board : Board
        The board to check, left untouched.

    Returns
    -------
    list[Side]
        Sides, in enum order, whose tilt moves or merges at least one tile.
    """
    cells = board.values()
    return [side for side in Side if _can_tilt_up(rot90(cells, k=side.value))]
