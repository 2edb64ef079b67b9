"""
Slide and merge tiles towards the top of a board view.

Every tilt direction reuses this single upward algorithm: the board is first viewed from the requested side,
so that "up" in the view is the direction of motion.
"""

from numpy import zeros

from tilt2048.core.board import BoardView


def tilt_up(view: BoardView) -> tuple[bool, int]:
    """
    Slide every tile of the view towards the top row, merging equal tiles.

    Parameters
    ----------
    view : BoardView
        The board, oriented so that the direction of motion is increasing row. **Modified in-place.**

    Returns
    -------
    changed : bool
        True if at least one tile moved or merged.
    score : int
        Sum of the values of the tiles created by merges.

    Notes
    -----
    - Columns are processed independently, scanning from the row below the top edge down to row 0.
    - Each tile moves to the nearest occupied cell above it if that tile has the same value and wasn't produced
      by a merge during this tilt, otherwise it stops right below that tile (or on the top edge).
    - A tile produced by a merge never merges again in the same tilt.
    - When three equal tiles are adjacent in the direction of motion, the leading two merge and the trailing one
      stops behind the result.
    """
    size = view.size
    top_row = size - 1
    changed = False
    score = 0

    for col in range(size):
        # ##: Destination rows already holding a merged tile.
        merged = zeros(size, dtype=bool)

        for row in range(top_row - 1, -1, -1):
            tile = view.tile(col, row)
            if tile is None:
                continue

            # ##: Nearest occupied cell above, or the top edge.
            pointer = row + 1
            while pointer < top_row and view.tile(col, pointer) is None:
                pointer += 1
            target = view.tile(col, pointer)

            if target is None:
                view.move(col, pointer, tile)
                changed = True
            elif target.value == tile.value and not merged[pointer]:
                view.move(col, pointer, tile)
                merged[pointer] = True
                score += tile.value * 2
                changed = True
            elif pointer > row + 1:
                view.move(col, pointer - 1, tile)
                changed = True

    return changed, score
