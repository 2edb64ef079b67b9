"""Text rendering of a game, used for debugging."""

from tilt2048.core.board import Board


def render_board(board: Board) -> str:
    """
    Draw the board, top row first.

    Parameters
    ----------
    board : Board
        The board to draw.

    Returns
    -------
    str
        One line per row, each cell drawn as ``|%4d`` or ``|    `` when empty.
    """
    lines = []
    for line in reversed(board.to_grid()):
        cells = ''.join('|    ' if value == 0 else f'|{value:4d}' for value in line)
        lines.append(f'{cells}|\n')
    return ''.join(lines)


def render_game(board: Board, score: int, max_score: int, game_over: bool) -> str:
    """
    Draw the board followed by the score, the max score and the game status.

    Parameters
    ----------
    board : Board
        The board to draw.
    score : int
        Current score.
    max_score : int
        Best score so far.
    game_over : bool
        Whether the game has ended.

    Returns
    -------
    str
        The drawing, framed by brackets, ending with a line such as ``] 4 (max: 8) (game is not over)``.
    """
    over = 'over' if game_over else 'not over'
    return f'\n[\n{render_board(board)}] {score} (max: {max_score}) (game is {over}) \n'
