from .constants import EMPTY, WIN_SCORE
from .enums import Player


def count_empty(board) -> int:
    return sum(1 for r in range(board.rows) for c in range(board.cols)
               if board.tile(r, c) == EMPTY)


def evaluate_board(board, player: Player) -> int:
    """
    Desirability of a leaf `board` for `player`.

    Undecided boards: +1 for each of the player's pieces and -1 for each opponent
    piece, counted once per window the cell sits in.
    Decided boards: +/- WIN_SCORE per empty cell, so quicker wins score higher
    and slower losses score less negative.
    """
    winner = board.has_connect_four()
    if winner is None:
        value = 0
        for window in board.win_locations():
            for cell in window:
                if cell == player:
                    value += 1
                elif cell != EMPTY:
                    value -= 1
        return value

    sign = 1 if winner == player else -1
    return sign * WIN_SCORE * count_empty(board)
