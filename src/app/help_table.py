from __future__ import annotations

from tabulate import tabulate

from moves import MoveSet
from protocol import outcome_matrix

CORNER_HEADER = "v PC\\User >"

_CELL_TEXT = {
    "challenger_win": "Win",
    "defender_win": "Lose",
    "draw": "Draw",
}


def format_help_table(moves: MoveSet) -> str:
    """Render who wins for every pair of moves, from the user's side.

    Rows are the computer's moves and columns are the user's moves.
    """
    matrix = outcome_matrix(len(moves))
    rows = [[pc_move] + [_CELL_TEXT[cell] for cell in matrix[row]] for row, pc_move in enumerate(moves)]
    headers = [CORNER_HEADER] + list(moves)
    return "Results are from the user's point of view.\n" + tabulate(rows, headers=headers, tablefmt="grid")
