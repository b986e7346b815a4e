from __future__ import annotations

from typing import Literal

Outcome = Literal["draw", "challenger_win", "defender_win"]


def _check_size(n: int) -> None:
    if n < 3 or n % 2 == 0:
        raise ValueError(f"move count must be odd and at least 3, got {n}")


def resolve(challenger: int, defender: int, n: int) -> Outcome:
    """Decide a round between two move indices of an ``n``-move cyclic game.

    The challenger beats the ``n // 2`` moves immediately before it in the
    ordering and loses to the ``n // 2`` moves after it, wrapping around.
    """
    _check_size(n)
    if not (0 <= challenger < n and 0 <= defender < n):
        raise ValueError(f"move indices must be in [0, {n}), got {challenger} and {defender}")

    if challenger == defender:
        return "draw"

    half = n // 2
    distance = (challenger - defender) % n
    return "challenger_win" if 1 <= distance <= half else "defender_win"


def outcome_matrix(n: int) -> list[list[Outcome]]:
    # Rows are defenders, columns are challengers.
    _check_size(n)
    return [[resolve(col, row, n) for col in range(n)] for row in range(n)]
