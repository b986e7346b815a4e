"""
Exception hierarchy for the HMAC rock-paper-scissors game.

Configuration errors (bad move catalogs) are fatal to session creation.
Input errors (a bad menu index) are recoverable and leave the session as it was.
"""

from __future__ import annotations

from typing import Sequence

USAGE_EXAMPLE = "hmac-rps rock paper scissors"


class RpsError(Exception):
    """Base exception for all errors raised by this package."""


class MoveSetError(RpsError):
    """A move catalog was rejected before the game started."""

    def __init__(self, message: str, moves: Sequence[str]):
        self.moves = tuple(moves)
        super().__init__(message)

    def format_usage(self) -> str:
        return f"{self}\nExample: {USAGE_EXAMPLE}"


class OddCountRequiredError(MoveSetError):
    def __init__(self, moves: Sequence[str]):
        super().__init__(f"Number of moves must be odd (got {len(moves)}).", moves)


class TooFewMovesError(MoveSetError):
    def __init__(self, moves: Sequence[str], minimum: int = 3):
        self.minimum = minimum
        super().__init__(f"Please provide at least {minimum} moves (got {len(moves)}).", moves)


class DuplicateMoveError(MoveSetError):
    def __init__(self, moves: Sequence[str], duplicates: Sequence[str]):
        self.duplicates = tuple(duplicates)
        super().__init__(f"Moves must be unique (repeated: {', '.join(self.duplicates)}).", moves)


class InvalidMoveIndexError(RpsError):
    """The human picked an index outside the move set. The caller may retry."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Move index {index} is out of range [0, {size})")


class SessionStateError(RpsError):
    """An operation was attempted in a state that does not allow it."""


class EntropySourceError(RpsError):
    """The operating system's secure random source failed."""
