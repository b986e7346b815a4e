from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Sequence

from rps_errors import DuplicateMoveError, OddCountRequiredError, TooFewMovesError

MIN_MOVES = 3

EXIT_TOKEN = "0"
HELP_TOKEN = "?"


def validate_moves(moves: Sequence[str]) -> None:
    """Reject move catalogs that cannot form a fair cyclic game.

    Parity is checked first, then uniqueness, then the minimum size, so an
    empty catalog is reported as an even count.
    """
    if len(moves) % 2 == 0:
        raise OddCountRequiredError(moves)

    duplicates = [name for name, count in Counter(moves).items() if count > 1]
    if duplicates:
        raise DuplicateMoveError(moves, duplicates)

    if len(moves) < MIN_MOVES:
        raise TooFewMovesError(moves, MIN_MOVES)


@dataclass(frozen=True)
class MoveSet:
    # Order defines each move's cyclic position.
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))
        validate_moves(self.names)

    @classmethod
    def from_names(cls, names: Sequence[str]) -> "MoveSet":
        return cls(names=tuple(names))

    def __len__(self) -> int:
        return len(self.names)

    def __getitem__(self, index: int) -> str:
        return self.names[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def contains_index(self, index: int) -> bool:
        return 0 <= index < len(self.names)

    def menu_entries(self) -> list[tuple[str, str]]:
        """1-based menu tokens for each move, followed by the exit and help tokens."""
        entries = [(str(i + 1), name) for i, name in enumerate(self.names)]
        entries.append((EXIT_TOKEN, "exit"))
        entries.append((HELP_TOKEN, "help"))
        return entries
