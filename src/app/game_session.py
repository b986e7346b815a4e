from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from commit_reveal import compute_commitment, generate_key, select_move_index, verify_commitment
from moves import MoveSet
from protocol import Outcome, resolve
from rps_errors import InvalidMoveIndexError, SessionStateError

logger = logging.getLogger("hmac_rps.session")


class SessionState(str, Enum):
    CREATED = "created"
    COMMITTED = "committed"
    REVEALED = "revealed"
    ABORTED = "aborted"


@dataclass(frozen=True)
class RevealResult:
    human_index: int
    human_move: str
    opponent_index: int
    opponent_move: str
    # From the human's point of view: the human is the challenger.
    outcome: Outcome
    key: str
    commitment: str

    def verify(self) -> bool:
        return verify_commitment(expected_commitment=self.commitment, key=self.key, move=self.opponent_move)


class GameSession:
    """One commit-reveal game against the automated opponent.

    The opponent's move is chosen and committed to during construction.
    The key stays private until :meth:`reveal` succeeds, and is dropped
    for good by :meth:`abort`.
    """

    def __init__(self, moves: MoveSet | Sequence[str]):
        self.state = SessionState.CREATED
        self.moves = moves if isinstance(moves, MoveSet) else MoveSet.from_names(moves)

        self._secret_index: int | None = select_move_index(self.moves.names)
        self._key: str | None = generate_key()
        self.commitment = compute_commitment(key=self._key, move=self.moves[self._secret_index])
        self.state = SessionState.COMMITTED
        logger.info("Session committed: %d moves, commitment %s", len(self.moves), self.commitment)

    def __repr__(self) -> str:
        return f"GameSession(moves={list(self.moves)!r}, state={self.state.value!r}, commitment={self.commitment!r})"

    def menu_entries(self) -> list[tuple[str, str]]:
        return self.moves.menu_entries()

    def reveal(self, human_index: int) -> RevealResult:
        if self.state is not SessionState.COMMITTED:
            raise SessionStateError(f"cannot reveal a session in state {self.state.value!r}")
        if not self.moves.contains_index(human_index):
            raise InvalidMoveIndexError(human_index, len(self.moves))

        if self._key is None or self._secret_index is None:
            raise SessionStateError("session has no committed move to reveal")
        outcome = resolve(human_index, self._secret_index, len(self.moves))
        result = RevealResult(
            human_index=human_index,
            human_move=self.moves[human_index],
            opponent_index=self._secret_index,
            opponent_move=self.moves[self._secret_index],
            outcome=outcome,
            key=self._key,
            commitment=self.commitment,
        )
        self.state = SessionState.REVEALED
        logger.info("Session revealed: %s vs %s -> %s", result.human_move, result.opponent_move, outcome)
        return result

    def abort(self) -> None:
        if self.state is SessionState.REVEALED:
            raise SessionStateError("cannot abort a session that was already revealed")
        self._key = None
        self._secret_index = None
        self.state = SessionState.ABORTED
        logger.info("Session aborted before reveal; key discarded")
