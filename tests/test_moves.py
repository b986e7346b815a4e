from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from moves import MoveSet, validate_moves  # type: ignore[import-not-found]  # noqa: E402
from rps_errors import (  # type: ignore[import-not-found]  # noqa: E402
    DuplicateMoveError,
    MoveSetError,
    OddCountRequiredError,
    TooFewMovesError,
)


def test_accepts_classic_moves() -> None:
    validate_moves(["rock", "paper", "scissors"])


def test_rejects_even_count() -> None:
    with pytest.raises(OddCountRequiredError):
        validate_moves(["rock", "paper"])
    with pytest.raises(OddCountRequiredError):
        validate_moves([])


def test_rejects_duplicates() -> None:
    with pytest.raises(DuplicateMoveError) as excinfo:
        validate_moves(["rock", "rock", "paper"])
    assert excinfo.value.duplicates == ("rock",)


def test_duplicates_are_case_sensitive() -> None:
    validate_moves(["rock", "Rock", "paper"])


def test_rejects_single_move() -> None:
    with pytest.raises(TooFewMovesError):
        validate_moves(["rock"])


def test_errors_share_a_base_and_carry_usage() -> None:
    with pytest.raises(MoveSetError) as excinfo:
        MoveSet.from_names(["a", "b"])
    assert excinfo.value.moves == ("a", "b")
    assert "Example: hmac-rps rock paper scissors" in excinfo.value.format_usage()


def test_move_set_menu() -> None:
    moves = MoveSet.from_names(["rock", "paper", "scissors"])
    assert len(moves) == 3
    assert moves[1] == "paper"
    assert moves.contains_index(2) and not moves.contains_index(3)
    assert moves.menu_entries() == [
        ("1", "rock"),
        ("2", "paper"),
        ("3", "scissors"),
        ("0", "exit"),
        ("?", "help"),
    ]
