from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from help_table import CORNER_HEADER, format_help_table  # type: ignore[import-not-found]  # noqa: E402
from moves import MoveSet  # type: ignore[import-not-found]  # noqa: E402


def _cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.strip().strip("|").split("|")]


def test_help_table_grid() -> None:
    table = format_help_table(MoveSet.from_names(["rock", "paper", "scissors"]))
    lines = [line for line in table.splitlines() if line.startswith("|")]

    assert _cells(lines[0]) == [CORNER_HEADER, "rock", "paper", "scissors"]
    # Rows are the computer's move, columns the user's.
    assert _cells(lines[1]) == ["rock", "Draw", "Win", "Lose"]
    assert _cells(lines[2]) == ["paper", "Lose", "Draw", "Win"]
    assert _cells(lines[3]) == ["scissors", "Win", "Lose", "Draw"]


def test_help_table_counts_for_five_moves() -> None:
    names = ["rock", "paper", "scissors", "lizard", "spock"]
    table = format_help_table(MoveSet.from_names(names))
    rows = [_cells(line) for line in table.splitlines() if line.startswith("|")][1:]
    assert [row[0] for row in rows] == names
    for row in rows:
        assert row[1:].count("Win") == 2
        assert row[1:].count("Lose") == 2
        assert row[1:].count("Draw") == 1
