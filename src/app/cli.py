from __future__ import annotations

import argparse
import logging
import sys

from game_session import GameSession, RevealResult
from help_table import format_help_table
from logging_config import setup_logging
from moves import EXIT_TOKEN, HELP_TOKEN
from rps_config import load_config
from rps_errors import EntropySourceError, InvalidMoveIndexError, MoveSetError

logger = logging.getLogger("hmac_rps.cli")

OUTCOME_TEXT = {
    "challenger_win": "You win!",
    "defender_win": "Computer wins!",
    "draw": "Draw",
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hmac-rps",
        description="Play generalized rock-paper-scissors against a computer that commits to its move first.",
        epilog="Example: hmac-rps rock paper scissors lizard spock",
    )
    parser.add_argument("moves", nargs="*", help="An odd number (at least 3) of distinct move names, in cyclic order")
    parser.add_argument("--log-level", default=None, help="DEBUG|INFO|WARNING|ERROR (env: HMAC_RPS_LOG_LEVEL)")
    parser.add_argument("--log-file", default=None, help="Append JSON log lines to this file (env: HMAC_RPS_LOG_FILE)")
    args = parser.parse_args(argv)

    try:
        config = load_config(log_level=args.log_level, log_file=args.log_file)
    except ValueError as exc:
        parser.error(str(exc))
    setup_logging(config.log_level, config.log_file)

    try:
        session = GameSession(args.moves)
    except MoveSetError as exc:
        print(exc.format_usage(), file=sys.stderr)
        return 1
    except EntropySourceError as exc:
        logger.critical("Aborting: %s", exc)
        print(f"Fatal: {exc}", file=sys.stderr)
        return 2

    # Must be shown before any input is read.
    print(f"HMAC: {session.commitment}")

    try:
        result = _play(session)
    except (EOFError, KeyboardInterrupt):
        print()
        result = None

    if result is None:
        session.abort()
        print("Exiting game.")
        return 0

    _show_result(result)
    return 0


def _play(session: GameSession) -> RevealResult | None:
    """Prompt until the user picks a valid move or exits. Returns None on exit."""
    _print_menu(session)
    while True:
        choice = input("Enter your move: ").strip()
        if choice == EXIT_TOKEN:
            return None
        if choice == HELP_TOKEN:
            print(format_help_table(session.moves))
            _print_menu(session)
            continue

        try:
            return session.reveal(int(choice) - 1)
        except (ValueError, InvalidMoveIndexError):
            logger.debug("Rejected menu input %r", choice)
            print("❌ Invalid choice, try again.")


def _print_menu(session: GameSession) -> None:
    print("Available moves:")
    for token, label in session.menu_entries():
        print(f"{token} - {label}")


def _show_result(result: RevealResult) -> None:
    print(f"Your move: {result.human_move}")
    print(f"Computer move: {result.opponent_move}")
    print(OUTCOME_TEXT[result.outcome])
    print(f"HMAC key: {result.key}")
    if result.verify():
        print(f"Check: HMAC-SHA256(key, '{result.opponent_move}') matches the HMAC shown before your move.")
    else:
        logger.error("Revealed move does not match the published commitment")
        print("❌ Warning: revealed move does not match the published HMAC.")


if __name__ == "__main__":
    raise SystemExit(main())
