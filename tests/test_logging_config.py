from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
APP_DIR = ROOT / "src" / "app"
sys.path.insert(0, str(APP_DIR))

from logging_config import LOGGER_NAME, setup_logging  # type: ignore[import-not-found]  # noqa: E402


def test_file_handler_writes_json_lines(tmp_path: Path) -> None:
    log_file = tmp_path / "game.log"
    logger = setup_logging(logging.INFO, log_file)
    logging.getLogger(f"{LOGGER_NAME}.session").info("hello")

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert record["message"] == "hello"
    assert record["logger"] == f"{LOGGER_NAME}.session"
    assert logger.propagate is False


def test_reconfiguring_closes_previous_file_handler(tmp_path: Path) -> None:
    logger = setup_logging(logging.INFO, tmp_path / "first.log")
    first = [h for h in logger.handlers if isinstance(h, logging.FileHandler)][0]
    assert first.stream is not None

    setup_logging(logging.INFO, tmp_path / "second.log")
    assert first not in logger.handlers
    assert first.stream is None
    assert len([h for h in logger.handlers if isinstance(h, logging.FileHandler)]) == 1
