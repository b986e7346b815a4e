"""
Logging setup for the game.

Terminal output goes to stderr so it never mixes with the game's prompts on
stdout. An optional file handler writes one JSON object per line.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

LOGGER_NAME = "hmac_rps"

logger = logging.getLogger(LOGGER_NAME)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def setup_logging(level: int = logging.WARNING, log_file: str | Path | None = None) -> logging.Logger:
    """Configure the package logger, replacing any handlers from a previous call."""
    pkg_logger = logging.getLogger(LOGGER_NAME)
    pkg_logger.setLevel(level)
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S"))
    pkg_logger.addHandler(terminal_handler)

    if log_file is not None:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as exc:
            pkg_logger.warning("Could not open log file %s: %s", log_path, exc)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)

    pkg_logger.propagate = False
    return pkg_logger
