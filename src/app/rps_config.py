from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

ENV_LOG_LEVEL = "HMAC_RPS_LOG_LEVEL"
ENV_LOG_FILE = "HMAC_RPS_LOG_FILE"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class GameConfig:
    log_level: int = logging.WARNING
    log_file: str | None = None


def parse_log_level(value: str) -> int:
    try:
        return _LEVELS[value.strip().upper()]
    except KeyError:
        raise ValueError(f"unknown log level {value!r} (expected one of {', '.join(_LEVELS)})") from None


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    log_level: str | None = None,
    log_file: str | None = None,
) -> GameConfig:
    """Build the config from the environment, letting explicit arguments win.

    When ``environ`` is omitted, a ``.env`` file in the working directory is
    loaded into ``os.environ`` first.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    level_name = log_level or environ.get(ENV_LOG_LEVEL)
    return GameConfig(
        log_level=parse_log_level(level_name) if level_name else logging.WARNING,
        log_file=log_file or environ.get(ENV_LOG_FILE) or None,
    )
