from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SINKS = ("nil", "stdout", "stderr", "file", "both")

_LEVELS: Dict[str, int] = {
    "trace": TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# marks handlers installed by configure_logger so a reconfigure only removes its own
_OWNED = "_wscommons_sink"


@dataclass(frozen=True)
class LogConfig:
    sink: str = "stderr"
    level: str = "info"
    path: str = "logs/errlog.txt"


def parse_level(name: str) -> int:
    key = (name or "").strip().lower()
    if key not in _LEVELS:
        raise ValueError(f"unknown log level: {name!r}")
    return _LEVELS[key]


def parse_sink(name: str) -> str:
    key = (name or "").strip().lower()
    if key not in SINKS:
        raise ValueError(f"unknown log sink: {name!r}")
    return key


def _open_file_handler(path: str) -> logging.Handler:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _build_handlers(sink: str, path: str) -> List[logging.Handler]:
    if sink == "nil":
        return [logging.NullHandler()]
    if sink == "stdout":
        return [logging.StreamHandler(sys.stdout)]
    if sink == "stderr":
        return [logging.StreamHandler(sys.stderr)]
    if sink == "file":
        return [_open_file_handler(path)]
    return [_open_file_handler(path), logging.StreamHandler(sys.stdout)]


def configure_logger(config: LogConfig, name: str = "wscommons") -> logging.Logger:
    """Point the named logger at ``config.sink`` with ``config.level`` as threshold.

    Safe to call repeatedly: handlers from an earlier call are closed and
    replaced, handlers attached by anyone else are left alone.
    """
    sink = parse_sink(config.sink)
    level = parse_level(config.level)
    handlers = _build_handlers(sink, config.path)

    logger = logging.getLogger(name)
    for old in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT)
    for h in handlers:
        h.setFormatter(formatter)
        setattr(h, _OWNED, True)
        logger.addHandler(h)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def trace(logger: Optional[logging.Logger], msg: str, *args: object) -> None:
    if logger is not None and logger.isEnabledFor(TRACE):
        logger.log(TRACE, msg, *args)
