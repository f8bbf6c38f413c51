from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

from wscommons.core.tracing import trace

logger = logging.getLogger("wscommons.params")


def parse_param_line(line: str) -> Optional[Tuple[str, str]]:
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    key, sep, value = text.partition(":")
    if not sep:
        return None
    return key.strip().lower(), value.strip()


def read_params(path: str) -> Dict[str, str]:
    """Read a ``key: value`` initialization file.

    Keys are lower-cased. Comments (``#``) and lines without a colon are
    skipped; a repeated key keeps its last value.
    """
    params: Dict[str, str] = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                trace(logger, "%s", line.rstrip("\n"))
                parsed = parse_param_line(line)
                if parsed is not None:
                    params[parsed[0]] = parsed[1]
    except OSError as e:
        logger.warning("failed to read param file %s: %s", path, e)
        raise
    trace(logger, "params len %d", len(params))
    return params
