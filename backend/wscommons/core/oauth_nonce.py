from __future__ import annotations

import base64
import os
import time
from typing import Callable

NONCE_BYTES = 32


class RandomSourceError(RuntimeError):
    pass


def make_nonce(random_bytes: Callable[[int], bytes] = os.urandom) -> str:
    """Return a fresh single-use token: 32 secure random bytes, URL-safe base64.

    The padding is kept, so callers must not assume a fixed length.
    """
    try:
        raw = random_bytes(NONCE_BYTES)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"secure random source failed: {e}") from e
    if len(raw) != NONCE_BYTES:
        raise RandomSourceError(f"secure random source returned {len(raw)} of {NONCE_BYTES} bytes")
    return base64.urlsafe_b64encode(raw).decode("ascii")


def make_current_timestamp(clock: Callable[[], float] = time.time) -> str:
    # whole seconds, same value as SQL current_timestamp() in unix form
    return str(int(clock()))
