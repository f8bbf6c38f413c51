"""Pytest configuration and fixtures."""
import logging
from dataclasses import dataclass
from typing import List

import pytest

from wscommons.core.tracing import TRACE


@dataclass(frozen=True)
class GoldenVector:
    base: str
    hex: str
    base64: str


@pytest.fixture
def golden() -> GoldenVector:
    """Signature base and HMAC-SHA1 values for ck/tk/nnn/1000000000, GET http://example.com/resource, secret "secret"."""
    return GoldenVector(
        base=(
            "GET&http%3A%2F%2Fexample.com%2Fresource&oauth_consumer_key%3Dck%26oauth_nonce%3Dnnn"
            "%26oauth_signature_method%3DHMAC-SHA1%26oauth_timestamp%3D1000000000%26oauth_token%3Dtk"
            "%26oauth_version%3D1.0"
        ),
        hex="dcbf1e4a9e707207e196a2834845047b427ef4b7",
        base64="3L8eSp5wcgfhlqKDSEUEe0J+9Lc=",
    )


class ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=TRACE)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    @property
    def messages(self) -> List[str]:
        return [r.getMessage() for r in self.records]


@pytest.fixture
def trace_logger():
    """A private logger at TRACE level with an in-memory handler."""
    logger = logging.getLogger("tests.trace")
    handler = ListHandler()
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    yield logger, handler
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
