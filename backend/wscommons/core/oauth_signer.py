from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from wscommons.core.oauth_auth import Params, default_logger, make_header, make_signature_base, sign_base64
from wscommons.core.oauth_nonce import make_current_timestamp, make_nonce
from wscommons.core.tracing import trace


@dataclass(frozen=True)
class SignedRequest:
    nonce: str
    timestamp: str
    signature_base: str
    signature: str
    header: str


def signing_key(consumer_secret: str, token_secret: str = "") -> str:
    # conventional OAuth key; sign_hex/sign_base64 never build it themselves
    return f"{consumer_secret}&{token_secret}"


class OAuthSigner:
    def __init__(
        self,
        *,
        consumer_key: str,
        consumer_secret: str,
        token: str = "",
        token_secret: str = "",
        logger: Optional[logging.Logger] = None,
        nonce_factory: Callable[[], str] = make_nonce,
        clock: Callable[[], str] = make_current_timestamp,
    ) -> None:
        if not consumer_key:
            raise ValueError("consumer_key required")
        self._consumer_key = consumer_key
        self._key = signing_key(consumer_secret, token_secret)
        self._token = token
        self._logger = logger or default_logger
        self._nonce_factory = nonce_factory
        self._clock = clock

    def sign(
        self,
        http_method: str,
        target_url: str,
        params: Params = (),
        *,
        nonce: Optional[str] = None,
        timestamp: Optional[str] = None,
    ) -> SignedRequest:
        nonce = nonce if nonce is not None else self._nonce_factory()
        timestamp = timestamp if timestamp is not None else self._clock()
        base = make_signature_base(
            self._consumer_key,
            self._token,
            nonce,
            timestamp,
            http_method,
            target_url,
            params,
            logger=self._logger,
        )
        signature = sign_base64(base, self._key)
        header = make_header(self._consumer_key, self._token, nonce, timestamp, signature)
        trace(self._logger, "authorization header %s", header)
        return SignedRequest(nonce=nonce, timestamp=timestamp, signature_base=base, signature=signature, header=header)

    def authorization_header(
        self,
        http_method: str,
        target_url: str,
        params: Params = (),
        *,
        nonce: Optional[str] = None,
        timestamp: Optional[str] = None,
    ) -> str:
        return self.sign(http_method, target_url, params, nonce=nonce, timestamp=timestamp).header
