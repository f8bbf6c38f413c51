from __future__ import annotations

import base64
import hashlib
import hmac
import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

from wscommons.core.oauth_encoding import make_key_value_pair, make_key_value_pair_dq, percent_encode
from wscommons.core.tracing import trace

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"

default_logger = logging.getLogger("wscommons.oauth")


class KeyValuePair(NamedTuple):
    key: str
    value: str


Params = Iterable[Union[KeyValuePair, Tuple[str, str]]]


def _utf8(s: str) -> bytes:
    return str(s).encode("utf-8", "surrogatepass")


def _oauth_pairs(consumer_key: str, token: str, nonce: str, timestamp: str) -> List[Tuple[str, str]]:
    return [
        ("oauth_consumer_key", consumer_key),
        ("oauth_nonce", nonce),
        ("oauth_signature_method", SIGNATURE_METHOD),
        ("oauth_timestamp", timestamp),
        ("oauth_token", token),
        ("oauth_version", OAUTH_VERSION),
    ]


def make_signature_base(
    consumer_key: str,
    token: str,
    nonce: str,
    timestamp: str,
    http_method: str,
    target_url: str,
    params: Params = (),
    *,
    logger: Optional[logging.Logger] = None,
) -> str:
    """Assemble the string that gets signed.

    Pairs are sorted on the whole encoded ``key=value`` text rather than on
    key and then value. Both sides of an exchange agree as long as they sort
    the same way, but this differs from RFC 5849 when one key is a prefix of
    another (``a=z`` sorts after ``a-b=c`` here). Changing it changes every
    signature produced.
    """
    log = logger or default_logger
    pairs = [make_key_value_pair(k, v) for k, v in _oauth_pairs(consumer_key, token, nonce, timestamp)]
    pairs.extend(make_key_value_pair(k, v) for k, v in params)
    pairs.sort()
    param_string = "&".join(pairs)
    trace(log, "signature params %s", param_string)

    signature_base = "&".join([http_method, percent_encode(target_url), percent_encode(param_string)])
    trace(log, "signature base %s", signature_base)
    return signature_base


def _digest(signature_base: str, secret: str) -> bytes:
    return hmac.new(_utf8(secret), _utf8(signature_base), hashlib.sha1).digest()


def sign_hex(signature_base: str, secret: str) -> str:
    return _digest(signature_base, secret).hex()


def sign_base64(signature_base: str, secret: str) -> str:
    return base64.b64encode(_digest(signature_base, secret)).decode("ascii")


def make_header(consumer_key: str, token: str, nonce: str, timestamp: str, signature: str) -> str:
    pairs = [make_key_value_pair_dq(k, v) for k, v in _oauth_pairs(consumer_key, token, nonce, timestamp)]
    pairs.append(make_key_value_pair_dq("oauth_signature", signature))
    pairs.sort()
    return "OAuth " + ", ".join(pairs)
