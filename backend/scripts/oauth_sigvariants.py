from __future__ import annotations

import os
import sys
import urllib.parse
from typing import Callable, Dict, List, Tuple

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from wscommons.core.config import get_settings
from wscommons.core.oauth_auth import make_signature_base, sign_base64
from wscommons.core.oauth_nonce import make_current_timestamp, make_nonce
from wscommons.core.oauth_signer import signing_key

# Prints the signature a verifier would compute under the conventions this
# library does not use, to tell which one a rejecting server expects.


def _enc_plus(v: str) -> str:
    return urllib.parse.quote_plus(str(v), safe="")


def _enc_pct(v: str) -> str:
    return urllib.parse.quote(str(v), safe="")


def _base(
    pairs: List[Tuple[str, str]],
    *,
    method: str,
    url: str,
    enc: Callable[[str], str],
    key_then_value: bool,
) -> str:
    encoded = [(enc(k), enc(v)) for k, v in pairs]
    if key_then_value:
        encoded.sort()
        items = [f"{k}={v}" for k, v in encoded]
    else:
        items = sorted(f"{k}={v}" for k, v in encoded)
    return "&".join([method, enc(url), enc("&".join(items))])


def main() -> None:
    p: Dict[str, str] = get_settings().params
    consumer_key = p.get("consumer_key", "ck")
    token = p.get("token", "tk")
    method = p.get("method", "GET")
    url = p.get("url", "http://example.com/resource")
    key = signing_key(p.get("consumer_secret", "cs"), p.get("token_secret", "ts"))
    extra = [("q", p.get("q", "a b")), ("q-x", "1")]

    nonce = make_nonce()
    ts = make_current_timestamp()
    oauth = [
        ("oauth_consumer_key", consumer_key),
        ("oauth_nonce", nonce),
        ("oauth_signature_method", "HMAC-SHA1"),
        ("oauth_timestamp", ts),
        ("oauth_token", token),
        ("oauth_version", "1.0"),
    ]

    ours = make_signature_base(consumer_key, token, nonce, ts, method, url, extra)
    print("library", "=>", sign_base64(ours, key))

    variants: Dict[str, Callable[[], str]] = {
        "pct20_full_pair_sort": lambda: _base(oauth + extra, method=method, url=url, enc=_enc_pct, key_then_value=False),
        "pct20_key_then_value": lambda: _base(oauth + extra, method=method, url=url, enc=_enc_pct, key_then_value=True),
        "plus_full_pair_sort": lambda: _base(oauth + extra, method=method, url=url, enc=_enc_plus, key_then_value=False),
        "plus_key_then_value": lambda: _base(oauth + extra, method=method, url=url, enc=_enc_plus, key_then_value=True),
    }

    for name, fn in variants.items():
        base = fn()
        same = "same" if base == ours else "differs"
        print(name, "=>", sign_base64(base, key), same)


if __name__ == "__main__":
    main()
