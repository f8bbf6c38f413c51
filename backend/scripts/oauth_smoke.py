from __future__ import annotations

import base64
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from wscommons.core.oauth_auth import make_header, make_signature_base, sign_base64, sign_hex
from wscommons.core.oauth_encoding import percent_encode
from wscommons.core.oauth_nonce import make_current_timestamp, make_nonce
from wscommons.core.oauth_signer import OAuthSigner


def main() -> None:
    assert percent_encode("a b~c") == "a%20b~c"
    assert percent_encode("é") == "%C3%A9"

    base = make_signature_base("ck", "tk", "nnn", "1000000000", "GET", "http://example.com/resource")
    assert sign_hex(base, "secret") == "dcbf1e4a9e707207e196a2834845047b427ef4b7"
    assert sign_base64(base, "secret") == "3L8eSp5wcgfhlqKDSEUEe0J+9Lc="
    assert bytes.fromhex(sign_hex(base, "x")) == base64.b64decode(sign_base64(base, "x"))

    header = make_header("ck", "tk", "nnn", "1000000000", sign_base64(base, "secret"))
    assert header.startswith('OAuth oauth_consumer_key="ck", oauth_nonce="nnn", oauth_signature="')

    assert make_nonce() != make_nonce()
    assert make_current_timestamp().isdigit()

    signer = OAuthSigner(consumer_key="ck", consumer_secret="cs", token="tk", token_secret="ts")
    signed = signer.sign("POST", "https://api.example.com/1/items", [("status", "hello world")])
    assert "status%3Dhello%2520world" in signed.signature_base

    print("oauth_smoke: ok")


if __name__ == "__main__":
    main()
