from __future__ import annotations

import urllib.parse


def percent_encode(s: str) -> str:
    # quote() keeps only letters, digits and "-_.~" with safe=""; space becomes %20, never "+"
    return urllib.parse.quote(str(s), safe="", encoding="utf-8", errors="surrogatepass")


def make_key_value_pair(key: str, value: str) -> str:
    return f"{percent_encode(key)}={percent_encode(value)}"


def make_key_value_pair_dq(key: str, value: str) -> str:
    return f'{percent_encode(key)}="{percent_encode(value)}"'
