"""OpenAlias record parsing."""

from __future__ import annotations

from .models import CryptoAddress
from .parser import escape_value, parse, parse_checksum, unescape_value
from .txt import addresses_from_txt, is_openalias_record

__all__ = [
    "CryptoAddress",
    "addresses_from_txt",
    "escape_value",
    "is_openalias_record",
    "parse",
    "parse_checksum",
    "unescape_value",
]
