"""Stable public API for programmatic usage."""

from __future__ import annotations

from .alias import alias_to_fqdn, is_valid_alias
from .config import ParserSettings, load_settings
from .errors import MalformedRecordError, NotAnOpenAliasRecord, ParseError
from .output import address_to_dict, address_to_json, address_to_record, render_text
from .records import CryptoAddress, addresses_from_txt, is_openalias_record, parse

__all__ = [
    "CryptoAddress",
    "MalformedRecordError",
    "NotAnOpenAliasRecord",
    "ParseError",
    "ParserSettings",
    "address_to_dict",
    "address_to_json",
    "address_to_record",
    "addresses_from_txt",
    "alias_to_fqdn",
    "is_openalias_record",
    "is_valid_alias",
    "load_settings",
    "parse",
    "render_text",
]
