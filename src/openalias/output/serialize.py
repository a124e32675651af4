"""Serialization helpers for parsed records."""

from __future__ import annotations

import json
from typing import Dict, List, Optional, Tuple

from ..records.models import (
    CHECKSUM_KEY,
    OPTIONAL_TEXT_KEYS,
    RECIPIENT_ADDRESS_KEY,
    CryptoAddress,
)
from ..records.parser import CHECKSUM_LENGTH, RECORD_PREFIX, escape_value


def _checksum_hex(value: int) -> str:
    """Render a checksum as fixed-width lowercase hex.

    Args:
        value (int): Checksum value.

    Returns:
        str: Eight hex characters.
    """
    return f"{value:0{CHECKSUM_LENGTH}x}"


def _serialize_checksum(checksum: Optional[Tuple[int, bool]]) -> Optional[dict]:
    """Serialize a checksum pair.

    Args:
        checksum (Optional[Tuple[int, bool]]): Checksum value and verification flag.

    Returns:
        Optional[dict]: Checksum mapping, or None when absent.
    """
    if checksum is None:
        return None
    value, verified = checksum
    return {"value": value, "hex": _checksum_hex(value), "verified": verified}


def address_to_dict(address: CryptoAddress) -> dict:
    """Serialize a parsed record into a JSON-ready mapping.

    Args:
        address (CryptoAddress): Parsed record.

    Returns:
        dict: Mapping with every record field.
    """
    payload: Dict[str, object] = {
        "cryptocurrency": address.cryptocurrency,
        "address": address.address,
    }
    for key in OPTIONAL_TEXT_KEYS:
        payload[key] = getattr(address, key)
    payload["checksum"] = _serialize_checksum(address.checksum)
    payload["additional_values"] = dict(address.additional_values)
    return payload


def address_to_json(address: CryptoAddress, indent: Optional[int] = 2) -> str:
    """Serialize a parsed record to JSON.

    Args:
        address (CryptoAddress): Parsed record.
        indent (Optional[int]): JSON indentation; None for a single line.

    Returns:
        str: JSON document with sorted keys.
    """
    return json.dumps(address_to_dict(address), indent=indent, sort_keys=True)


def _encode_pair(key: str, value: str) -> str:
    """Encode one quoted key-value pair.

    Args:
        key (str): Pair key.
        value (str): Pair value.

    Returns:
        str: ``key="value";`` text with literal ``\\ `` sequences protected.

    Raises:
        ValueError: If the value contains a double quote.
    """
    if '"' in value:
        raise ValueError(f"Value for {key} cannot contain a double quote")
    return f'{key}="{escape_value(value)}";'


def address_to_record(address: CryptoAddress) -> str:
    """Encode a parsed record back into OpenAlias TXT text.

    Args:
        address (CryptoAddress): Record to encode.

    Returns:
        str: ``oa1:<currency> key="value"; ...`` record text.

    Raises:
        ValueError: If a value contains a double quote or a key is invalid.
    """
    pairs: List[str] = [_encode_pair(RECIPIENT_ADDRESS_KEY, address.address)]
    for key in OPTIONAL_TEXT_KEYS:
        value = getattr(address, key)
        if value is not None:
            pairs.append(_encode_pair(key, value))
    if address.checksum is not None:
        pairs.append(_encode_pair(CHECKSUM_KEY, _checksum_hex(address.checksum[0])))
    for key, value in address.additional_values.items():
        if not key or not all(char.isascii() and (char.isalnum() or char == "_") for char in key):
            raise ValueError(f"Key {key!r} cannot be encoded")
        pairs.append(_encode_pair(key, value))
    return f"{RECORD_PREFIX}{address.cryptocurrency} " + " ".join(pairs)
