"""OpenAlias v1 record grammar.

The grammar is evaluated with PEG semantics: alternatives are ordered,
repetition is greedy and never gives characters back, and the whole input
must be consumed::

    record    := "oa1:" [a-z]+ " " pair+
    pair      := (key "=" '"' [^"]* '"' | key "=" value_unq) ";" " "?
    key       := [a-zA-Z0-9_]+
    value_unq := ("\\ ")* [^ ;]* [^;]* [^ ;]* ("\\ ")*
    checksum  := [0-9a-fA-F]{8}

Every captured value has ``\\ `` (backslash, space) replaced by a space.
"""

from __future__ import annotations

import logging
import string
from typing import Dict, Optional, Tuple

from ..errors import MalformedRecordError, NotAnOpenAliasRecord, ParseError
from .models import (
    CHECKSUM_KEY,
    OPTIONAL_TEXT_KEYS,
    RECIPIENT_ADDRESS_KEY,
    CryptoAddress,
)

LOGGER = logging.getLogger(__name__)

RECORD_PREFIX = "oa1:"
ESCAPED_SPACE = "\\ "
CHECKSUM_LENGTH = 8

_CURRENCY_CHARS = frozenset(string.ascii_lowercase)
_KEY_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_HEX_CHARS = frozenset(string.hexdigits)


def _scan(text: str, pos: int, allowed: frozenset) -> int:
    """Advance past a run of allowed characters.

    Args:
        text (str): Input text.
        pos (int): Start index.
        allowed (frozenset): Characters that may appear in the run.

    Returns:
        int: Index of the first character outside the run.
    """
    end = pos
    while end < len(text) and text[end] in allowed:
        end += 1
    return end


def unescape_value(value: str) -> str:
    """Replace escaped spaces in a captured value.

    Args:
        value (str): Raw captured value.

    Returns:
        str: Value with every ``\\ `` sequence turned into a space.
    """
    return value.replace(ESCAPED_SPACE, " ")


def escape_value(value: str) -> str:
    """Protect literal ``\\ `` sequences so unescaping restores them.

    Args:
        value (str): Field value to encode.

    Returns:
        str: Text for which :func:`unescape_value` returns ``value``.
    """
    return value.replace(ESCAPED_SPACE, "\\" + ESCAPED_SPACE)


def parse_checksum(value: str) -> int:
    """Decode a checksum value.

    Args:
        value (str): Checksum text; must be exactly eight hex characters.

    Returns:
        int: Unsigned 32-bit checksum.

    Raises:
        ValueError: If the value is not exactly eight hex characters.
    """
    if len(value) != CHECKSUM_LENGTH or not all(char in _HEX_CHARS for char in value):
        raise ValueError(f"checksum must be {CHECKSUM_LENGTH} hexadecimal characters")
    return int(value, 16)


class _AddressBuilder:
    """Accumulate fields for a single parse call."""

    def __init__(self, cryptocurrency: str) -> None:
        """Start an empty record for a currency.

        Args:
            cryptocurrency (str): Currency identifier from the prefix.
        """
        self.cryptocurrency = cryptocurrency
        self.address = ""
        self.have_address = False
        self.optional: Dict[str, str] = {}
        self.checksum: Optional[Tuple[int, bool]] = None
        self.additional_values: Dict[str, str] = {}

    def add(self, key: str, value: str) -> None:
        """Classify a key-value pair.

        Args:
            key (str): Pair key.
            value (str): Unescaped pair value.

        Raises:
            ValueError: If a checksum value is malformed.
        """
        if key == RECIPIENT_ADDRESS_KEY:
            self.address = value
            self.have_address = True
        elif key in OPTIONAL_TEXT_KEYS:
            self.optional[key] = value
        elif key == CHECKSUM_KEY:
            # The flag is reserved for verification against the record body.
            self.checksum = (parse_checksum(value), False)
        else:
            self.additional_values[key] = value

    def build(self) -> CryptoAddress:
        """Freeze the accumulated fields.

        Returns:
            CryptoAddress: Immutable parsed record.
        """
        return CryptoAddress(
            cryptocurrency=self.cryptocurrency,
            address=self.address,
            checksum=self.checksum,
            additional_values=dict(self.additional_values),
            **self.optional,
        )


class _RecordParser:
    """Recursive-descent parser over one record string."""

    def __init__(self, record: str) -> None:
        """Bind the parser to its input.

        Args:
            record (str): Record text.
        """
        self.record = record

    def _malformed(self, reason: str, position: int) -> MalformedRecordError:
        """Build a structural error for this record.

        Args:
            reason (str): Failure reason.
            position (int): Index where parsing stopped.

        Returns:
            MalformedRecordError: Error to raise.
        """
        return MalformedRecordError(self.record, reason, position)

    def parse_prefix(self) -> Tuple[str, int]:
        """Match ``oa1:<currency> ``.

        Returns:
            Tuple[str, int]: Currency identifier and index after the prefix.

        Raises:
            NotAnOpenAliasRecord: If the prefix does not match.
        """
        text = self.record
        if not text.startswith(RECORD_PREFIX):
            raise NotAnOpenAliasRecord(text, f"record does not start with {RECORD_PREFIX!r}", 0)
        start = len(RECORD_PREFIX)
        end = _scan(text, start, _CURRENCY_CHARS)
        if end == start:
            raise NotAnOpenAliasRecord(text, "missing lowercase currency identifier", start)
        if text[end : end + 1] != " ":
            raise NotAnOpenAliasRecord(text, "expected a space after the currency", end)
        return text[start:end], end + 1

    def _match_quoted(self, pos: int) -> Optional[Tuple[str, int]]:
        """Try the quoted value form at ``pos``.

        Args:
            pos (int): Index just after ``=``.

        Returns:
            Optional[Tuple[str, int]]: Raw value and index after the closing
                quote, or None if there is no opening or closing quote.
        """
        text = self.record
        if not text.startswith('"', pos):
            return None
        closing = text.find('"', pos + 1)
        if closing == -1:
            return None
        return text[pos + 1 : closing], closing + 1

    def _match_unquoted(self, pos: int) -> Tuple[str, int]:
        """Match the unquoted value form at ``pos``.

        Greedy repetition means the escape and run sequence always stops at
        the next semicolon or the end of input, so the value is everything
        before it.

        Args:
            pos (int): Index just after ``=``.

        Returns:
            Tuple[str, int]: Raw value and index where the value ends.
        """
        semicolon = self.record.find(";", pos)
        if semicolon == -1:
            semicolon = len(self.record)
        return self.record[pos:semicolon], semicolon

    def parse_pair(self, pos: int) -> Tuple[str, str, int]:
        """Match one ``key=value;`` pair.

        Args:
            pos (int): Index where the pair starts.

        Returns:
            Tuple[str, str, int]: Key, unescaped value and index after the pair.

        Raises:
            MalformedRecordError: If no pair can be matched at ``pos``.
        """
        text = self.record
        key_end = _scan(text, pos, _KEY_CHARS)
        if key_end == pos:
            raise self._malformed("expected a key of [a-zA-Z0-9_] characters", pos)
        key = text[pos:key_end]
        if not text.startswith("=", key_end):
            raise self._malformed(f"expected '=' after key {key!r}", key_end)
        value_start = key_end + 1
        # Once the quoted form matches, the pair is committed to it.
        raw_value, value_end = self._match_quoted(value_start) or self._match_unquoted(
            value_start
        )
        if not text.startswith(";", value_end):
            raise self._malformed(f"expected ';' after value for key {key!r}", value_end)
        end = value_end + 1
        if text.startswith(" ", end):
            end += 1
        return key, unescape_value(raw_value), end

    def parse(self) -> Tuple[_AddressBuilder, int]:
        """Run the full grammar.

        Returns:
            Tuple[_AddressBuilder, int]: Populated builder and the number of pairs.

        Raises:
            ParseError: If the record does not match the grammar.
        """
        currency, pos = self.parse_prefix()
        builder = _AddressBuilder(currency)
        if pos == len(self.record):
            raise self._malformed("expected at least one key-value pair", pos)
        pairs = 0
        while pos < len(self.record):
            key, value, end = self.parse_pair(pos)
            try:
                builder.add(key, value)
            except ValueError as err:
                raise self._malformed(str(err), pos) from err
            pairs += 1
            pos = end
        return builder, pairs


def parse(record: str, *, require_address: bool = False) -> CryptoAddress:
    """Parse an OpenAlias v1 record.

    Args:
        record (str): Decoded TXT record text.
        require_address (bool): Reject records without ``recipient_address``.
            When False the record is accepted with an empty address.

    Returns:
        CryptoAddress: Parsed record.

    Raises:
        NotAnOpenAliasRecord: If the text does not start with ``oa1:<currency> ``.
        MalformedRecordError: If the prefixed record is structurally invalid.
    """
    parser = _RecordParser(record)
    try:
        builder, pairs = parser.parse()
        if require_address and not builder.have_address:
            raise MalformedRecordError(record, f"missing {RECIPIENT_ADDRESS_KEY}", len(record))
    except ParseError as err:
        LOGGER.debug("Rejected OpenAlias record %r: %s", record, err)
        raise
    if not builder.have_address:
        LOGGER.debug("Accepted %s record without %s", builder.cryptocurrency, RECIPIENT_ADDRESS_KEY)
    LOGGER.debug("Parsed %s record with %d pairs", builder.cryptocurrency, pairs)
    return builder.build()


__all__ = [
    "CHECKSUM_LENGTH",
    "ESCAPED_SPACE",
    "RECORD_PREFIX",
    "escape_value",
    "parse",
    "parse_checksum",
    "unescape_value",
]
