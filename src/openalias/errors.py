"""Exceptions raised while parsing OpenAlias records."""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Raised when a string cannot be parsed as an OpenAlias record."""

    def __init__(self, record: str, reason: str, position: Optional[int] = None) -> None:
        """Initialize a parse error.

        Args:
            record (str): Input that failed to parse.
            reason (str): Human-readable failure reason.
            position (Optional[int]): Zero-based index where parsing stopped.
        """
        location = "" if position is None else f" at position {position}"
        super().__init__(f"{reason}{location}")
        self.record = record
        self.reason = reason
        self.position = position


class NotAnOpenAliasRecord(ParseError):
    """Raised when the input does not carry the ``oa1:<currency> `` prefix."""


class MalformedRecordError(ParseError):
    """Raised when a prefixed record has invalid structure."""


__all__ = ["MalformedRecordError", "NotAnOpenAliasRecord", "ParseError"]
