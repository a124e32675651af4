"""Dataclasses for parser configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class ParserSettings:
    """Define how OpenAlias records are accepted.

    Attributes:
        require_address (bool): Reject records that lack ``recipient_address``.
        currencies (Optional[Tuple[str, ...]]): Currencies to keep; None keeps all.
    """

    require_address: bool = False
    currencies: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        """Normalize the currency filter to a lowercase tuple."""
        if self.currencies is not None:
            normalized = tuple(str(currency).strip().lower() for currency in self.currencies)
            object.__setattr__(self, "currencies", normalized)

    @classmethod
    def from_values(
        cls, *, require_address: bool = False, currencies: Optional[Iterable[str]] = None
    ) -> "ParserSettings":
        """Build settings from loosely typed values.

        Args:
            require_address (bool): Reject records without an address.
            currencies (Optional[Iterable[str]]): Currency filter entries.

        Returns:
            ParserSettings: Settings instance.
        """
        return cls(
            require_address=bool(require_address),
            currencies=None if currencies is None else tuple(currencies),
        )

    def accepts_currency(self, cryptocurrency: str) -> bool:
        """Check a currency against the filter.

        Args:
            cryptocurrency (str): Currency identifier from a parsed record.

        Returns:
            bool: True if no filter is set or the currency is listed.
        """
        return self.currencies is None or cryptocurrency in self.currencies
