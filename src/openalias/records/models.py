"""OpenAlias record models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

RECIPIENT_ADDRESS_KEY = "recipient_address"
CHECKSUM_KEY = "checksum"
# Order matters for re-encoding.
OPTIONAL_TEXT_KEYS = (
    "recipient_name",
    "tx_description",
    "tx_amount",
    "tx_payment_id",
    "address_signature",
)
RECOGNIZED_KEYS = frozenset({RECIPIENT_ADDRESS_KEY, CHECKSUM_KEY, *OPTIONAL_TEXT_KEYS})


@dataclass(frozen=True)
class CryptoAddress:
    """Represent a parsed OpenAlias record.

    Attributes:
        cryptocurrency (str): Lowercase currency identifier from the ``oa1:`` prefix.
        address (str): Value of ``recipient_address``; empty when the key was absent.
        recipient_name (Optional[str]): Name of the recipient.
        tx_description (Optional[str]): Description for the transaction.
        tx_amount (Optional[str]): Requested amount, kept as text.
        tx_payment_id (Optional[str]): Payment identifier.
        address_signature (Optional[str]): Signature over the address.
        checksum (Optional[Tuple[int, bool]]): CRC value and a verification flag
            that is always False after parsing.
        additional_values (Dict[str, str]): Unrecognized keys, sorted by key.
    """

    cryptocurrency: str
    address: str
    recipient_name: Optional[str] = None
    tx_description: Optional[str] = None
    tx_amount: Optional[str] = None
    tx_payment_id: Optional[str] = None
    address_signature: Optional[str] = None
    checksum: Optional[Tuple[int, bool]] = None
    additional_values: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize additional values into key order."""
        object.__setattr__(self, "additional_values", dict(sorted(self.additional_values.items())))


__all__ = [
    "CHECKSUM_KEY",
    "OPTIONAL_TEXT_KEYS",
    "RECIPIENT_ADDRESS_KEY",
    "RECOGNIZED_KEYS",
    "CryptoAddress",
]
