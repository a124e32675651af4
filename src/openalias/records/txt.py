"""Extract OpenAlias records from a TXT record set."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from ..config.models import ParserSettings
from ..errors import MalformedRecordError, NotAnOpenAliasRecord
from .models import CryptoAddress
from .parser import RECORD_PREFIX, parse

LOGGER = logging.getLogger(__name__)


def is_openalias_record(text: str) -> bool:
    """Check whether a TXT string claims to be an OpenAlias record.

    Args:
        text (str): TXT record text.

    Returns:
        bool: True if the text starts with the ``oa1:`` prefix.
    """
    return text.startswith(RECORD_PREFIX)


def addresses_from_txt(
    records: Iterable[str], settings: Optional[ParserSettings] = None
) -> List[CryptoAddress]:
    """Parse every OpenAlias record in a TXT record set.

    Non-OpenAlias strings and malformed records are skipped. Records for
    currencies outside ``settings.currencies`` are dropped.

    Args:
        records (Iterable[str]): Decoded TXT record strings.
        settings (Optional[ParserSettings]): Parser policy and currency filter.

    Returns:
        List[CryptoAddress]: Parsed records in input order.
    """
    settings = settings or ParserSettings()
    addresses: List[CryptoAddress] = []
    for record in records:
        try:
            address = parse(record, require_address=settings.require_address)
        except NotAnOpenAliasRecord:
            LOGGER.debug("Skipping non-OpenAlias TXT record %r", record)
            continue
        except MalformedRecordError as err:
            LOGGER.warning("Skipping malformed OpenAlias record %r: %s", record, err)
            continue
        if not settings.accepts_currency(address.cryptocurrency):
            LOGGER.debug("Skipping %s record outside currency filter", address.cryptocurrency)
            continue
        addresses.append(address)
    return addresses


__all__ = ["addresses_from_txt", "is_openalias_record"]
