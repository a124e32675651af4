"""Shared sample records for tests."""

from __future__ import annotations

MONERO_ADDRESS = (
    "46BeWrHpwXmHDpDEUmZBWZfoQpdc6HaERCNmx1pEYL2rAcuwufPN9rXHHtyUA4QVy66qeFQkn6sfK8aHYjA3jk3o1Bv16em"
)

MONERO_DONATION_RECORD = (
    f"oa1:xmr recipient_address={MONERO_ADDRESS}; recipient_name=Monero Development;"
)

FULL_RECORD = (
    'oa1:btc recipient_address="1KTexdemPdxSBcG55heUuTjDRYqbC5ZL8H"; '
    'recipient_name="Jane\\ Doe"; tx_description="Coffee;\\ beans"; '
    'tx_amount="0.0042"; tx_payment_id="ab12cd34"; '
    'address_signature="sigvalue"; checksum="DEADBEEF"; '
    'zzz="last"; extra_1=first;'
)

SPF_RECORD = "v=spf1 include:_spf.example.test -all"
