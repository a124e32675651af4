"""Output formatting for parsed records."""

from __future__ import annotations

from .serialize import address_to_dict, address_to_json, address_to_record
from .templates import render_text

__all__ = ["address_to_dict", "address_to_json", "address_to_record", "render_text"]
