"""Template loading and rendering for text output."""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Optional

from jinja2.sandbox import SandboxedEnvironment

from ..config import TEMPLATE_DIR_NAME, external_config_dirs
from ..records.models import CryptoAddress
from .serialize import _checksum_hex

_TEMPLATE_PACKAGE = "openalias.resources.templates"
ADDRESS_TEMPLATE = "address.txt.j2"

_ENV = SandboxedEnvironment(autoescape=False, trim_blocks=True, lstrip_blocks=True)


def _find_template_path(template_name: str) -> Optional[Path]:
    """Find an external template override path.

    Args:
        template_name (str): Template filename to locate.

    Returns:
        Optional[Path]: Path to override template if found.
    """
    for base_dir in external_config_dirs():
        candidate = base_dir / TEMPLATE_DIR_NAME / template_name
        if candidate.is_file():
            return candidate
    return None


def _render_template(template_name: str, context: dict) -> str:
    """Render a template with the provided context.

    Args:
        template_name (str): Template filename to render.
        context (dict): Render context.

    Returns:
        str: Rendered template output.
    """
    override_path = _find_template_path(template_name)
    if override_path:
        source = override_path.read_text(encoding="utf-8")
    else:
        source = (
            resources.files(_TEMPLATE_PACKAGE).joinpath(template_name).read_text(encoding="utf-8")
        )
    template = _ENV.from_string(source)
    return template.render(**context).rstrip("\n")


def render_text(address: CryptoAddress, verbose: bool = False) -> str:
    """Render a human-readable summary of a parsed record.

    Args:
        address (CryptoAddress): Parsed record.
        verbose (bool): Include payment ID, signature, checksum and extra keys.

    Returns:
        str: Rendered text.
    """
    checksum_hex = None
    checksum_verified = False
    if address.checksum is not None:
        checksum_hex = _checksum_hex(address.checksum[0])
        checksum_verified = address.checksum[1]
    return _render_template(
        ADDRESS_TEMPLATE,
        {
            "address": address,
            "verbose": verbose,
            "checksum_hex": checksum_hex,
            "checksum_verified": checksum_verified,
        },
    )
