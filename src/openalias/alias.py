"""OpenAlias name handling."""

from __future__ import annotations

from typing import Optional


def _valid_domain(domain: str) -> bool:
    """Check that a domain has at least two non-empty labels.

    Args:
        domain (str): Domain without a trailing dot.

    Returns:
        bool: True if the domain is usable.
    """
    labels = domain.split(".")
    return len(labels) >= 2 and all(labels)


def alias_to_fqdn(alias: str) -> Optional[str]:
    """Convert an OpenAlias name to the FQDN that carries its TXT records.

    ``user@example.com`` maps to ``user.example.com.`` and a bare domain maps
    to itself with a trailing dot.

    Args:
        alias (str): Alias in email or domain form.

    Returns:
        Optional[str]: Fully qualified domain name, or None if the alias is invalid.
    """
    if not alias or any(char.isspace() for char in alias):
        return None
    parts = alias.split("@")
    if len(parts) > 2:
        return None
    domain = parts[-1].rstrip(".")
    if not _valid_domain(domain):
        return None
    if len(parts) == 1:
        return f"{domain}."
    local = parts[0]
    if not local or not all(local.split(".")):
        return None
    return f"{local}.{domain}."


def is_valid_alias(alias: str) -> bool:
    """Check whether an alias can be converted to an FQDN.

    Args:
        alias (str): Alias in email or domain form.

    Returns:
        bool: True if :func:`alias_to_fqdn` accepts the alias.
    """
    return alias_to_fqdn(alias) is not None


__all__ = ["alias_to_fqdn", "is_valid_alias"]
