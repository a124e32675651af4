"""Version resolution regression tests."""

from __future__ import annotations

from pathlib import Path

import openalias


def test_source_checkout_prefers_source_version() -> None:
    assert openalias._is_source_checkout(Path(openalias.__file__))
    assert openalias.__version__ == "0.3.0"


def test_resolve_version_uses_metadata_outside_source_checkout(monkeypatch) -> None:
    monkeypatch.setattr(openalias, "_is_source_checkout", lambda _path: False)
    monkeypatch.setattr(openalias, "version", lambda _name: "9.9.9")

    assert openalias._resolve_version() == "9.9.9"


def test_resolve_version_falls_back_when_metadata_missing(monkeypatch) -> None:
    monkeypatch.setattr(openalias, "_is_source_checkout", lambda _path: False)

    def _raise(_name: str) -> str:
        raise openalias.PackageNotFoundError

    monkeypatch.setattr(openalias, "version", _raise)

    assert openalias._resolve_version() == "0.3.0"
