"""Shared fixtures for settings tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from openalias.config import utils


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point config discovery at an isolated directory.

    Returns:
        Path: The ``openalias`` directory under a temporary XDG config home.
    """
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.setattr(utils, "SYSTEM_CONFIG_DIRS", [])
    config_dir = tmp_path / utils.CONFIG_DIR_NAME
    config_dir.mkdir()
    return config_dir
