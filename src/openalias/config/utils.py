"""Shared helpers and constants for parser configuration."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

CONFIG_DIR_NAME = "openalias"
SETTINGS_FILE_NAME = "settings.yaml"
TEMPLATE_DIR_NAME = "templates"

LOGGER = logging.getLogger(__name__)

SYSTEM_CONFIG_DIRS = [
    Path("/etc") / CONFIG_DIR_NAME,
    Path("/usr/local/etc") / CONFIG_DIR_NAME,
]


def external_config_dirs() -> List[Path]:
    """Return directories that may contain external configuration.

    Returns:
        List[Path]: Ordered list of user and system config directories.
    """
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        user_dir = Path(xdg_home) / CONFIG_DIR_NAME
    else:
        user_dir = Path.home() / ".config" / CONFIG_DIR_NAME
    return [user_dir, *SYSTEM_CONFIG_DIRS]
