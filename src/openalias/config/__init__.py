"""Parser configuration loading."""

from __future__ import annotations

from .loader import (
    collect_settings_schema_errors,
    find_settings_path,
    load_settings,
    settings_from_mapping,
)
from .models import ParserSettings
from .utils import (
    CONFIG_DIR_NAME,
    SETTINGS_FILE_NAME,
    TEMPLATE_DIR_NAME,
    external_config_dirs,
)

__all__ = [
    "CONFIG_DIR_NAME",
    "SETTINGS_FILE_NAME",
    "TEMPLATE_DIR_NAME",
    "ParserSettings",
    "collect_settings_schema_errors",
    "external_config_dirs",
    "find_settings_path",
    "load_settings",
    "settings_from_mapping",
]
