"""Settings file discovery, validation and loading."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from .models import ParserSettings
from .utils import LOGGER, SETTINGS_FILE_NAME, external_config_dirs

_SCHEMA_PACKAGE = "openalias.resources"
_SCHEMA_FILENAME = "settings.schema.json"


@lru_cache(maxsize=1)
def _settings_validator() -> Draft202012Validator:
    """Load and cache the settings JSON Schema validator.

    Returns:
        Draft202012Validator: Validator for settings payloads.
    """
    schema_text = resources.files(_SCHEMA_PACKAGE).joinpath(_SCHEMA_FILENAME).read_text(
        encoding="utf-8"
    )
    return Draft202012Validator(json.loads(schema_text))


def _setting_location(path: Iterable[object]) -> str:
    """Render a schema error path as a setting reference.

    Args:
        path (Iterable[object]): Path parts from the offending instance.

    Returns:
        str: Reference such as ``currencies[1]``, or ``<root>`` for the mapping itself.
    """
    location = ""
    for part in path:
        if isinstance(part, int):
            location += f"[{part}]"
        elif location:
            location += f".{part}"
        else:
            location = str(part)
    return location or "<root>"


def _setting_errors(err: ValidationError) -> List[Dict[str, str]]:
    """Describe one schema violation in settings terms.

    Unknown keys are reported one per key with the accepted names.

    Args:
        err (ValidationError): JSON Schema validation error.

    Returns:
        List[Dict[str, str]]: Error location and message entries.
    """
    location = _setting_location(err.absolute_path)
    if err.validator == "additionalProperties" and isinstance(err.instance, dict):
        known = sorted(err.schema.get("properties", {}))
        return [
            {
                "location": str(name),
                "message": f"unknown setting {name!r}; expected one of: {', '.join(known)}",
            }
            for name in err.instance
            if name not in known
        ]
    return [{"location": location, "message": str(err.message)}]


def collect_settings_schema_errors(payload: object) -> List[Dict[str, str]]:
    """Collect settings schema violations in a stable order.

    Args:
        payload (object): Settings payload to validate.

    Returns:
        List[Dict[str, str]]: Errors sorted by location and message.
    """
    errors = [
        entry
        for err in _settings_validator().iter_errors(payload)
        for entry in _setting_errors(err)
    ]
    return sorted(errors, key=lambda item: (item["location"], item["message"]))


def find_settings_path() -> Optional[Path]:
    """Find the first settings file in the config directories.

    Returns:
        Optional[Path]: Settings file path, or None when no file exists.
    """
    for base_dir in external_config_dirs():
        candidate = base_dir / SETTINGS_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def _load_yaml(path: Path) -> dict:
    """Load a settings YAML file.

    Args:
        path (Path): Settings file path.

    Returns:
        dict: Parsed YAML mapping; an empty file yields an empty mapping.

    Raises:
        ValueError: If the YAML is invalid or not a mapping.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ValueError(f"Settings file {path} is not valid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} is not a mapping")
    return data


def settings_from_mapping(data: dict, source: str = "<mapping>") -> ParserSettings:
    """Validate a settings mapping and build ParserSettings.

    Args:
        data (dict): Raw settings mapping.
        source (str): Label used in error messages.

    Returns:
        ParserSettings: Validated settings.

    Raises:
        ValueError: If the mapping violates the settings schema.
    """
    errors = collect_settings_schema_errors(data)
    if errors:
        lines = "\n".join(f"  {item['location']}: {item['message']}" for item in errors)
        raise ValueError(f"Settings {source} failed validation:\n{lines}")
    return ParserSettings.from_values(
        require_address=data.get("require_address", False),
        currencies=data.get("currencies"),
    )


def load_settings(path: Optional[Path | str] = None) -> ParserSettings:
    """Load parser settings.

    Args:
        path (Optional[Path | str]): Explicit settings file. When omitted the
            user and system config directories are searched.

    Returns:
        ParserSettings: Loaded settings, or defaults when no file is found.

    Raises:
        ValueError: If the settings file is missing, invalid YAML, or fails validation.
    """
    if path is None:
        settings_path = find_settings_path()
        if settings_path is None:
            LOGGER.debug("No settings file found; using defaults")
            return ParserSettings()
    else:
        settings_path = Path(path).expanduser()
        if not settings_path.is_file():
            raise ValueError(f"Settings file {settings_path} does not exist")
    LOGGER.info("Loading settings from %s", settings_path)
    return settings_from_mapping(_load_yaml(settings_path), str(settings_path))
