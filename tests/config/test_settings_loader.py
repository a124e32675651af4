import logging
import textwrap

import pytest

from openalias.config import (
    ParserSettings,
    external_config_dirs,
    find_settings_path,
    load_settings,
    settings_from_mapping,
)


def test_load_settings_defaults_without_file(config_home):
    assert find_settings_path() is None
    assert load_settings() == ParserSettings()


def test_load_settings_discovers_user_file(config_home, caplog):
    (config_home / "settings.yaml").write_text(
        textwrap.dedent(
            """
            require_address: true
            currencies:
              - XMR
              - btc
            """
        ),
        encoding="utf-8",
    )
    caplog.set_level(logging.INFO, logger="openalias.config.utils")

    settings = load_settings()

    assert settings == ParserSettings(require_address=True, currencies=("xmr", "btc"))
    assert "Loading settings from" in caplog.text


def test_load_settings_from_explicit_path(tmp_path):
    path = tmp_path / "custom.yaml"
    path.write_text("currencies: [ltc]\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings.require_address is False
    assert settings.currencies == ("ltc",)


def test_load_settings_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_settings(str(path)) == ParserSettings()


def test_load_settings_missing_explicit_file(tmp_path):
    with pytest.raises(ValueError, match="does not exist"):
        load_settings(tmp_path / "missing.yaml")


def test_load_settings_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- xmr\n", encoding="utf-8")

    with pytest.raises(ValueError, match="is not a mapping"):
        load_settings(path)


def test_load_settings_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("currencies: [xmr\n", encoding="utf-8")

    with pytest.raises(ValueError, match="not valid YAML"):
        load_settings(path)


def test_settings_from_mapping_reports_schema_errors():
    with pytest.raises(ValueError) as excinfo:
        settings_from_mapping({"require_address": "yes", "currencies": ["x-1"]}, "inline")

    message = str(excinfo.value)
    assert message.startswith("Settings inline failed validation:")
    assert "require_address: 'yes' is not of type 'boolean'" in message
    assert "currencies[0]: 'x-1' does not match" in message


def test_settings_from_mapping_rejects_unknown_keys():
    with pytest.raises(ValueError, match="strict: unknown setting 'strict'"):
        settings_from_mapping({"strict": True})


def test_external_config_dirs_default_to_home(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    dirs = external_config_dirs()

    assert dirs[0] == tmp_path / ".config" / "openalias"
