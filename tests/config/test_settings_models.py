import dataclasses

import pytest

from openalias.config import ParserSettings, collect_settings_schema_errors


def test_parser_settings_defaults():
    settings = ParserSettings()

    assert settings.require_address is False
    assert settings.currencies is None
    assert settings.accepts_currency("xmr")


def test_parser_settings_normalizes_currencies():
    settings = ParserSettings.from_values(currencies=[" XMR ", "Btc"])

    assert settings.currencies == ("xmr", "btc")
    assert settings.accepts_currency("btc")
    assert not settings.accepts_currency("ltc")


def test_parser_settings_empty_filter_rejects_everything():
    settings = ParserSettings(currencies=())

    assert not settings.accepts_currency("xmr")


def test_parser_settings_are_frozen():
    settings = ParserSettings()

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.require_address = True


def test_collect_settings_schema_errors_sorted():
    errors = collect_settings_schema_errors({"currencies": "xmr", "require_address": 1})

    assert [error["location"] for error in errors] == ["currencies", "require_address"]


def test_collect_settings_schema_errors_accepts_valid_payload():
    assert collect_settings_schema_errors({"require_address": False, "currencies": []}) == []


def test_collect_settings_schema_errors_names_each_unknown_key():
    errors = collect_settings_schema_errors({"strict": True, "currency": "xmr"})

    assert errors == [
        {
            "location": "currency",
            "message": "unknown setting 'currency'; expected one of: currencies, require_address",
        },
        {
            "location": "strict",
            "message": "unknown setting 'strict'; expected one of: currencies, require_address",
        },
    ]


def test_collect_settings_schema_errors_indexes_list_entries():
    errors = collect_settings_schema_errors({"currencies": ["xmr", "b7c"]})

    assert [error["location"] for error in errors] == ["currencies[1]"]
