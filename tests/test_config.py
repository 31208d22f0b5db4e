"""
tests/test_config.py

Environment parsing for ValidationSettings.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from jsv.config import DEFAULT_SCHEMA_PATH, ValidationSettings, get_validation_settings

ENV_NAMES = (
    "JSV_DEFAULT_SCHEMA_PATH",
    "JSV_LOG_VIOLATIONS",
    "JSV_ABORT_ON_MALFORMED",
    "JSV_MAX_REPORTED_RECORDS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    get_validation_settings.cache_clear()
    yield
    get_validation_settings.cache_clear()


def test_defaults_when_unset() -> None:
    assert get_validation_settings() == ValidationSettings()
    assert get_validation_settings().default_schema_path == DEFAULT_SCHEMA_PATH


def test_values_are_read_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSV_DEFAULT_SCHEMA_PATH", " schemas/people.json ")
    monkeypatch.setenv("JSV_LOG_VIOLATIONS", "Yes")
    monkeypatch.setenv("JSV_ABORT_ON_MALFORMED", "1")
    monkeypatch.setenv("JSV_MAX_REPORTED_RECORDS", "25")

    settings = get_validation_settings()

    assert settings.default_schema_path == "schemas/people.json"
    assert settings.log_violations is True
    assert settings.abort_on_malformed is True
    assert settings.max_reported_records == 25


def test_unparseable_values_fall_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSV_DEFAULT_SCHEMA_PATH", "   ")
    monkeypatch.setenv("JSV_LOG_VIOLATIONS", "maybe")
    monkeypatch.setenv("JSV_MAX_REPORTED_RECORDS", "many")

    settings = get_validation_settings()

    assert settings.default_schema_path == DEFAULT_SCHEMA_PATH
    assert settings.log_violations is False
    assert settings.max_reported_records == 500


@pytest.mark.parametrize("raw", ["0", "-5"])
def test_max_reported_records_is_at_least_one(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("JSV_MAX_REPORTED_RECORDS", raw)

    assert get_validation_settings().max_reported_records == 1


def test_settings_are_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    first = get_validation_settings()
    monkeypatch.setenv("JSV_MAX_REPORTED_RECORDS", "7")

    assert get_validation_settings() is first
