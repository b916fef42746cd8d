"""Tests for environment settings validation and logging setup."""

from __future__ import annotations

import logging
from datetime import date

import pytest

from temporis.config.logging import configure_logging
from temporis.config.settings import Settings, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TEMPORIS_REFERENCE_DATE", "TEMPORIS_OUTPUT_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.reference_date is None
    assert settings.output_format == "%Y-%m-%d"
    assert settings.log_level == "WARNING"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPORIS_REFERENCE_DATE", "2024-01-16")
    monkeypatch.setenv("TEMPORIS_OUTPUT_FORMAT", "%d/%m/%Y")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings(_env_file=None)
    assert settings.reference_date == date(2024, 1, 16)
    assert settings.reference_or_today() == date(2024, 1, 16)
    assert settings.output_format == "%d/%m/%Y"
    assert settings.log_level == "DEBUG"


def test_reference_or_today_without_reference() -> None:
    settings = Settings(_env_file=None)
    assert settings.reference_or_today() == date.today()


def test_output_format_requires_directive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPORIS_OUTPUT_FORMAT", "yyyy-mm-dd")
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(RuntimeError):
        load_settings()


def test_invalid_reference_date_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPORIS_REFERENCE_DATE", "2023-02-30")
    with pytest.raises(RuntimeError):
        load_settings()


def test_configure_logging_accepts_lowercase_level(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("debug")
    monkeypatch.setenv("LOG_LEVEL", "error")
    configure_logging()

    assert [call["level"] for call in calls] == ["DEBUG", "ERROR"]
