"""Tests for the `temporis` command line output contract.

On success stdout carries exactly one line. Unparseable expressions exit with status 1 and an error
on stderr; invalid options or configuration exit with status 2.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from temporis.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TEMPORIS_REFERENCE_DATE", "TEMPORIS_OUTPUT_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_resolve_with_reference_option() -> None:
    result = runner.invoke(app, ["resolve", "nfriday", "--reference", "2024-01-16"])
    assert result.exit_code == 0
    assert result.stdout == "2024-01-19\n"


def test_resolve_uses_reference_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPORIS_REFERENCE_DATE", "2024-01-16")
    result = runner.invoke(app, ["resolve", "eoq"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "2024-03-31"


def test_option_overrides_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPORIS_REFERENCE_DATE", "2023-06-01")
    monkeypatch.setenv("TEMPORIS_OUTPUT_FORMAT", "%Y/%m/%d")
    result = runner.invoke(
        app, ["resolve", "tomorrow", "-r", "2024-01-16", "--format", "%d.%m.%Y"]
    )
    assert result.exit_code == 0
    assert result.stdout.strip() == "17.01.2024"


def test_resolve_unrecognized_expression_fails() -> None:
    result = runner.invoke(app, ["resolve", "banana", "--reference", "2024-01-16"])
    assert result.exit_code == 1
    assert "unrecognized_format" in result.output
    assert "2024" not in result.output


def test_resolve_invalid_calendar_date_fails() -> None:
    result = runner.invoke(app, ["resolve", "29/02", "--reference", "2023-01-16"])
    assert result.exit_code == 1
    assert "invalid_calendar_date" in result.output


def test_invalid_reference_option_is_usage_error() -> None:
    result = runner.invoke(app, ["resolve", "today", "--reference", "16.01.2024"])
    assert result.exit_code == 2


def test_invalid_environment_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEMPORIS_OUTPUT_FORMAT", "plain")
    result = runner.invoke(app, ["resolve", "today"])
    assert result.exit_code == 2
    assert "Invalid environment configuration" in result.output


def test_explain_prints_parsed_form() -> None:
    result = runner.invoke(app, ["explain", "2monday"])
    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "rule": "weekday",
        "index": 0,
        "weeks_ahead": 2,
        "next_flag": False,
    }


def test_explain_reports_parse_error() -> None:
    result = runner.invoke(app, ["explain", "16-foo-2024"])
    assert result.exit_code == 1
    assert "invalid_month_name" in result.output


def test_overlong_number_exits_with_parse_error() -> None:
    result = runner.invoke(app, ["resolve", "9" * 5000 + "d", "--reference", "2024-01-16"])
    assert result.exit_code == 1
    assert "invalid_numeric_range" in result.output
