"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from ledgerload.cli.date_filters import resolve_cli_date_range
from ledgerload.utils.date_parser import parse_date


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_parses_explicit_dates():
    start, end = resolve_cli_date_range(_ctx(), start_date="2024-01-02", end_date="2024-01-05")

    assert start == parse_date("2024-01-02")
    assert end == parse_date("2024-01-05")


def test_resolve_cli_date_range_open_ended():
    start, end = resolve_cli_date_range(_ctx(), start_date="2024-01-02", end_date=None)

    assert start == date(2024, 1, 2)
    assert end is None


def test_resolve_cli_date_range_no_dates():
    start, end = resolve_cli_date_range(_ctx(), start_date=None, end_date=None)

    assert start is None
    assert end is None


def test_resolve_cli_date_range_relative_dates():
    start, end = resolve_cli_date_range(_ctx(), start_date="this month", end_date="today")

    assert start == date.today().replace(day=1)
    assert end == date.today()


def test_resolve_cli_date_range_invalid_start_date(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), start_date="not-a-date", end_date=None)

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "Invalid start date" in err


def test_resolve_cli_date_range_invalid_end_date(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), start_date=None, end_date="whenever")

    assert excinfo.value.exit_code == 1
    assert "Invalid end date" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_inverted_range(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), start_date="2024-02-01", end_date="2024-01-01")

    assert excinfo.value.exit_code == 1
    assert "must not be after" in capsys.readouterr().err
