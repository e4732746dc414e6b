"""Command-line entry point: option validation and the interactive menu."""

from __future__ import annotations

from typer.testing import CliRunner

from main import app

runner = CliRunner()


def test_unknown_log_level_is_a_usage_error() -> None:
    result = runner.invoke(app, ["--log-level", "loud", "-f", "vanilla"])
    assert result.exit_code == 2
    assert "log-level" in result.output


def test_log_level_is_case_insensitive() -> None:
    result = runner.invoke(app, ["--log-level", "debug"], input="0\n")
    assert result.exit_code == 0
    assert "Goodbye" in result.output


def test_menu_survives_impossible_difficulty() -> None:
    # Difficulty 3 fills a 2×2 grid with one colour, leaving no distinct target.
    result = runner.invoke(app, ["--size", "2"], input="1\n3\n0\n")
    assert result.exit_code == 0
    assert "uniform grid" in result.output
    assert "Goodbye" in result.output


def test_direct_launch_reports_bad_parameter() -> None:
    result = runner.invoke(app, ["-f", "vanilla", "--size", "2", "-d", "3"])
    assert result.exit_code == 2
