"""Tests for the planrisk CLI."""

import json

from typer.testing import CliRunner

from cli.cli import app

runner = CliRunner()


def test_risk_json_output():
    """Test that --json prints the same payload as the API."""
    result = runner.invoke(app, ["risk", "--duration", "100", "--requirements", "40", "--developers", "5", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["probability"] == 0.7
    assert data["level"] == "Medium"


def test_risk_panel_output():
    """Test the human-readable risk panel."""
    result = runner.invoke(app, ["risk", "-d", "30", "-r", "10", "-n", "5"])

    assert result.exit_code == 0
    assert "10%" in result.stdout
    assert "Low" in result.stdout


def test_risk_invalid_input_exits_with_error():
    """Test invalid input prints an error and no estimate."""
    result = runner.invoke(app, ["risk", "-d", "0", "-r", "10", "-n", "5"])

    assert result.exit_code == 1
    assert "Invalid input" in result.stdout
    assert "Probability" not in result.stdout


def test_schedule_json_output():
    """Test that --json prints the schedule payload."""
    result = runner.invoke(app, ["schedule", "--duration", "10", "--start", "2024-01-01", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [p["dayCount"] for p in data["phases"]] == [1, 2, 4, 2, 1]
    assert data["overallEndDate"] == "2024-01-10"
    assert data["totalScheduledDays"] == 10


def test_schedule_table_reports_divergence():
    """Test that the table output notes when rounding changes the total."""
    result = runner.invoke(app, ["schedule", "-d", "1", "-s", "2024-01-01"])

    assert result.exit_code == 0
    assert "Planning" in result.stdout
    assert "Deployment" in result.stdout
    assert "Requested 1 days" in result.stdout


def test_schedule_invalid_duration_exits_with_error():
    """Test that a zero duration exits with an error."""
    result = runner.invoke(app, ["schedule", "-d", "0"])

    assert result.exit_code == 1
    assert "Invalid input" in result.stdout


def test_schedule_huge_duration_exits_with_error():
    """Test that a duration past the limit exits cleanly instead of overflowing dates."""
    result = runner.invoke(app, ["schedule", "-d", "5000000", "-s", "2024-01-01"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Invalid input" in result.stdout
