"""Tests for CLI module."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from forecast_agent.cli import build_settings, cli
from forecast_agent.errors import ErrorCode, ExecutionError


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep environment overrides out of CLI runs."""
    for var in ("FORECAST_PLUGIN_NAME", "FORECAST_RANDOM_SEED", "FORECAST_OTEL_ENABLED"):
        monkeypatch.delenv(var, raising=False)
    from forecast_agent.config import reload_settings

    reload_settings()


class TestBuildSettings:
    """Test CLI overrides on top of environment settings."""

    def test_no_overrides(self):
        """Test the singleton is returned untouched."""
        from forecast_agent.config import get_settings

        assert build_settings() is get_settings()

    def test_overrides(self):
        """Test seed and plugin name overrides."""
        settings = build_settings(seed=7, plugin_name="WeatherService")

        assert settings.random_seed == 7
        assert settings.plugin_name == "WeatherService"


class TestForecastCommand:
    """Test the forecast command."""

    def test_text_output(self, runner):
        """Test the update and forecast are printed."""
        result = runner.invoke(cli, ["forecast", "2025-12-25", "Seattle"])

        assert result.exit_code == 0, result.output
        assert "Looking up the weather in Seattle for Thursday, December 25, 2025" in result.stdout
        assert "Forecast for Seattle" in result.stdout
        assert "Date:        2025-12-25" in result.stdout
        assert "°C" in result.stdout

    def test_json_output(self, runner):
        """Test JSON output carries the forecast and the update."""
        result = runner.invoke(cli, ["forecast", "2025-12-25", "Seattle", "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["forecast"]["date"] == "2025-12-25"
        assert -20 <= payload["forecast"]["temperature_c"] <= 55
        assert "temperature_f" in payload["forecast"]
        assert payload["updates"] == [
            "Looking up the weather in Seattle for Thursday, December 25, 2025"
        ]

    def test_unparseable_date(self, runner):
        """Test a non-date is echoed in the update and the forecast."""
        result = runner.invoke(cli, ["forecast", "not-a-date", "Seattle", "--json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["forecast"]["date"] == "not-a-date"
        assert payload["updates"] == ["Looking up the weather in Seattle for not-a-date"]

    def test_empty_inputs(self, runner):
        """Test empty date and location succeed."""
        result = runner.invoke(cli, ["forecast", "", "", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["forecast"]["date"] == ""

    def test_seed_is_reproducible(self, runner):
        """Test the same seed yields the same forecast."""
        args = ["forecast", "2025-12-25", "Seattle", "--seed", "42", "--json"]

        first = json.loads(runner.invoke(cli, args).stdout)
        second = json.loads(runner.invoke(cli, args).stdout)

        assert first["forecast"] == second["forecast"]

    def test_plugin_name_option(self, runner):
        """Test the plugin can be registered under another name."""
        result = runner.invoke(
            cli, ["forecast", "2025-12-25", "Seattle", "--plugin-name", "WeatherService"]
        )

        assert result.exit_code == 0, result.output

    def test_error_json(self, runner):
        """Test failures print format_error JSON and exit 1."""
        error = ExecutionError("delivery failed", details={"tool": "get_forecast_for_date"})
        with patch(
            "forecast_agent.core.ForecastAgent.invoke", AsyncMock(side_effect=error)
        ):
            result = runner.invoke(cli, ["forecast", "2025-12-25", "Seattle", "--json"])

        assert result.exit_code == 1
        payload = json.loads(result.stdout)
        assert payload["code"] == str(ErrorCode.TOOL_EXECUTION_FAILED)
        assert payload["message"] == "delivery failed"

    def test_error_text(self, runner):
        """Test failures print an error line and exit 1."""
        with patch(
            "forecast_agent.core.ForecastAgent.invoke",
            AsyncMock(side_effect=RuntimeError("boom")),
        ):
            result = runner.invoke(cli, ["forecast", "2025-12-25", "Seattle"])

        assert result.exit_code == 1
        assert "Error: boom" in result.stdout


class TestListCommand:
    """Test the list command."""

    def test_list(self, runner):
        """Test the weather tool is listed with its parameters."""
        result = runner.invoke(cli, ["list"])

        assert result.exit_code == 0, result.output
        assert "Found 1 tool(s)" in result.stdout
        assert "Weather.get_forecast_for_date" in result.stdout
        assert "date*" in result.stdout
        assert "location*" in result.stdout

    def test_list_json(self, runner):
        """Test JSON listing."""
        result = runner.invoke(cli, ["list", "--json"])

        assert result.exit_code == 0, result.output
        tools = json.loads(result.stdout)
        assert tools[0]["plugin"] == "Weather"
        assert [p["name"] for p in tools[0]["parameters"]] == ["date", "location"]


class TestVersionCommand:
    """Test version output."""

    def test_version(self, runner):
        """Test the version command."""
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert "forecast-agent v0.1.0" in result.stdout

    def test_version_option(self, runner):
        """Test --version."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.stdout
