"""Tests for configuration settings."""

import pytest
from pydantic import ValidationError

from forecast_agent.config import Settings, get_settings, reload_settings
from forecast_agent.errors import ConfigurationError, ErrorCode

ENV_VARS = [
    "FORECAST_ENV",
    "FORECAST_DEBUG",
    "FORECAST_LOG_LEVEL",
    "FORECAST_LOG_JSON",
    "FORECAST_PLUGIN_NAME",
    "FORECAST_RANDOM_SEED",
    "FORECAST_OTEL_ENABLED",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear forecast settings from the environment."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield monkeypatch


class TestSettingsDefaults:
    """Test Settings default values."""

    def test_defaults(self, clean_env):
        """Test out-of-the-box values."""
        settings = Settings(_env_file=None)

        assert settings.env == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.plugin_name == "Weather"
        assert settings.random_seed is None
        assert settings.otel_enabled is False
        assert settings.otel_service_name == "forecast-agent"
        assert settings.otel_exporter_otlp_endpoint == "http://localhost:4317"

    def test_debug_forces_debug_log_level(self, clean_env):
        """Test debug overrides the configured log level."""
        assert Settings(_env_file=None, log_level="WARNING").effective_log_level() == "WARNING"
        settings = Settings(_env_file=None, log_level="WARNING", debug=True)
        assert settings.effective_log_level() == "DEBUG"

    def test_environment_helpers(self, clean_env):
        """Test is_production and is_development."""
        assert Settings(_env_file=None).is_development()
        assert Settings(_env_file=None, env="production").is_production()
        assert not Settings(_env_file=None, env="staging").is_development()


class TestSettingsFromEnvironment:
    """Test FORECAST_ environment variables."""

    def test_prefixed_variables(self, clean_env):
        """Test values are read with the FORECAST_ prefix."""
        clean_env.setenv("FORECAST_ENV", "staging")
        clean_env.setenv("FORECAST_PLUGIN_NAME", "WeatherService")
        clean_env.setenv("FORECAST_RANDOM_SEED", "42")
        clean_env.setenv("FORECAST_OTEL_ENABLED", "true")

        settings = Settings(_env_file=None)

        assert settings.env == "staging"
        assert settings.plugin_name == "WeatherService"
        assert settings.random_seed == 42
        assert settings.otel_enabled is True

    def test_log_level_case_insensitive(self, clean_env):
        """Test lower-case log levels are normalized."""
        clean_env.setenv("FORECAST_LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_empty_seed_is_unset(self, clean_env):
        """Test an empty seed variable means unseeded."""
        clean_env.setenv("FORECAST_RANDOM_SEED", "")

        assert Settings(_env_file=None).random_seed is None


class TestSettingsValidation:
    """Test invalid values are rejected."""

    def test_invalid_env(self, clean_env):
        """Test unknown environments fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, env="qa")

    def test_invalid_log_level(self, clean_env):
        """Test unknown log levels fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="VERBOSE")

    def test_empty_plugin_name(self, clean_env):
        """Test the plugin name must not be empty."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, plugin_name="")


class TestLogFormat:
    """Test use_json_logs resolution."""

    @pytest.mark.parametrize(
        "env, log_json, expected",
        [
            ("development", None, False),
            ("production", None, True),
            ("production", False, False),
            ("development", True, True),
        ],
    )
    def test_use_json_logs(self, clean_env, env, log_json, expected):
        """Test explicit log_json wins over the environment default."""
        settings = Settings(_env_file=None, env=env, log_json=log_json)

        assert settings.use_json_logs() is expected


class TestGetSettings:
    """Test the settings singleton."""

    def test_singleton(self, clean_env):
        """Test repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_reload(self, clean_env):
        """Test reload picks up environment changes."""
        get_settings()
        clean_env.setenv("FORECAST_PLUGIN_NAME", "Reloaded")

        settings = reload_settings()

        assert settings.plugin_name == "Reloaded"
        assert get_settings() is settings
        clean_env.delenv("FORECAST_PLUGIN_NAME")
        reload_settings()

    def test_invalid_environment_raises_configuration_error(self, clean_env):
        """Test invalid environment values surface as ConfigurationError."""
        clean_env.setenv("FORECAST_LOG_LEVEL", "VERBOSE")

        with pytest.raises(ConfigurationError) as exc_info:
            reload_settings()

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID
        assert exc_info.value.details["fields"] == ["log_level"]
        clean_env.delenv("FORECAST_LOG_LEVEL")
        reload_settings()
