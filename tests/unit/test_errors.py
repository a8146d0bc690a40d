"""Tests for the error handling system."""

from forecast_agent.errors import (
    ConfigurationError,
    ErrorCode,
    ExecutionError,
    ForecastAgentError,
    PluginError,
    StreamingError,
    format_error,
)


class TestForecastAgentErrors:
    """Test error classes and error codes."""

    def test_basic_error(self):
        """Test UNKNOWN is the default code."""
        error = ForecastAgentError("Something broke")
        assert str(error) == "[FA-9999] Something broke"
        assert error.details == {}

    def test_error_with_details(self):
        """Test details are appended to the string form."""
        error = ForecastAgentError(
            "Tool not found",
            code=ErrorCode.TOOL_NOT_FOUND,
            details={"tool": "get_forecast_for_date", "plugin": "Weather"},
        )
        assert str(error).startswith("[FA-6001] Tool not found | Details: ")
        assert "get_forecast_for_date" in str(error)

    def test_subclass_defaults(self):
        """Test each subclass carries its own default code."""
        assert ConfigurationError("bad").code == ErrorCode.CONFIG_INVALID
        assert PluginError("bad").code == ErrorCode.PLUGIN_LOAD_FAILED
        assert StreamingError("bad").code == ErrorCode.STREAM_CLOSED
        assert ExecutionError("bad").code == ErrorCode.TOOL_EXECUTION_FAILED

    def test_subclasses_share_base(self):
        """Test the hierarchy."""
        for cls in (ConfigurationError, PluginError, StreamingError, ExecutionError):
            assert isinstance(cls("x"), ForecastAgentError)

    def test_to_dict(self):
        """Test serialization."""
        error = PluginError(
            "Plugin 'Weather' is not registered",
            code=ErrorCode.PLUGIN_NOT_FOUND,
            details={"plugin": "Weather"},
        )

        assert error.to_dict() == {
            "error": "PluginError",
            "code": "FA-2001",
            "message": "Plugin 'Weather' is not registered",
            "details": {"plugin": "Weather"},
        }

    def test_error_code_values_unique(self):
        """Test error codes are unique and prefixed."""
        values = [c.value for c in ErrorCode]
        assert len(values) == len(set(values))
        assert all(v.startswith("FA-") for v in values)


class TestFormatError:
    """Test format_error."""

    def test_format_agent_error(self):
        """Test agent errors use their own dict form."""
        error = ExecutionError("failed", details={"tool": "x"})
        assert format_error(error) == error.to_dict()

    def test_format_generic_exception(self):
        """Test other exceptions get UNKNOWN and a traceback."""
        try:
            raise ConnectionError("transport closed")
        except ConnectionError as e:
            result = format_error(e)

        assert result["error"] == "ConnectionError"
        assert result["code"] == "FA-9999"
        assert result["message"] == "transport closed"
        assert "ConnectionError: transport closed" in result["details"]["traceback"]
