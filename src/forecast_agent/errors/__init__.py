"""Forecast agent error handling system."""

from forecast_agent.errors.base import (
    ConfigurationError,
    ExecutionError,
    ForecastAgentError,
    PluginError,
    StreamingError,
)
from forecast_agent.errors.codes import ErrorCode
from forecast_agent.errors.handlers import format_error

__all__ = [
    "ConfigurationError",
    "ErrorCode",
    "ExecutionError",
    "ForecastAgentError",
    "PluginError",
    "StreamingError",
    "format_error",
]
