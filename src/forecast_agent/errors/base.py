"""Exception hierarchy for the forecast agent.

Every error carries an ``ErrorCode`` and a free-form ``details`` dict so it
can be logged with context and serialized by ``format_error``. Subclasses
only differ in the code they use when none is given.
"""

from typing import Any, ClassVar

from forecast_agent.errors.codes import ErrorCode


class ForecastAgentError(Exception):
    """Base exception for all forecast agent errors."""

    default_code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize error.

        Args:
            message: Human-readable error message
            code: Error code (defaults to the class's ``default_code``)
            details: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.details:
            text = f"{text} | Details: {self.details}"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Serializable form used in CLI and API error output."""
        return {
            "error": type(self).__name__,
            "code": str(self.code),
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ForecastAgentError):
    """Invalid or unloadable settings."""

    default_code = ErrorCode.CONFIG_INVALID


class PluginError(ForecastAgentError):
    """Plugin registration and lookup failures."""

    default_code = ErrorCode.PLUGIN_LOAD_FAILED


class StreamingError(ForecastAgentError):
    """Streaming sink misuse."""

    default_code = ErrorCode.STREAM_CLOSED


class ExecutionError(ForecastAgentError):
    """Tool lookup, validation and execution failures."""

    default_code = ErrorCode.TOOL_EXECUTION_FAILED
