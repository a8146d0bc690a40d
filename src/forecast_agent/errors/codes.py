"""Error codes for the forecast agent."""

from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes."""

    # Configuration errors (1xxx)
    CONFIG_INVALID = "FA-1001"

    # Plugin errors (2xxx)
    PLUGIN_NOT_FOUND = "FA-2001"
    PLUGIN_LOAD_FAILED = "FA-2002"
    PLUGIN_INIT_FAILED = "FA-2003"
    PLUGIN_ALREADY_REGISTERED = "FA-2004"
    PLUGIN_DEPENDENCY_MISSING = "FA-2005"
    PLUGIN_DISABLED = "FA-2006"

    # Streaming errors (3xxx)
    STREAM_CLOSED = "FA-3001"

    # Execution errors (6xxx)
    TOOL_NOT_FOUND = "FA-6001"
    TOOL_EXECUTION_FAILED = "FA-6002"
    VALIDATION_ERROR = "FA-6005"

    # Unknown error
    UNKNOWN = "FA-9999"

    def __str__(self) -> str:
        """Return the error code value."""
        return self.value
