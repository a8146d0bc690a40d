"""Error formatting utilities."""

import traceback
from typing import Any

from forecast_agent.errors.base import ForecastAgentError
from forecast_agent.errors.codes import ErrorCode


def format_error(error: Exception) -> dict[str, Any]:
    """Format any exception into a standardized error response.

    Args:
        error: The exception to format

    Returns:
        Dictionary containing error details
    """
    if isinstance(error, ForecastAgentError):
        return error.to_dict()

    return {
        "error": error.__class__.__name__,
        "code": str(ErrorCode.UNKNOWN),
        "message": str(error),
        "details": {
            "traceback": "".join(traceback.format_exception(error)),
        },
    }
