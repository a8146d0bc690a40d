"""Streaming response sinks."""

from forecast_agent.streaming.response import (
    StreamingResponse,
    StreamingSink,
    StreamingUpdate,
    UpdateType,
)

__all__ = [
    "StreamingResponse",
    "StreamingSink",
    "StreamingUpdate",
    "UpdateType",
]
