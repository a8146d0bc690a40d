"""Streaming response sinks.

A sink receives human-readable progress text while a tool runs. Tools only
depend on the ``StreamingSink`` protocol; ``StreamingResponse`` is an
in-memory implementation that records updates and can forward each one to
a callback (the CLI uses this to echo updates as they arrive).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from forecast_agent.errors import ErrorCode, StreamingError
from forecast_agent.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class StreamingSink(Protocol):
    """Anything that accepts informative progress updates."""

    async def queue_informative_update(self, message: str) -> None:
        """Queue a human-readable status update."""
        ...


class UpdateType(str, Enum):
    """Kinds of streamed updates."""

    INFORMATIVE = "informative"
    TEXT = "text"


@dataclass
class StreamingUpdate:
    """A single queued update."""

    sequence: int
    update_type: UpdateType
    message: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "sequence": self.sequence,
            "update_type": self.update_type.value,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
        }


class StreamingResponse:
    """In-memory streaming response.

    Example:
        ```python
        response = StreamingResponse(on_update=lambda u: print(u.message))
        await response.queue_informative_update("Looking up the weather...")
        await response.end_stream()
        response.get_updates(cursor=0)
        ```
    """

    def __init__(
        self,
        on_update: Callable[[StreamingUpdate], None] | None = None,
        max_updates: int = 10000,
    ) -> None:
        """Initialize response.

        Args:
            on_update: Called with every update as it is queued
            max_updates: Maximum updates retained; older ones are dropped
        """
        self.on_update = on_update
        self.max_updates = max_updates
        self._updates: list[StreamingUpdate] = []
        self._sequence = 0
        self._ended = False

    @property
    def ended(self) -> bool:
        """Whether ``end_stream`` has been called."""
        return self._ended

    @property
    def updates(self) -> list[StreamingUpdate]:
        """All retained updates in queue order."""
        return list(self._updates)

    @property
    def informative_updates(self) -> list[str]:
        """Messages of retained informative updates."""
        return [
            u.message for u in self._updates if u.update_type == UpdateType.INFORMATIVE
        ]

    async def queue_informative_update(self, message: str) -> None:
        """Queue a status update.

        Raises:
            StreamingError: If the stream has ended
        """
        self._queue(UpdateType.INFORMATIVE, message)

    async def queue_text_chunk(self, text: str) -> None:
        """Queue a chunk of response text.

        Raises:
            StreamingError: If the stream has ended
        """
        self._queue(UpdateType.TEXT, text)

    async def end_stream(self) -> None:
        """End the stream. Further updates are rejected."""
        if not self._ended:
            self._ended = True
            logger.debug("Stream ended", updates=self._sequence)

    def get_updates(self, cursor: int = 0, limit: int = 100) -> dict[str, Any]:
        """Get updates with cursor-based pagination.

        Args:
            cursor: First sequence number to return
            limit: Maximum updates to return

        Returns:
            Dictionary with updates, next cursor and stream state
        """
        page = [u for u in self._updates if u.sequence >= cursor][:limit]
        next_cursor = page[-1].sequence + 1 if page else max(cursor, 0)

        return {
            "updates": [u.to_dict() for u in page],
            "next_cursor": next_cursor,
            "total_updates": self._sequence,
            "has_more": next_cursor < self._sequence,
            "ended": self._ended,
        }

    def _queue(self, update_type: UpdateType, message: str) -> None:
        if self._ended:
            raise StreamingError(
                "Cannot queue an update after the stream has ended",
                code=ErrorCode.STREAM_CLOSED,
                details={"update_type": update_type.value},
            )

        update = StreamingUpdate(
            sequence=self._sequence,
            update_type=update_type,
            message=message,
        )
        self._sequence += 1
        self._updates.append(update)
        if len(self._updates) > self.max_updates:
            del self._updates[0]

        if self.on_update is not None:
            self.on_update(update)
