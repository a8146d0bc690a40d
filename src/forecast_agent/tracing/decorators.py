"""Span decorator for sync and async callables."""

import functools
import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

F = TypeVar("F", bound=Callable[..., Any])

_PRIMITIVES = (str, int, float, bool)


@contextmanager
def _span(
    module: str, span_name: str, attributes: dict[str, Any] | None, kwargs: dict[str, Any]
) -> Iterator[trace.Span]:
    tracer = trace.get_tracer(module)
    with tracer.start_as_current_span(span_name) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)
        for key, value in kwargs.items():
            if isinstance(value, _PRIMITIVES):
                span.set_attribute(f"arg.{key}", value)

        try:
            yield span
        except Exception as e:
            span.set_status(Status(StatusCode.ERROR))
            span.record_exception(e)
            raise
        span.set_status(Status(StatusCode.OK))


def traced(
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Callable[[F], F]:
    """Run the decorated function inside an OpenTelemetry span.

    Primitive keyword arguments are recorded as ``arg.<name>`` attributes.

    Args:
        name: Span name, defaults to ``<module>.<function>``
        attributes: Static attributes set on every span

    Example:
        ```python
        @traced(name="forecast.get_forecast")
        async def get_forecast(self, date: str, location: str) -> Forecast:
            ...
        ```
    """

    def decorator(func: F) -> F:
        span_name = name or f"{func.__module__}.{func.__name__}"

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with _span(func.__module__, span_name, attributes, kwargs):
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _span(func.__module__, span_name, attributes, kwargs):
                return func(*args, **kwargs)

        return sync_wrapper  # type: ignore[return-value]

    return decorator
