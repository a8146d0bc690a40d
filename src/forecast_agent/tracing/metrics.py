"""OpenTelemetry instruments for tool calls, plugins and forecasts.

Without a configured meter provider every instrument is a no-op, so the
collector can be used unconditionally.
"""

from functools import lru_cache

from opentelemetry import metrics

METER_NAME = "forecast_agent.metrics"


def _flag(value: bool) -> str:
    return "true" if value else "false"


class MetricsCollector:
    """Holds the agent's instruments and records events against them."""

    def __init__(self) -> None:
        meter = metrics.get_meter(METER_NAME)

        self._tool_executions = meter.create_counter(
            "forecast_agent.tool.executions", unit="1", description="Tool calls"
        )
        self._tool_errors = meter.create_counter(
            "forecast_agent.tool.errors", unit="1", description="Failed tool calls"
        )
        self._tool_latency = meter.create_histogram(
            "forecast_agent.tool.latency", unit="s", description="Tool call duration"
        )
        self._plugins = meter.create_up_down_counter(
            "forecast_agent.plugin.loaded", unit="1", description="Registered plugins"
        )
        self._forecasts = meter.create_counter(
            "forecast_agent.forecasts", unit="1", description="Forecasts generated"
        )

    def record_tool_execution(
        self,
        tool_name: str,
        plugin_name: str,
        success: bool = True,
        latency: float | None = None,
        error_type: str | None = None,
    ) -> None:
        """Count one tool call.

        The error counter is only touched for failures that name an
        ``error_type``; latency is recorded when given.
        """
        attrs = {"tool": tool_name, "plugin": plugin_name, "success": _flag(success)}
        self._tool_executions.add(1, attrs)
        if latency is not None:
            self._tool_latency.record(latency, attrs)
        if error_type and not success:
            self._tool_errors.add(1, attrs | {"error_type": error_type})

    def record_plugin_loaded(self, plugin_name: str, loaded: bool = True) -> None:
        self._plugins.add(1 if loaded else -1, {"plugin": plugin_name})

    def record_forecast(self, summary: str, date_parsed: bool) -> None:
        self._forecasts.add(1, {"summary": summary, "date_parsed": _flag(date_parsed)})


@lru_cache
def get_metrics_collector() -> MetricsCollector:
    """Process-wide collector, created on first use."""
    return MetricsCollector()
