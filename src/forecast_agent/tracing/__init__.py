"""OpenTelemetry tracing and metrics for the forecast agent."""

from forecast_agent.tracing.decorators import traced
from forecast_agent.tracing.metrics import MetricsCollector, get_metrics_collector
from forecast_agent.tracing.setup import setup_tracing, shutdown_tracing

__all__ = [
    "MetricsCollector",
    "get_metrics_collector",
    "setup_tracing",
    "shutdown_tracing",
    "traced",
]
