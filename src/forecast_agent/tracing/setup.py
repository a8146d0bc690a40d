"""Install and tear down the OpenTelemetry tracer and meter providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from opentelemetry import metrics, trace
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import MetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter

from forecast_agent.logging import get_logger

if TYPE_CHECKING:
    from forecast_agent.config import Settings

logger = get_logger(__name__)

ExporterType = Literal["otlp", "console"]

SERVICE_VERSION = "0.1.0"
METRIC_EXPORT_INTERVAL_MS = 60_000

_tracer_provider: TracerProvider | None = None
_meter_provider: MeterProvider | None = None


def _otlp_exporters(endpoint: str) -> tuple[SpanExporter, list[MetricReader]]:
    # grpc is only needed when exporting to a collector
    from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader

    reader = PeriodicExportingMetricReader(
        OTLPMetricExporter(endpoint=endpoint, insecure=True),
        export_interval_millis=METRIC_EXPORT_INTERVAL_MS,
    )
    return OTLPSpanExporter(endpoint=endpoint, insecure=True), [reader]


def setup_tracing(settings: Settings, exporter_type: ExporterType = "otlp") -> None:
    """Install global tracer and meter providers.

    Does nothing unless ``settings.otel_enabled`` is set. The console
    exporter prints spans and keeps metrics in-process; ``otlp`` ships both
    to ``settings.otel_exporter_otlp_endpoint``.
    """
    global _tracer_provider, _meter_provider

    if not settings.otel_enabled:
        logger.info("OpenTelemetry disabled")
        return

    if exporter_type == "otlp":
        span_exporter, readers = _otlp_exporters(settings.otel_exporter_otlp_endpoint)
    else:
        span_exporter, readers = ConsoleSpanExporter(), []

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.version": SERVICE_VERSION,
            "deployment.environment": settings.env,
        }
    )

    _tracer_provider = TracerProvider(resource=resource)
    _tracer_provider.add_span_processor(BatchSpanProcessor(span_exporter))
    trace.set_tracer_provider(_tracer_provider)

    _meter_provider = MeterProvider(resource=resource, metric_readers=readers)
    metrics.set_meter_provider(_meter_provider)

    logger.info(
        "OpenTelemetry enabled",
        service_name=settings.otel_service_name,
        exporter=exporter_type,
    )


def shutdown_tracing() -> None:
    """Flush and drop the providers installed by ``setup_tracing``."""
    global _tracer_provider, _meter_provider

    for provider in (_tracer_provider, _meter_provider):
        if provider is not None:
            provider.shutdown()
    _tracer_provider = _meter_provider = None
    logger.debug("OpenTelemetry shut down")
