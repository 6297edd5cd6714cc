import structlog
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)

from core.dependencies import get_settings
from core.settings import Settings

log = structlog.get_logger(__name__)

# Instrumentation scope for spans around vendor SDK calls
TRACER_NAME = "payments"


def build_span_exporter(settings: Settings) -> SpanExporter:
    """OTLP exporter, or the console exporter when tracing export is off."""
    if settings.DISABLE_TRACING:
        return ConsoleSpanExporter()
    try:
        return OTLPSpanExporter(endpoint=settings.OTEL_EXPORTER_OTLP_ENDPOINT)
    except Exception as exc:  # pragma: no cover – only hit when collector absent
        log.warning("OTLP exporter unavailable, tracing disabled", error=str(exc))
        return ConsoleSpanExporter()


def init_tracer(settings: Settings | None = None) -> TracerProvider:
    """
    Install a global tracer provider named after OTEL_SERVICE_NAME.

    Only needed when the host application has no tracer provider of its own;
    until then spans from get_tracer() are no-ops.
    """
    settings = settings or get_settings()
    provider = TracerProvider(
        resource=Resource.create({"service.name": settings.OTEL_SERVICE_NAME})
    )
    provider.add_span_processor(BatchSpanProcessor(build_span_exporter(settings)))
    trace.set_tracer_provider(provider)
    return provider


def get_tracer():
    return trace.get_tracer(TRACER_NAME)
