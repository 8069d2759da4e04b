"""OpenTelemetry tracing helpers for genbridge.

Only the OpenTelemetry API is a hard dependency. Without a configured SDK the
tracer returned by :func:`get_tracer` hands out no-op spans, so the streaming
and embedding paths can always open spans unconditionally::

    _tracer = get_tracer(__name__)

    with _tracer.start_as_current_span("chat.stream") as span:
        span.set_attribute(ATTR_MODEL, model)

Real export is opted into once at startup through :func:`configure_telemetry`
(``pip install genbridge[otel]``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from opentelemetry import trace

if TYPE_CHECKING:
    from genbridge.settings.models import TelemetrySettings

# ---------------------------------------------------------------------------
# Span attribute keys
# ---------------------------------------------------------------------------

ATTR_MODEL = "genbridge.model"
ATTR_TOOL_COUNT = "genbridge.tools.count"
ATTR_TOOL_NAME = "genbridge.tool.name"
ATTR_TOKEN_COUNT = "genbridge.stream.tokens"
ATTR_EVENT_COUNT = "genbridge.stream.events"
ATTR_TERMINAL_TYPE = "genbridge.stream.terminal"
ATTR_FINISH_REASON = "genbridge.finish_reason"
ATTR_BATCH_SIZE = "genbridge.embedding.batch_size"
ATTR_EMBEDDING_DIMENSION = "genbridge.embedding.dimension"
ATTR_MEMORY_ID = "genbridge.agent.memory_id"
ATTR_ITERATION = "genbridge.agent.iteration"

_INSTRUMENTATION_NAME = "genbridge"


def get_tracer(name: str | None = None) -> trace.Tracer:
    """Return a tracer for *name* (no-op until an SDK provider is installed)."""
    return trace.get_tracer(name or _INSTRUMENTATION_NAME)


def configure_telemetry(
    *,
    service_name: str = "genbridge",
    export_to_console: bool = True,
    otlp_endpoint: str | None = None,
) -> None:
    """Install an SDK tracer provider with console and/or OTLP export.

    Raises:
        ImportError: If ``opentelemetry-sdk`` (or, when *otlp_endpoint* is
            given, ``opentelemetry-exporter-otlp``) is not installed.
    """
    try:
        from opentelemetry.sdk.resources import Resource  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace import TracerProvider  # pyright: ignore[reportMissingImports]
        from opentelemetry.sdk.trace.export import (  # pyright: ignore[reportMissingImports]
            BatchSpanProcessor,
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )
    except ImportError as exc:
        msg = (
            "opentelemetry-sdk is required for configure_telemetry(). "
            "Install it with: pip install genbridge[otel]"
        )
        raise ImportError(msg) from exc

    provider: Any = TracerProvider(resource=Resource.create({"service.name": service_name}))

    if export_to_console:
        provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))

    if otlp_endpoint:
        provider.add_span_processor(BatchSpanProcessor(_otlp_exporter(otlp_endpoint)))

    trace.set_tracer_provider(provider)


def configure_from_settings(settings: TelemetrySettings) -> bool:
    """Apply :class:`TelemetrySettings`; return ``True`` if tracing was enabled."""
    if not settings.enabled:
        return False
    configure_telemetry(
        export_to_console=settings.otlp_endpoint is None,
        otlp_endpoint=settings.otlp_endpoint,
    )
    return True


def _otlp_exporter(endpoint: str) -> Any:
    try:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (  # pyright: ignore[reportMissingImports]
            OTLPSpanExporter,
        )
    except ImportError as exc:
        msg = (
            "opentelemetry-exporter-otlp is required for OTLP export. "
            "Install it with: pip install genbridge[otel]"
        )
        raise ImportError(msg) from exc
    return OTLPSpanExporter(endpoint=endpoint)
