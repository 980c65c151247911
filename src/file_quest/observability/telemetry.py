"""
telemetry.py

PURPOSE: OpenTelemetry initialization and tracer management.
DEPENDENCIES: opentelemetry-api; opentelemetry-sdk, opentelemetry-exporter-otlp (optional)

ARCHITECTURE NOTES:
The API package is a hard dependency and already degrades to non-recording
spans when no provider is installed. The SDK is only needed to actually
export spans; if it is missing, init_telemetry() logs a warning and leaves
the API's default provider in place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace

if TYPE_CHECKING:
    from file_quest.config import OpenTelemetrySettings

logger = logging.getLogger(__name__)

# Global state for the tracer provider
_initialized = False
_tracer_provider: object | None = None


def init_telemetry(settings: OpenTelemetrySettings) -> None:
    """
    Initialize OpenTelemetry tracing.

    Safe to call when the SDK is not installed. Should be called once at
    application startup; later calls are ignored.

    Args:
        settings: OpenTelemetry configuration settings.
    """
    global _initialized, _tracer_provider

    if _initialized:
        logger.debug("Telemetry already initialized")
        return

    if not settings.enabled:
        logger.debug("Telemetry disabled")
        _initialized = True
        return

    try:
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
    except ImportError:
        logger.warning(
            "OpenTelemetry SDK not installed. Install with: pip install file-quest[observability]"
        )
        _initialized = True
        return

    resource = Resource.create({"service.name": settings.service_name})
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    if settings.endpoint:
        try:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

            provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=settings.endpoint)))
            logger.info(f"OTLP exporter configured: {settings.endpoint}")
        except ImportError:
            logger.warning("OTLP exporter not available, using console only")

    trace.set_tracer_provider(provider)
    _tracer_provider = provider
    _initialized = True

    logger.info(f"Telemetry initialized: service={settings.service_name}")


def get_tracer(name: str) -> trace.Tracer:
    """
    Get a tracer for the given module name.

    The returned tracer follows whichever provider is installed when spans
    are started, so it can be created at import time.

    Args:
        name: Module name (typically __name__).
    """
    return trace.get_tracer(name)


def shutdown_telemetry() -> None:
    """
    Flush and shut down the tracer provider.

    Safe to call even if telemetry was never initialized.
    """
    global _initialized, _tracer_provider

    shutdown = getattr(_tracer_provider, "shutdown", None)
    if callable(shutdown):
        shutdown()
        logger.debug("Telemetry shutdown complete")

    _tracer_provider = None
    _initialized = False
