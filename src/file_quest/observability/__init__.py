"""
observability/__init__.py

PURPOSE: OpenTelemetry tracing for generation and session setup.
DEPENDENCIES: opentelemetry-api (opentelemetry-sdk and the OTLP exporter are optional)

ARCHITECTURE NOTES:
Modules grab a tracer at import time with get_tracer(). Until
init_telemetry() installs an SDK provider, the API's proxy tracer produces
non-recording spans, so tracing costs nothing when disabled.
"""

from file_quest.observability.telemetry import get_tracer, init_telemetry, shutdown_telemetry

__all__ = ["get_tracer", "init_telemetry", "shutdown_telemetry"]
