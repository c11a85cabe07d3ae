"""
OpenTelemetry Distributed Tracing

Configures OpenTelemetry for tracing the storefront's request and
service-layer spans. Spans are created through the OpenTelemetry API at all
times; they are only recorded once ``setup_tracing`` installs an SDK provider.
"""

import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.instrumentation.django import DjangoInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

logger = logging.getLogger(__name__)

_tracer: Optional[trace.Tracer] = None
_initialized = False


def setup_tracing(
    service_name: str = "storefront-backend",
    console_export: bool = False,
    enable: bool = True,
) -> None:
    """
    Initialize OpenTelemetry tracing.

    Args:
        service_name: Name of the service for tracing
        console_export: Print finished spans to stdout (local debugging)
        enable: Enable/disable tracing

    Example:
        setup_tracing(service_name="storefront-backend", console_export=True)
    """
    global _initialized

    if _initialized:
        logger.warning("Tracing already initialized. Skipping.")
        return

    if not enable:
        logger.info("Tracing disabled via configuration")
        return

    resource = Resource(attributes={SERVICE_NAME: service_name})
    tracer_provider = TracerProvider(resource=resource)

    if console_export:
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        logger.info("Console span exporter configured")

    trace.set_tracer_provider(tracer_provider)

    # Auto-instrument Django (traces all HTTP requests)
    DjangoInstrumentor().instrument()
    logger.info("Django auto-instrumentation enabled")

    _initialized = True
    logger.info(f"OpenTelemetry tracing initialized for service: {service_name}")


def get_tracer(name: str = __name__) -> trace.Tracer:
    """
    Get tracer instance for creating custom spans.

    Args:
        name: Tracer name (usually __name__ of module)

    Returns:
        Tracer instance

    Example:
        tracer = get_tracer(__name__)

        with tracer.start_as_current_span("my_operation"):
            # Your code here
            pass
    """
    global _tracer

    if _tracer is None:
        _tracer = trace.get_tracer(name)

    return _tracer


def add_span_attributes(span: trace.Span, **attributes) -> None:
    """
    Add custom attributes to current span.

    Args:
        span: Span to add attributes to
        **attributes: Key-value pairs to add

    Example:
        with tracer.start_as_current_span("create_product") as span:
            add_span_attributes(span, store_id="123", variant_count=2)
    """
    for key, value in attributes.items():
        span.set_attribute(key, str(value))


tracer = get_tracer("storefront")
