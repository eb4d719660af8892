"""OpenTelemetry and logging setup for the food service.

Both the OTel resource and every JSON log line carry the service name, so
traces, metrics and logs from one deployment can be joined. When the catalog
source is known at setup time it is attached to the resource as well, which
makes a deployment that serves the wrong menu file easy to spot.
"""

import logging
import os
from typing import Any

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.http.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from pythonjsonlogger import jsonlogger

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_NAME = "food-svc"
DEFAULT_SERVICE_VERSION = "1.0.0"
DEFAULT_OTLP_ENDPOINT = "http://localhost:4318"
CATALOG_SOURCE_ATTRIBUTE = "food.catalog.source"

METRIC_EXPORT_INTERVAL_MILLIS = 60000


def get_service_name() -> str:
    return os.getenv("OTEL_SERVICE_NAME") or DEFAULT_SERVICE_NAME


def get_otlp_endpoint() -> str:
    """Get the OTLP/HTTP base endpoint without a trailing slash."""
    return (os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT") or DEFAULT_OTLP_ENDPOINT).rstrip("/")


def get_service_resource(catalog_source: str | None = None) -> Resource:
    """Create the OpenTelemetry resource identifying this deployment.

    Args:
        catalog_source: Location the food catalog was loaded from, if known

    Returns:
        Resource with service name, version, environment and catalog source
    """
    attributes = {
        "service.name": get_service_name(),
        "service.version": os.getenv("SERVICE_VERSION") or DEFAULT_SERVICE_VERSION,
        "deployment.environment": os.getenv("ENVIRONMENT", "development"),
    }
    if catalog_source:
        attributes[CATALOG_SOURCE_ATTRIBUTE] = catalog_source

    return Resource.create(attributes)


def setup_tracing(resource: Resource) -> None:
    """Send spans from the loader, the service and FastAPI to the OTLP collector.

    Args:
        resource: Service resource for trace identification
    """
    otlp_endpoint = get_otlp_endpoint()
    exporter = OTLPSpanExporter(endpoint=f"{otlp_endpoint}/v1/traces")

    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    logger.info(f"Food service tracing exporting to {otlp_endpoint}")


def setup_metrics(resource: Resource) -> None:
    """Send the catalog, lookup and search counters to the OTLP collector.

    Args:
        resource: Service resource for metric identification
    """
    otlp_endpoint = get_otlp_endpoint()
    exporter = OTLPMetricExporter(endpoint=f"{otlp_endpoint}/v1/metrics")

    reader = PeriodicExportingMetricReader(
        exporter, export_interval_millis=METRIC_EXPORT_INTERVAL_MILLIS
    )
    provider = MeterProvider(resource=resource, metric_readers=[reader])
    metrics.set_meter_provider(provider)

    logger.info(f"Food service metrics exporting to {otlp_endpoint}")


def setup_observability(
    app: Any = None, enable_exporters: bool = True, catalog_source: str | None = None
) -> None:
    """Initialize OpenTelemetry tracing and metrics, and instrument the app.

    Args:
        app: Optional FastAPI application to instrument
        enable_exporters: Whether to enable OTLP exporters (forced off when ENVIRONMENT=test)
        catalog_source: Catalog location to record on the resource
    """
    if os.getenv("ENVIRONMENT", "development") == "test":
        enable_exporters = False

    resource = get_service_resource(catalog_source)

    if enable_exporters:
        setup_tracing(resource)
        setup_metrics(resource)
    else:
        # Providers without exporters so spans and metrics are still recorded locally
        trace.set_tracer_provider(TracerProvider(resource=resource))
        metrics.set_meter_provider(MeterProvider(resource=resource))

    if app is not None:
        FastAPIInstrumentor.instrument_app(app)
        logger.info("Food API routes instrumented")

    logger.info(f"Observability configured for {resource.attributes['service.name']}")


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structured JSON logging on the root logger.

    Every line carries a ``service`` field with the OTel service name.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    level_str = os.getenv("LOG_LEVEL", log_level).upper()
    level = getattr(logging, level_str, logging.INFO)

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(name)s %(levelname)s %(message)s",
        timestamp=True,
        static_fields={"service": get_service_name()},
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger.info(f"Structured JSON logging configured at {level_str} level")
