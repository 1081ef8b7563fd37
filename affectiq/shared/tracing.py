# ===============================
# 📁 affectiq/shared/tracing.py
# ===============================
import logging
import os
from typing import Optional

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

logger = logging.getLogger(__name__)

OTLP_ENDPOINT_ENV = "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT"


def get_tracer(name: str) -> trace.Tracer:
    """Tracer for `name`. A no-op tracer until setup_tracing installs a provider."""
    return trace.get_tracer(name)


def setup_tracing(service_name: str = "affectiq", endpoint: Optional[str] = None) -> Optional[TracerProvider]:
    """
    Installs a global TracerProvider exporting spans over OTLP/gRPC.

    Returns None without touching global state when no endpoint is configured.
    """
    endpoint = endpoint or os.getenv(OTLP_ENDPOINT_ENV)
    if not endpoint:
        logger.debug("No OTLP endpoint configured; tracing disabled.")
        return None

    from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

    logger.info(f"Setting up tracing for service: {service_name}")
    resource = Resource.create({
        "service.name": service_name,
        "environment": os.getenv("ENV", "development"),
    })
    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
    trace.set_tracer_provider(tracer_provider)
    logger.info("OpenTelemetry tracing setup complete.")
    return tracer_provider
