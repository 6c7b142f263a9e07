"""
Main entry point for the WordWise analysis service.
"""

import logging
import sys

# Set up OpenTelemetry before configuring logging
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.instrumentation.logging import LoggingInstrumentor

from wordwise.config import settings

logger = logging.getLogger(__name__)


def configure_telemetry():
    """Install the tracer provider; spans are exported only when an OTLP endpoint is set."""
    trace.set_tracer_provider(TracerProvider())

    if settings.otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint, insecure=True)
        trace.get_tracer_provider().add_span_processor(BatchSpanProcessor(otlp_exporter))

    LoggingInstrumentor().instrument()


def configure_logging():
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def run():
    """Start the API server."""
    import uvicorn

    configure_telemetry()
    configure_logging()

    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"📡 Server: {settings.host}:{settings.port}")
    logger.info(f"🔗 Environment: {'DEBUG' if settings.debug else 'PRODUCTION'}")

    uvicorn.run(
        "wordwise.api.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug"
    )


if __name__ == "__main__":
    run()
