"""OpenTelemetry tracing for the API.

Off by default (TELEMETRY_ENABLED=false). When enabled, spans are exported to
the console or to an OTLP gRPC collector and both FastAPI and the SQLAlchemy
engine are instrumented.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


class TelemetryConfig:
    """Tracer provider plus the instrumentations the API uses."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    def _build_exporter(
        self, exporter_type: str, otlp_endpoint: str | None
    ) -> SpanExporter | None:
        if exporter_type == "otlp" and otlp_endpoint:
            logger.info("Using OTLP span exporter: %s", otlp_endpoint)
            return OTLPSpanExporter(
                endpoint=otlp_endpoint,
                insecure=otlp_endpoint.startswith("http://"),
            )
        if exporter_type == "none":
            return None
        if exporter_type != "console":
            logger.warning("Unknown exporter type '%s', using console", exporter_type)
        return ConsoleSpanExporter()

    def setup(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider:
        """Create the tracer provider and register it globally.

        Args:
            exporter_type: "console", "otlp" or "none".
            otlp_endpoint: OTLP gRPC endpoint (e.g. http://localhost:4317).
            sample_rate: Sampling ratio between 0.0 and 1.0.
        """
        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        provider = TracerProvider(
            resource=resource, sampler=TraceIdRatioBased(sample_rate)
        )
        exporter = self._build_exporter(exporter_type, otlp_endpoint)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        self.tracer_provider = provider
        logger.info(
            "OpenTelemetry initialized: service=%s exporter=%s",
            self.service_name,
            exporter_type,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        if self.tracer_provider is None:
            return
        FastAPIInstrumentor.instrument_app(
            app,
            tracer_provider=self.tracer_provider,
            excluded_urls="/api/v1/health",
        )

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        if self.tracer_provider is None:
            return
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine,
            tracer_provider=self.tracer_provider,
        )

    def shutdown(self) -> None:
        """Flush remaining spans."""
        if self.tracer_provider is not None:
            self.tracer_provider.shutdown()
            self.tracer_provider = None
