"""
OpenTelemetry tracing for the HTTP layer and the backing store.

Spans are always created (use cases open their own via trace.get_tracer); they are only
exported when OTEL_EXPORTER_OTLP_ENDPOINT or OTEL_CONSOLE_EXPORT=true is set.
"""

import os
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter, SpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_ON


UNTRACED_URLS = 'health,metrics,static'


class TracingConfig:
    def __init__(
        self,
        *,
        service_name: str,
        otlp_endpoint: str | None = None,
        enable_console: bool | None = None,
    ) -> None:
        self.service_name = service_name
        self.otlp_endpoint = otlp_endpoint or os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT')
        if enable_console is None:
            enable_console = os.getenv('OTEL_CONSOLE_EXPORT', 'false').lower() == 'true'
        self.enable_console = enable_console

        self._provider: TracerProvider | None = None

    def _exporters(self) -> list[SpanExporter]:
        exporters: list[SpanExporter] = []
        if self.otlp_endpoint:
            exporters.append(OTLPSpanExporter(endpoint=self.otlp_endpoint))
        if self.enable_console:
            exporters.append(ConsoleSpanExporter())
        return exporters

    def setup(self) -> None:
        """Install the global tracer provider; call once per process."""
        # Keep every span; volume is cut by tail sampling in the collector
        self._provider = TracerProvider(
            resource=Resource(attributes={SERVICE_NAME: self.service_name}), sampler=ALWAYS_ON
        )
        for exporter in self._exporters():
            self._provider.add_span_processor(BatchSpanProcessor(exporter))

        trace.set_tracer_provider(self._provider)

    def instrument_fastapi(self, *, app: Any) -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)

    def instrument_sqlalchemy(self, *, engine: Any) -> None:
        """Accepts an AsyncEngine (its sync_engine carries the events) or a sync Engine."""
        SQLAlchemyInstrumentor().instrument(engine=getattr(engine, 'sync_engine', engine))

    def shutdown(self) -> None:
        if self._provider:
            self._provider.shutdown()
