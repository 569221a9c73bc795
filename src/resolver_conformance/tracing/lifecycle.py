"""OpenTelemetry tracing for certification runs.

Tracing is opt-in. Once ``init_tracing`` has been called, suites and resolver
invocations are recorded as spans and streamed to a JSONL file.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.trace import Span

from resolver_conformance.tracing.exporters import JsonlSpanExporter


_exporter: JsonlSpanExporter | None = None
_initialized = False


def init_tracing(
    *,
    service_name: str = "resolver-conformance",
    output_path: Path | str = "conformance-traces.jsonl",
) -> None:
    """Install a tracer provider that streams spans to ``output_path``.

    Calling it again is a no-op.
    """
    global _exporter, _initialized

    if _initialized:
        return

    _exporter = JsonlSpanExporter(output_path)
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    provider.add_span_processor(SimpleSpanProcessor(_exporter))
    trace.set_tracer_provider(provider)
    _initialized = True


def tracing_enabled() -> bool:
    return _initialized


def get_tracer(name: str = "resolver_conformance") -> trace.Tracer:
    return trace.get_tracer(name)


@contextmanager
def trace_step(name: str, attributes: dict[str, Any] | None = None, *, enabled: bool = True) -> Iterator[Span | None]:
    """Open a span nested under the current one, or nothing when disabled."""
    if not enabled:
        yield None
        return
    with get_tracer().start_as_current_span(name) as span:
        for key, value in (attributes or {}).items():
            span.set_attribute(key, value)
        yield span
