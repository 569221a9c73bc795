from resolver_conformance.tracing.exporters import JsonlSpanExporter, span_to_dict
from resolver_conformance.tracing.lifecycle import (
    get_tracer,
    init_tracing,
    trace_step,
    tracing_enabled,
)

__all__ = [
    "JsonlSpanExporter",
    "get_tracer",
    "init_tracing",
    "span_to_dict",
    "trace_step",
    "tracing_enabled",
]
