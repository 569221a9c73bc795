"""JSONL span exporter."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult


logger = logging.getLogger(__name__)


class JsonlSpanExporter(SpanExporter):
    """Appends each finished span to a file as one JSON line."""

    def __init__(self, output_path: Path | str) -> None:
        self.output_path = Path(output_path)
        self.reset(self.output_path)

    def reset(self, output_path: Path | str) -> None:
        """Point at ``output_path`` and truncate it."""
        self.output_path = Path(output_path)
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        self.output_path.write_text("")

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        try:
            with self.output_path.open("a", encoding="utf-8") as f:
                for span in spans:
                    f.write(json.dumps(span_to_dict(span), default=str) + "\n")
        except OSError:
            logger.exception("Failed to export %d span(s) to %s", len(spans), self.output_path)
            return SpanExportResult.FAILURE
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        """Nothing to release; the file is reopened per batch."""


def span_to_dict(span: ReadableSpan) -> dict[str, Any]:
    return {
        "traceId": format(span.context.trace_id, "032x"),
        "spanId": format(span.context.span_id, "016x"),
        "parentSpanId": format(span.parent.span_id, "016x") if span.parent else None,
        "name": span.name,
        "startTimeUnixNano": span.start_time,
        "endTimeUnixNano": span.end_time,
        "attributes": dict(span.attributes or {}),
        "status": span.status.status_code.name if span.status else "UNSET",
        "events": [{"name": e.name, "attributes": dict(e.attributes or {})} for e in span.events or ()],
    }
