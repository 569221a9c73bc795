"""Machine-readable certification report."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from resolver_conformance.testing.models import RunResult


def build_report(result: RunResult, suites: list[str] | None = None) -> dict[str, Any]:
    """Summarize a run as ``{passed, failedTests, suites, results}``."""
    return {
        "passed": result.certified,
        "failedTests": result.failed,
        "suites": suites if suites is not None else result.suites,
        "results": [e.to_dict() for e in result.executions],
    }


def write_report(report: dict[str, Any], path: Path | str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return path
