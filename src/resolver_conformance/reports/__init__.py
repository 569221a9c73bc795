from resolver_conformance.reports.badge import render_badge, write_badge
from resolver_conformance.reports.console import ConsoleReporter
from resolver_conformance.reports.json_report import build_report, write_report

__all__ = [
    "ConsoleReporter",
    "build_report",
    "render_badge",
    "write_badge",
    "write_report",
]
