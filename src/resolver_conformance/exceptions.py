"""Exceptions raised by the conformance engine."""

from __future__ import annotations

from pathlib import Path


class ConformanceError(Exception):
    """Base class for conformance engine errors."""


class RegistryError(ConformanceError, ValueError):
    """Raised when the assertion registry is misconfigured."""


class SuiteLoadError(ConformanceError):
    """A suite could not be turned into an evaluable target.

    Covers missing files, malformed JSON, schema violations and parser
    failures. The orchestrator counts the suite as failed and moves on.
    """

    def __init__(self, suite: str, message: str, path: Path | None = None) -> None:
        self.suite = suite
        self.path = path
        self.reason = message
        detail = f"{message}: {path}" if path else message
        super().__init__(f"{suite}: {detail}")


class ResolverLoadError(ConformanceError):
    """The resolver under test could not be imported."""
