"""Runtime configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


RESOLVER_SUITES: tuple[str, ...] = (
    "R-001-allowlist",
    "R-002-io-contract",
    "R-003-failure-modes",
)

KERNEL_SUITES: tuple[str, ...] = (
    "R-001-allowlist",
    "R-002-io-contract",
    "R-003-failure-modes",
    "R-004-invalid-syntax",
    "R-005-resolver-metadata-contract",
)


class ConformanceSettings(BaseSettings):
    """Settings for a certification run.

    Loads from environment variables automatically:
        OLANG_RESOLVER, OLANG_KERNEL, OLANG_SUITES_DIR, OLANG_TRACE, ...

    Command-line options override these values.
    """

    resolver: str | None = Field(default=None, description="Resolver to certify: module:attr or path/to/file.py")
    kernel: str | None = Field(default=None, description="Importable kernel module used as resolver and parser")
    suites_dir: Path = Field(default_factory=Path.cwd, description="Directory holding one folder per suite")
    suites: list[str] = Field(default_factory=list, description="Suites to run; empty means the mode's defaults")
    trace: bool = Field(default=False, description="Record OpenTelemetry spans")
    trace_output: Path = Field(default=Path("conformance-traces.jsonl"))
    report_path: Path = Field(default=Path("conformance-report.json"))
    badge_dir: Path = Field(default=Path("badges"))

    model_config = SettingsConfigDict(
        env_prefix="OLANG_",
        extra="ignore",
    )

    @property
    def kernel_mode(self) -> bool:
        return self.kernel is not None and self.resolver is None

    def selected_suites(self) -> list[str]:
        """Explicit suites, else the defaults for the current mode."""
        if self.suites:
            return list(self.suites)
        return list(KERNEL_SUITES if self.kernel_mode else RESOLVER_SUITES)
