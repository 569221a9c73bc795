"""Evaluation targets.

A suite evaluates exactly one of three target shapes. Each shape is a tagged
variant so assertion kinds can declare which ones they accept, and the
evaluator can turn a mismatch into a normal failure instead of a crash.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TargetKind(Enum):
    """Discriminator for the target union."""

    WORKFLOW = "workflow"
    METADATA = "metadata"
    RUNTIME = "runtime"


@dataclass
class RuntimeContext:
    """Evidence gathered by invoking a resolver under controlled conditions.

    Attributes:
    ----------
    resolver : Any
        The resolver that was exercised.
    metadata : Any
        The resolver's declared contract (its declaration or the resolver itself).
    input : Any
        The value passed on every invocation.
    is_callable : bool
        Whether the resolver could be invoked at all.
    threw : bool
        Whether an invocation raised.
    error : Exception | None
        The first raised error, if any.
    output : Any
        Output of the last successful invocation.
    outputs : list[Any]
        Every successful output, in invocation order.
    serialized_outputs : list[str]
        Canonical JSON of each output, taken as soon as it was returned.
    invocations : int
        Number of attempted invocations.
    retry_count : int
        Declared retry limit of the matching failure when the error carries a
        declared code, else 0.
    retry_count_inferred : bool
        True when ``retry_count`` comes from the declaration rather than an
        observed count.
    globals_before, globals_after : dict[str, str] | None
        Serialized module-level state of the resolver's module around the
        invocation cycle.
    """

    resolver: Any
    metadata: Any
    input: Any = field(default_factory=dict)
    is_callable: bool = True
    threw: bool = False
    error: Exception | None = None
    output: Any = None
    outputs: list[Any] = field(default_factory=list)
    serialized_outputs: list[str] = field(default_factory=list)
    invocations: int = 0
    retry_count: int = 0
    retry_count_inferred: bool = False
    globals_before: dict[str, str] | None = None
    globals_after: dict[str, str] | None = None

    @property
    def error_code(self) -> Any:
        """The ``code`` carried by the captured error, if any."""
        if self.error is None:
            return None
        return getattr(self.error, "code", None)


@dataclass(frozen=True)
class WorkflowTarget:
    """A parsed workflow AST plus the warnings its parser produced."""

    ast: Any
    warnings: tuple[Any, ...] = ()

    kind = TargetKind.WORKFLOW

    @property
    def subject(self) -> Any:
        return self.ast

    def status(self) -> dict[str, Any]:
        """Auxiliary status object handed to structural assertions."""
        return {"__warnings": list(self.warnings)}


@dataclass(frozen=True)
class MetadataTarget:
    """A resolver metadata contract loaded as-is."""

    contract: Any

    kind = TargetKind.METADATA

    @property
    def subject(self) -> Any:
        return self.contract

    def status(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class RuntimeTarget:
    """Runtime evidence for one invocation cycle."""

    context: RuntimeContext

    kind = TargetKind.RUNTIME

    @property
    def subject(self) -> Any:
        return self.context

    def status(self) -> dict[str, Any]:
        return {}


Target = WorkflowTarget | MetadataTarget | RuntimeTarget
