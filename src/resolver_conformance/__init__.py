"""Resolver conformance - certification engine for workflow resolvers."""

from .assertions import AssertionRegistry, assertion_kind, get_registry
from .config import ConformanceSettings
from .targets import MetadataTarget, RuntimeContext, RuntimeTarget, TargetKind, WorkflowTarget
from .testing import (
    Assertion,
    AssertionEvaluator,
    Failure,
    RunResult,
    RuntimeObserver,
    SuiteOrchestrator,
    SuiteResult,
    TestSpec,
    run_suites,
)
from .version import __version__


__all__ = [
    # Engine
    "AssertionEvaluator",
    "RuntimeObserver",
    "SuiteOrchestrator",
    "run_suites",
    # Registry
    "AssertionRegistry",
    "assertion_kind",
    "get_registry",
    # Models
    "Assertion",
    "Failure",
    "RunResult",
    "SuiteResult",
    "TestSpec",
    # Targets
    "MetadataTarget",
    "RuntimeContext",
    "RuntimeTarget",
    "TargetKind",
    "WorkflowTarget",
    # Config
    "ConformanceSettings",
    "__version__",
]
