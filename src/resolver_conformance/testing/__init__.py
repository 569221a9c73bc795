"""Evaluation, observation and orchestration of conformance suites."""

from .evaluator import AssertionEvaluator
from .loader import TEST_SPEC_FILENAME, WorkflowParser, load_contract, load_test_spec, load_workflow
from .models import (
    Assertion,
    Failure,
    Fixture,
    FixtureSet,
    RunResult,
    SuiteExecution,
    SuiteResult,
    SuiteStatus,
    TestSpec,
)
from .observer import RuntimeObserver, declared_metadata
from .orchestrator import Reporter, SuiteOrchestrator, run_suites


__all__ = [
    "TEST_SPEC_FILENAME",
    "Assertion",
    "AssertionEvaluator",
    "Failure",
    "Fixture",
    "FixtureSet",
    "Reporter",
    "RunResult",
    "RuntimeObserver",
    "SuiteExecution",
    "SuiteOrchestrator",
    "SuiteResult",
    "SuiteStatus",
    "TestSpec",
    "WorkflowParser",
    "declared_metadata",
    "load_contract",
    "load_test_spec",
    "load_workflow",
    "run_suites",
]
