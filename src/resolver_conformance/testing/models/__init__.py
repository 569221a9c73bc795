from .result import Failure, RunResult, SuiteExecution, SuiteResult, SuiteStatus
from .spec import DETERMINISM_TEST_ID, RUNTIME_CATEGORY, Assertion, Fixture, FixtureSet, TestSpec


__all__ = [
    "DETERMINISM_TEST_ID",
    "RUNTIME_CATEGORY",
    "Assertion",
    "Failure",
    "Fixture",
    "FixtureSet",
    "RunResult",
    "SuiteExecution",
    "SuiteResult",
    "SuiteStatus",
    "TestSpec",
]
