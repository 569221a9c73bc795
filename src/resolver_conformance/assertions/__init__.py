"""Built-in assertion kinds and the registry that dispatches them."""

from resolver_conformance.assertions.paths import MISSING, get_nested_value, parse_path
from resolver_conformance.assertions.registry import (
    AssertionKind,
    AssertionRegistry,
    EvaluationFn,
    assertion_kind,
    get_registry,
)
from resolver_conformance.assertions import metadata, runtime, structural
from resolver_conformance.assertions.metadata import FIELD_NAME_PATTERN
from resolver_conformance.assertions.structural import RESOLVER_NAME_PATTERN
from resolver_conformance.assertions.registry import _default_registry


_default_registry.freeze()

__all__ = [
    "FIELD_NAME_PATTERN",
    "MISSING",
    "RESOLVER_NAME_PATTERN",
    "AssertionKind",
    "AssertionRegistry",
    "EvaluationFn",
    "assertion_kind",
    "get_nested_value",
    "get_registry",
    "metadata",
    "parse_path",
    "runtime",
    "structural",
]
