"""Assertions over evidence gathered by the runtime observer."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from resolver_conformance.assertions.metadata import declared_failure, declared_output_names
from resolver_conformance.assertions.paths import MISSING, get_field
from resolver_conformance.assertions.registry import assertion_kind
from resolver_conformance.targets import RuntimeContext, TargetKind


if TYPE_CHECKING:
    from resolver_conformance.testing.models import Assertion


RUNTIME = TargetKind.RUNTIME


def serialize(value: Any) -> str:
    """Canonical JSON used to compare outputs across invocations.

    Values JSON cannot order (mixed key types) fall back to ``repr``.
    """
    try:
        return json.dumps(value, sort_keys=True, default=repr)
    except (TypeError, ValueError):
        return repr(value)


@assertion_kind("resolver_is_callable", RUNTIME)
def check_callable(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    return ctx.is_callable and callable(ctx.resolver)


@assertion_kind("error_code_declared", RUNTIME)
def check_error_code_declared(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """A raised error must carry one of the declared failure codes."""
    if not ctx.threw:
        return True
    return declared_failure(ctx.metadata, ctx.error_code) is not MISSING


@assertion_kind("rejects_missing_required_input", RUNTIME)
def check_rejects_missing_input(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    return ctx.is_callable and ctx.threw


@assertion_kind("retry_count_within_limit", RUNTIME)
def check_retry_count(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """Retries for the raised code stay within its declared limit.

    An error whose code is not declared has no bound to violate. A numeric
    ``expected`` adds a ceiling of its own.
    """
    if not ctx.threw:
        return True
    entry = declared_failure(ctx.metadata, ctx.error_code)
    if entry is MISSING:
        return True
    limit = get_field(entry, "retries")
    if isinstance(limit, bool) or not isinstance(limit, (int, float)):
        return False
    ceiling = assertion.expected
    if isinstance(ceiling, (int, float)) and not isinstance(ceiling, bool) and ctx.retry_count > ceiling:
        return False
    return ctx.retry_count <= limit


@assertion_kind("output_is_object", RUNTIME)
def check_output_shape(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    return not ctx.threw and isinstance(ctx.output, Mapping)


@assertion_kind("output_fields_declared", RUNTIME)
def check_output_fields(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """Every declared output name is a key of the actual output; values are not checked."""
    if ctx.threw or not isinstance(ctx.output, Mapping):
        return False
    return all(name in ctx.output for name in declared_output_names(ctx.metadata))


@assertion_kind("deterministic_output", RUNTIME)
def check_determinism(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """All invocations returned the same value, compared as captured."""
    if ctx.threw or len(ctx.serialized_outputs) < 2:
        return False
    first = ctx.serialized_outputs[0]
    return all(text == first for text in ctx.serialized_outputs[1:])


@assertion_kind("no_global_mutation", RUNTIME)
def check_no_global_mutation(ctx: RuntimeContext, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """Module-level state of the resolver's module is unchanged by invocation."""
    if ctx.globals_before is None or ctx.globals_after is None:
        return True
    return ctx.globals_before == ctx.globals_after
