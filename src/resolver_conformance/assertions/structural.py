"""Assertions over a parsed workflow AST and its parse status."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from resolver_conformance.assertions.paths import MISSING, get_field, get_nested_value
from resolver_conformance.assertions.registry import assertion_kind
from resolver_conformance.targets import TargetKind


if TYPE_CHECKING:
    from resolver_conformance.testing.models import Assertion


# Workflow identifiers are plain alphanumerics. Metadata field names also
# allow underscores; see metadata.FIELD_NAME_PATTERN.
RESOLVER_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")

WORKFLOW = TargetKind.WORKFLOW


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _list_field(ast: Any, name: str) -> Any:
    value = get_field(ast, name)
    return [] if value is MISSING or value is None else value


def _same_members(actual: Any, expected: Any) -> bool:
    """Equal size and every expected element present in ``actual``."""
    if not _is_list(actual) or not _is_list(expected):
        return False
    return len(actual) == len(expected) and all(item in actual for item in expected)


def _step(ast: Any, assertion: Assertion) -> Any:
    steps = _list_field(ast, "steps")
    if not _is_list(steps) or assertion.step_index is None:
        return MISSING
    return get_field(steps, assertion.step_index)


def _warnings(status: Mapping[str, Any]) -> list[Any]:
    warnings = get_field(status, "__warnings")
    return list(warnings) if _is_list(warnings) else []


@assertion_kind("allowed_resolvers_listed", WORKFLOW)
def check_allowlist(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    return _same_members(_list_field(ast, "allowedResolvers"), assertion.expected)


@assertion_kind("resolver_names_normalized", WORKFLOW)
def check_resolver_name_normalization(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    allowed = _list_field(ast, "allowedResolvers")
    return _is_list(allowed) and all(
        isinstance(name, str) and RESOLVER_NAME_PATTERN.match(name) is not None for name in allowed
    )


@assertion_kind("workflow_name_present", WORKFLOW)
def check_workflow_name(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    return get_field(ast, "name") == assertion.expected


def check_return_values(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    return _same_members(_list_field(ast, "returnValues"), assertion.expected)


assertion_kind("workflow_return_values", WORKFLOW)(check_return_values)
assertion_kind("workflow_return_values_empty", WORKFLOW)(check_return_values)


@assertion_kind("no_parse_warnings", WORKFLOW)
def check_no_warnings(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    expected = 0 if assertion.expected is None else assertion.expected
    return len(_warnings(status)) == expected


@assertion_kind("step_type", WORKFLOW)
def check_step_type(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    step = _step(ast, assertion)
    return step is not MISSING and get_field(step, "type") == assertion.expected


@assertion_kind("step_saveas", WORKFLOW)
def check_step_save_as(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    step = _step(ast, assertion)
    return step is not MISSING and get_field(step, "saveAs") == assertion.expected


@assertion_kind("step_failure_policies", WORKFLOW)
def check_step_failure_policies(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """Every expected error code must map to a policy with the same action and count."""
    step = _step(ast, assertion)
    policies = get_field(step, "failurePolicies")
    expected = assertion.expected
    if not policies or not isinstance(expected, Mapping):
        return False

    for code, want in expected.items():
        policy = get_field(policies, code)
        if not policy:
            return False
        if get_field(policy, "action") != get_field(want, "action"):
            return False
        if get_field(policy, "count") != get_field(want, "count"):
            return False
    return True


@assertion_kind("contains_warning", WORKFLOW)
def check_contains_warning(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    if not isinstance(assertion.expected_substring, str):
        return False
    needle = assertion.expected_substring.lower()
    for warning in _warnings(status):
        text = warning if isinstance(warning, str) else get_field(warning, "message")
        if isinstance(text, str) and needle in text.lower():
            return True
    return False


@assertion_kind("status_greater_than", WORKFLOW)
def check_status_greater_than(ast: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """The number at ``path`` in the parse status exceeds ``expected``.

    A path that does not parse is a failed check, like one that resolves to
    nothing.
    """
    try:
        value = get_nested_value(status, assertion.path)
    except ValueError:
        return False
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    if isinstance(assertion.expected, bool) or not isinstance(assertion.expected, (int, float)):
        return False
    return value > assertion.expected
