"""Assertions over a resolver's declared metadata contract.

A contract looks like::

    {
        "resolverName": "currencyConvert",
        "version": "1.2.0",
        "inputs": [{"name": "amount", "type": "number", "required": true}],
        "outputs": [{"name": "converted", "type": "number"}],
        "failures": [{"code": "RATE_UNAVAILABLE", "retries": 2}]
    }

Shape checks are strict about JSON types: ``"true"`` is not a boolean and
``true`` is not a number.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from resolver_conformance.assertions.paths import MISSING, get_field
from resolver_conformance.assertions.registry import assertion_kind
from resolver_conformance.targets import TargetKind


if TYPE_CHECKING:
    from resolver_conformance.testing.models import Assertion


FIELD_NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")

METADATA = TargetKind.METADATA


def _entries(contract: Any, name: str, *, required: bool = False) -> list[Any] | None:
    """The named array, ``[]`` when absent and optional, None when malformed."""
    value = get_field(contract, name)
    if value is MISSING or value is None:
        return None if required else []
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    return None


def _is_str(value: Any) -> bool:
    return isinstance(value, str)


def _is_retry_limit(value: Any) -> bool:
    """A non-negative whole number; JSON may hand over ``2.0`` for ``2``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value >= 0 and float(value).is_integer()


def is_valid_input(entry: Any) -> bool:
    return (
        bool(entry)
        and _is_str(get_field(entry, "name"))
        and _is_str(get_field(entry, "type"))
        and isinstance(get_field(entry, "required"), bool)
    )


def is_valid_output(entry: Any) -> bool:
    return bool(entry) and _is_str(get_field(entry, "name")) and _is_str(get_field(entry, "type"))


def is_valid_failure(entry: Any) -> bool:
    return bool(entry) and _is_str(get_field(entry, "code")) and _is_retry_limit(get_field(entry, "retries"))


def declared_failure(contract: Any, code: Any) -> Any:
    """The declared failure entry for ``code``, or MISSING."""
    if code is None:
        return MISSING
    for entry in _entries(contract, "failures") or []:
        if get_field(entry, "code") == code:
            return entry
    return MISSING


def declared_output_names(contract: Any) -> list[str]:
    return [
        name
        for name in (get_field(entry, "name") for entry in _entries(contract, "outputs") or [])
        if isinstance(name, str)
    ]


@assertion_kind("resolver_has_field", METADATA)
def check_resolver_has_field(contract: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    if not assertion.field:
        return False
    return get_field(contract, assertion.field) == assertion.expected


@assertion_kind("resolver_inputs_valid", METADATA)
def check_resolver_inputs_valid(contract: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    inputs = _entries(contract, "inputs", required=True)
    return inputs is not None and all(is_valid_input(i) for i in inputs)


@assertion_kind("resolver_outputs_valid", METADATA)
def check_resolver_outputs_valid(contract: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    outputs = _entries(contract, "outputs")
    return outputs is not None and all(is_valid_output(o) for o in outputs)


@assertion_kind("field_names_normalized", METADATA)
def check_field_names_normalized(contract: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    """Every entry of ``contract[assertion.field]`` has a normalized ``name``."""
    items = _entries(contract, assertion.field or "")
    if items is None:
        return False
    for item in items:
        name = get_field(item, "name")
        if not isinstance(name, str) or FIELD_NAME_PATTERN.match(name) is None:
            return False
    return True


@assertion_kind("resolver_failures_valid", METADATA)
def check_resolver_failures_valid(contract: Any, assertion: Assertion, status: Mapping[str, Any]) -> bool:
    failures = _entries(contract, "failures", required=True)
    return failures is not None and all(is_valid_failure(f) for f in failures)
