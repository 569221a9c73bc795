"""Assertion kind registry.

The registry is the single dispatch point of the engine: a closed table from
kind name to evaluation function. Built-in kinds register themselves at import
time with ``@assertion_kind`` and the default table is frozen afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from resolver_conformance.exceptions import RegistryError
from resolver_conformance.targets import TargetKind


EvaluationFn = Callable[[Any, Any, Mapping[str, Any]], bool]


@dataclass(frozen=True)
class AssertionKind:
    """A registered assertion kind.

    Attributes:
    ----------
    name : str
        Exact, case-sensitive registry key.
    evaluate : EvaluationFn
        ``(subject, assertion, status) -> bool``. Must not mutate the subject
        and must return False, not raise, for ordinary negative outcomes.
    targets : frozenset[TargetKind]
        Target variants the kind can be applied to.
    """

    name: str
    evaluate: EvaluationFn
    targets: frozenset[TargetKind]

    def accepts(self, target_kind: TargetKind) -> bool:
        return target_kind in self.targets


class AssertionRegistry:
    """Closed mapping from assertion kind name to ``AssertionKind``."""

    def __init__(self) -> None:
        self._kinds: dict[str, AssertionKind] = {}
        self._frozen = False

    def register(self, name: str, evaluate: EvaluationFn, targets: set[TargetKind] | frozenset[TargetKind]) -> AssertionKind:
        """Add a kind to the table.

        Raises:
            RegistryError: If the name is taken, no targets are given, or the
                registry is frozen.
        """
        if self._frozen:
            msg = f"Cannot register {name!r}: registry is frozen"
            raise RegistryError(msg)
        if name in self._kinds:
            msg = f"Assertion kind {name!r} is already registered"
            raise RegistryError(msg)
        if not targets:
            msg = f"Assertion kind {name!r} must accept at least one target"
            raise RegistryError(msg)
        kind = AssertionKind(name=name, evaluate=evaluate, targets=frozenset(targets))
        self._kinds[name] = kind
        return kind

    def kind(self, name: str, *targets: TargetKind) -> Callable[[EvaluationFn], EvaluationFn]:
        """Decorator form of ``register``."""

        def decorator(fn: EvaluationFn) -> EvaluationFn:
            self.register(name, fn, set(targets))
            return fn

        return decorator

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, name: str) -> AssertionKind | None:
        return self._kinds.get(name)

    def names(self, target_kind: TargetKind | None = None) -> list[str]:
        """Registered names, optionally limited to one target variant."""
        return [k.name for k in self._kinds.values() if target_kind is None or k.accepts(target_kind)]

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __iter__(self) -> Iterator[AssertionKind]:
        return iter(self._kinds.values())

    def __len__(self) -> int:
        return len(self._kinds)


_default_registry = AssertionRegistry()


def assertion_kind(name: str, *targets: TargetKind) -> Callable[[EvaluationFn], EvaluationFn]:
    """Register a built-in kind in the default registry."""
    return _default_registry.kind(name, *targets)


def get_registry() -> AssertionRegistry:
    """Return the frozen default registry with every built-in kind loaded."""
    # Import here to avoid circular imports at runtime
    import resolver_conformance.assertions  # noqa: F401, PLC0415

    return _default_registry
