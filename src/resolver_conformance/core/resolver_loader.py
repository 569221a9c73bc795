"""Import the resolver under test."""

from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Any

from resolver_conformance.exceptions import ResolverLoadError


DEFAULT_ATTRIBUTE = "resolver"


def _load_module_from_path(path: Path) -> ModuleType:
    """Dynamically load a Python module from path."""
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load module from {path}"
        raise ResolverLoadError(msg)

    module = importlib.util.module_from_spec(spec)
    sys.modules[path.stem] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        sys.modules.pop(path.stem, None)
        msg = f"Failed to load resolver from {path}: {e}"
        raise ResolverLoadError(msg) from e
    return module


def _split(reference: str) -> tuple[str, str | None]:
    # Windows drive letters contain a colon too.
    head, sep, tail = reference.rpartition(":")
    if not sep or not head or "/" in tail or "\\" in tail:
        return reference, None
    return head, tail


def load_resolver(reference: str, *, base_dir: Path | None = None) -> Any:
    """Resolve ``reference`` to the object under test.

    Accepted forms::

        package.module             module attribute ``resolver``, else the module
        package.module:attr        named attribute
        ./path/to/file.py[:attr]   same, loaded from a file

    Relative paths are taken from ``base_dir`` (default: cwd).

    Raises:
        ResolverLoadError: If the module or attribute cannot be found.
    """
    target, attribute = _split(reference)
    if target.endswith(".py") or "/" in target or "\\" in target:
        path = Path(target)
        if not path.is_absolute():
            path = (base_dir or Path.cwd()) / path
        if not path.is_file():
            msg = f"Resolver path does not exist: {path}"
            raise ResolverLoadError(msg)
        module = _load_module_from_path(path)
    else:
        try:
            module = importlib.import_module(target)
        except ImportError as e:
            msg = f"Failed to import resolver module {target!r}: {e}"
            raise ResolverLoadError(msg) from e

    if attribute is not None:
        if not hasattr(module, attribute):
            msg = f"Module {module.__name__!r} has no attribute {attribute!r}"
            raise ResolverLoadError(msg)
        return getattr(module, attribute)
    return getattr(module, DEFAULT_ATTRIBUTE, module)
