"""Shared fixtures for conformance engine tests."""

import json
from pathlib import Path

import pytest


@pytest.fixture
def write_suite(tmp_path: Path):
    """Write a suite directory: ``write_suite(name, spec, files={...})``."""

    def _write(name: str, spec: dict | str, files: dict[str, object] | None = None) -> Path:
        suite_dir = tmp_path / name
        suite_dir.mkdir(parents=True)
        text = spec if isinstance(spec, str) else json.dumps(spec)
        (suite_dir / "test.json").write_text(text)
        for filename, content in (files or {}).items():
            body = content if isinstance(content, str) else json.dumps(content)
            (suite_dir / filename).write_text(body)
        return suite_dir

    return _write
