"""Certification badge."""

from __future__ import annotations

from pathlib import Path


BADGE_FILENAME = "certified.svg"

_BADGE_TEMPLATE = """<svg xmlns="http://www.w3.org/2000/svg" width="160" height="28">
  <rect rx="4" width="160" height="28" fill="#2d2d2d"/>
  <rect rx="4" x="80" width="80" height="28" fill="{color}"/>
  <text x="40" y="18" fill="#fff" font-size="13" font-family="Arial" text-anchor="middle">{label}</text>
  <text x="120" y="18" fill="#fff" font-size="13" font-family="Arial" text-anchor="middle">{status}</text>
</svg>"""


def render_badge(passed: bool, label: str = "O-lang") -> str:
    if passed:
        return _BADGE_TEMPLATE.format(color="#4cbb17", label=label, status="CERTIFIED")
    return _BADGE_TEMPLATE.format(color="#bb2124", label=label, status="FAILED")


def write_badge(passed: bool, output_dir: Path | str) -> Path:
    """Write ``certified.svg`` into ``output_dir`` and return its path."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / BADGE_FILENAME
    path.write_text(render_badge(passed), encoding="utf-8")
    return path
