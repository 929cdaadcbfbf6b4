"""Plain-text building blocks shared by the renderers.

Renderers return lists of lines; nothing here keeps state between calls.
"""

from __future__ import annotations

from collections.abc import Iterable

INDENT_UNIT = "  "


def pad(level: int, base: str = "") -> str:
    """Indentation prefix for *level* steps below *base*."""
    return base + INDENT_UNIT * level


def desc_tag(parts: Iterable[str]) -> str:
    """Render ``{a b c}`` from the non-empty *parts*, or ``""`` if none."""
    words = [p for p in parts if p]
    if not words:
        return ""
    return "{" + " ".join(words) + "}"


def bracket_line(prefix: str, kind: str, name: str, note: str = "") -> str:
    """``[kind Name]`` header line for one hierarchy level."""
    note = f" {note}" if note else ""
    return f"{prefix}[{kind} {name}{note}]"


def join_lines(lines: Iterable[str]) -> str:
    return "\n".join(lines)
