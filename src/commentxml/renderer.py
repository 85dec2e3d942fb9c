"""Render collected sections as XML documentation comment lines."""

from __future__ import annotations

from typing import Iterable

from commentxml.config import COMMENTXML_NEWLINE
from commentxml.sections import Section


def render_sections(
    sections: Iterable[Section], prefix: str, *, newline: str = COMMENTXML_NEWLINE
) -> str:
    """Render sections as ``<tag>`` blocks, each line starting with ``prefix``.

    A section with one line is written on a single line; longer sections wrap
    every line in ``<para>``. Sections without lines are skipped. The result
    has no trailing line terminator and is empty when nothing was rendered.
    """
    parts: list[str] = []
    for section in sections:
        if not section.has_lines:
            continue
        lines = section.get_lines()
        tag = section.kind.tag
        attributes = " " + " ".join(section.attributes) if section.attributes else ""
        parts.append(f"{prefix} <{tag}{attributes}>")
        if len(lines) == 1:
            parts.append(lines[0])
        else:
            parts.append(newline)
            for line in lines:
                parts.append(f"{prefix} <para>{line}</para>{newline}")
            parts.append(f"{prefix} ")
        parts.append(f"</{tag}>{newline}")

    rendered = "".join(parts)
    if rendered.endswith(newline):
        rendered = rendered[: -len(newline)]
    return rendered
