"""Text clean-up applied while collecting and before rendering sections."""

from __future__ import annotations

import html
import re

from commentxml.config import COMMENTXML_TAG_PATTERN

TAG_PATTERN = re.compile(COMMENTXML_TAG_PATTERN)


def html_encode(text: str) -> str:
    """Escape characters that are significant in XML doc markup."""
    return html.escape(text, quote=True).replace("&#x27;", "&#39;")


def sanitize_text(
    text: str, *, trim: bool = False, tag_pattern: re.Pattern[str] = TAG_PATTERN
) -> str:
    """Prepare the raw text of a text node for a section line.

    Parser pseudo-tokens matching ``tag_pattern`` are dropped entirely. A single
    leading space is removed from re-wrapped text, but deeper indentation is
    kept as written.

    Args:
        text: Raw text of the node.
        trim: Strip surrounding whitespace first (param and returns sections).
        tag_pattern: Pattern for pseudo-tokens that must never reach the output.

    Returns:
        The encoded text, possibly empty.
    """
    if tag_pattern.fullmatch(text):
        return ""
    if trim:
        text = text.strip()
    if len(text) > 1 and text[0] == " " and text[1] != " ":
        text = text[1:]
    return html_encode(text)


def _is_blank(line: str) -> bool:
    return not line.strip()


def trim_blank_lines(lines: list[str]) -> None:
    """Remove blank lines from both ends of ``lines`` in place."""
    start = 0
    while start < len(lines) and _is_blank(lines[start]):
        start += 1
    del lines[:start]

    end = len(lines)
    while end > 0 and _is_blank(lines[end - 1]):
        end -= 1
    del lines[end:]
