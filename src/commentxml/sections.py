"""Sections collected from a comment tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SectionKind(Enum):
    """Semantic heading a section is rendered under."""

    SUMMARY = "summary"
    REMARKS = "remarks"
    PARAM = "param"
    RETURNS = "returns"

    @property
    def tag(self) -> str:
        return self.name.lower()


@dataclass
class Section:
    """Lines gathered under one heading while walking a comment.

    Attributes:
        kind: Heading the lines are rendered under.
        attributes: Pre-formatted tag attributes, e.g. ``name="x"``.
        current_line: Text of the line still being built.
    """

    kind: SectionKind
    attributes: list[str] = field(default_factory=list)
    current_line: str = ""
    _lines: list[str] = field(default_factory=list, repr=False)

    @property
    def has_lines(self) -> bool:
        return bool(self._lines) or bool(self.current_line)

    def append(self, text: str) -> None:
        self.current_line += text

    def new_line(self) -> None:
        """Finish the current line, even if it is empty."""
        self._lines.append(self.current_line)
        self.current_line = ""

    def get_lines(self) -> list[str]:
        """Return the finished lines, closing a non-empty current line first.

        The returned list is the section's own storage; callers may edit it.
        """
        if self.current_line:
            self.new_line()
        return self._lines
