"""Tests for the section accumulator."""

from __future__ import annotations

from commentxml.sections import Section, SectionKind


class TestSection:
    """Tests for Section."""

    def test_new_section_has_no_lines(self) -> None:
        section = Section(SectionKind.SUMMARY)
        assert not section.has_lines
        assert section.get_lines() == []

    def test_open_line_counts_as_content(self) -> None:
        section = Section(SectionKind.REMARKS)
        section.append("text")
        assert section.has_lines

    def test_get_lines_closes_open_line(self) -> None:
        section = Section(SectionKind.REMARKS)
        section.append("first ")
        section.append("line")
        assert section.get_lines() == ["first line"]
        assert section.current_line == ""

    def test_get_lines_is_idempotent(self) -> None:
        section = Section(SectionKind.REMARKS)
        section.append("only")
        section.get_lines()
        assert section.get_lines() == ["only"]

    def test_new_line_keeps_empty_lines(self) -> None:
        """Explicit line breaks are kept even when nothing was written."""
        section = Section(SectionKind.REMARKS)
        section.new_line()
        section.append("text")
        section.new_line()
        assert section.get_lines() == ["", "text"]

    def test_tag_is_lowercase_kind_name(self) -> None:
        assert [kind.tag for kind in SectionKind] == ["summary", "remarks", "param", "returns"]
