"""Transcode parsed doc comments into XML documentation comments."""

from __future__ import annotations

from typing import Any, Mapping

from commentxml.loader import load_comment
from commentxml.prologue import CommentKind, get_multi_line_comment_prologue
from commentxml.renderer import render_sections
from commentxml.sanitizer import trim_blank_lines
from commentxml.schemas import Comment
from commentxml.sections import Section, SectionKind
from commentxml.utils.logging_config import get_logger
from commentxml.walker import collect_sections

logger = get_logger(__name__)


def transcode(
    comment: Comment | str | bytes | Mapping[str, Any], kind: CommentKind | str
) -> str:
    """Render a comment tree as summary, remarks, param and returns tags.

    The first paragraph of the comment becomes the summary and later
    paragraphs the remarks. Every output line starts with the prologue for
    ``kind``.

    Args:
        comment: Root of the comment tree, or its JSON / mapping form.
        kind: Comment style of the generated file.

    Returns:
        The comment block without a trailing line terminator, or an empty
        string when the comment has no renderable content.

    Raises:
        CommentParseError: If ``comment`` is given as data that does not
            describe a comment tree.
        UnknownCommentKindError: If ``kind`` is not a known comment style.
    """
    if isinstance(comment, (str, bytes, Mapping)):
        comment = load_comment(comment)

    sections = [Section(SectionKind.SUMMARY)]
    collect_sections(comment, sections)
    for section in sections:
        trim_blank_lines(section.get_lines())

    prefix = get_multi_line_comment_prologue(kind)
    rendered = render_sections(sections, prefix)
    logger.debug(
        "Transcoded %s comment into %d section(s)",
        comment.kind,
        sum(1 for section in sections if section.has_lines),
    )
    return rendered
