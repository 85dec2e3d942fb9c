"""Walk a comment tree and collect its content into sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, assert_never

from commentxml.sanitizer import sanitize_text
from commentxml.schemas import (
    BlockCommandComment,
    CommandName,
    Comment,
    FullComment,
    HTMLEndTagComment,
    HTMLStartTagComment,
    HTMLTagComment,
    InlineCommandComment,
    InlineContent,
    InlineContentComment,
    ParagraphComment,
    ParamCommandComment,
    TextComment,
    TParamCommandComment,
    VerbatimBlockComment,
    VerbatimBlockLineComment,
    VerbatimLineComment,
)
from commentxml.sections import Section, SectionKind
from commentxml.utils.logging_config import get_logger

logger = get_logger(__name__)

_RETURN_COMMANDS = frozenset({CommandName.RETURN.value})
_BOLD_COMMANDS = frozenset({CommandName.B.value})
_TRIMMED_KINDS = frozenset({SectionKind.PARAM, SectionKind.RETURNS})


@dataclass
class _WalkContext:
    """State threaded through one walk.

    ``summary_pending`` stays true until the first section after the summary
    is opened; the paragraph seen while it is true is the brief description.
    """

    sections: list[Section]
    summary_pending: bool

    @property
    def last(self) -> Section:
        return self.sections[-1]

    def add_section(self, kind: SectionKind) -> Section:
        section = Section(kind)
        self.sections.append(section)
        self.summary_pending = False
        return section


def collect_sections(comment: Comment, sections: list[Section]) -> None:
    """Append the content of ``comment`` to ``sections`` in place.

    ``sections`` must start with the summary section. Commands other than
    parameters, return values and bold text are dropped, as are verbatim
    blocks and raw HTML.
    """
    context = _WalkContext(sections=sections, summary_pending=len(sections) == 1)
    _visit(comment, context)


def _visit(comment: Comment, context: _WalkContext) -> None:
    if isinstance(comment, FullComment):
        for block in comment.blocks:
            _visit(block, context)
    elif isinstance(comment, BlockCommandComment):
        _visit_block_command(comment, context)
    elif isinstance(comment, ParamCommandComment):
        _visit_param_command(comment, context)
    elif isinstance(comment, ParagraphComment):
        _visit_paragraph(comment, context)
    elif isinstance(comment, TextComment):
        section = context.last
        section.append(
            sanitize_text(comment.text, trim=section.kind in _TRIMMED_KINDS)
        )
    elif isinstance(comment, InlineCommandComment):
        _visit_inline_command(comment, context)
    elif isinstance(
        comment,
        (
            TParamCommandComment,
            VerbatimBlockComment,
            VerbatimLineComment,
            HTMLTagComment,
            HTMLStartTagComment,
            HTMLEndTagComment,
            InlineContentComment,
            VerbatimBlockLineComment,
        ),
    ):
        logger.debug("Dropping unsupported %s comment", comment.kind)
    else:
        assert_never(comment)


def _visit_block_command(comment: BlockCommandComment, context: _WalkContext) -> None:
    if comment.command not in _RETURN_COMMANDS:
        logger.debug("Dropping block command %r", comment.command)
        return
    context.add_section(SectionKind.RETURNS)
    if comment.paragraph is not None:
        _visit(comment.paragraph, context)


def _visit_param_command(comment: ParamCommandComment, context: _WalkContext) -> None:
    param = context.add_section(SectionKind.PARAM)
    if comment.arguments:
        param.attributes.append(f'name="{comment.arguments[0].text}"')
    if comment.paragraph is not None:
        _visit_inline_content(comment.paragraph.content, context)


def _visit_paragraph(comment: ParagraphComment, context: _WalkContext) -> None:
    is_summary = context.summary_pending
    _visit_inline_content(comment.content, context)
    if not is_summary:
        return

    # Everything collected so far belongs to the brief description.
    summary, *rest = context.sections
    lines = summary.get_lines()
    for section in rest:
        lines.extend(section.get_lines())
    del context.sections[1:]
    context.add_section(SectionKind.REMARKS)


def _visit_inline_content(
    content: Iterable[InlineContent], context: _WalkContext
) -> None:
    for inline in content:
        _visit(inline, context)
        if inline.has_trailing_newline:
            context.last.new_line()


def _visit_inline_command(comment: InlineCommandComment, context: _WalkContext) -> None:
    if comment.command not in _BOLD_COMMANDS:
        logger.debug("Dropping inline command %r", comment.command)
        return
    if not comment.arguments:
        logger.debug("Dropping inline command %r without arguments", comment.command)
        return
    context.last.append(f" <c>{comment.arguments[0].text}</c> ")
