"""Shared schemas for commentxml."""

from commentxml.schemas.comments import (
    BlockCommandComment,
    BlockContent,
    CommandArgument,
    CommandName,
    Comment,
    FullComment,
    HTMLAttribute,
    HTMLEndTagComment,
    HTMLStartTagComment,
    HTMLTagComment,
    InlineCommandComment,
    InlineContent,
    InlineContentComment,
    ParagraphComment,
    ParamCommandComment,
    ParamDirection,
    TextComment,
    TParamCommandComment,
    VerbatimBlockComment,
    VerbatimBlockLineComment,
    VerbatimLineComment,
)

__all__ = [
    "BlockCommandComment",
    "BlockContent",
    "CommandArgument",
    "CommandName",
    "Comment",
    "FullComment",
    "HTMLAttribute",
    "HTMLEndTagComment",
    "HTMLStartTagComment",
    "HTMLTagComment",
    "InlineCommandComment",
    "InlineContent",
    "InlineContentComment",
    "ParagraphComment",
    "ParamCommandComment",
    "ParamDirection",
    "TParamCommandComment",
    "TextComment",
    "VerbatimBlockComment",
    "VerbatimBlockLineComment",
    "VerbatimLineComment",
]
