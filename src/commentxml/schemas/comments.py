"""Comment tree models produced by the doc-comment parser."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class CommandName(str, Enum):
    """Well-known doc-comment command names."""

    RETURN = "return"
    RETURNS = "returns"
    RESULT = "result"
    PARAM = "param"
    TPARAM = "tparam"
    BRIEF = "brief"
    B = "b"
    C = "c"
    P = "p"
    A = "a"
    E = "e"
    EM = "em"


class ParamDirection(str, Enum):
    """Passing direction declared on a param command."""

    IN = "in"
    OUT = "out"
    INOUT = "inout"


class _CommentModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class CommandArgument(_CommentModel):
    """A single word argument of a command."""

    text: str


class HTMLAttribute(_CommentModel):
    """A name/value pair on an HTML start tag."""

    name: str
    value: str = ""


class InlineContentComment(_CommentModel):
    """Inline content without a more specific kind."""

    kind: Literal["inline_content"] = "inline_content"
    has_trailing_newline: bool = False


class TextComment(_CommentModel):
    """Plain text as it appeared in the comment."""

    kind: Literal["text"] = "text"
    text: str
    has_trailing_newline: bool = False


class InlineCommandComment(_CommentModel):
    """A command embedded in running text, such as ``\\b word``."""

    kind: Literal["inline_command"] = "inline_command"
    command: str
    arguments: list[CommandArgument] = Field(default_factory=list)
    has_trailing_newline: bool = False


class HTMLTagComment(_CommentModel):
    kind: Literal["html_tag"] = "html_tag"
    tag_name: str
    has_trailing_newline: bool = False


class HTMLStartTagComment(_CommentModel):
    kind: Literal["html_start_tag"] = "html_start_tag"
    tag_name: str
    attributes: list[HTMLAttribute] = Field(default_factory=list)
    self_closing: bool = False
    has_trailing_newline: bool = False


class HTMLEndTagComment(_CommentModel):
    kind: Literal["html_end_tag"] = "html_end_tag"
    tag_name: str
    has_trailing_newline: bool = False


InlineContent = Annotated[
    Union[
        TextComment,
        InlineCommandComment,
        HTMLTagComment,
        HTMLStartTagComment,
        HTMLEndTagComment,
        InlineContentComment,
    ],
    Field(discriminator="kind"),
]


class ParagraphComment(_CommentModel):
    """A run of inline content."""

    kind: Literal["paragraph"] = "paragraph"
    content: list[InlineContent] = Field(default_factory=list)


class BlockCommandComment(_CommentModel):
    """A block-level command, such as ``\\return``, with its paragraph."""

    kind: Literal["block_command"] = "block_command"
    command: str
    arguments: list[CommandArgument] = Field(default_factory=list)
    paragraph: ParagraphComment | None = None


class ParamCommandComment(_CommentModel):
    """A ``\\param`` command; the first argument is the parameter name."""

    kind: Literal["param_command"] = "param_command"
    command: str = CommandName.PARAM.value
    arguments: list[CommandArgument] = Field(default_factory=list)
    paragraph: ParagraphComment | None = None
    direction: ParamDirection = ParamDirection.IN


class TParamCommandComment(_CommentModel):
    """A ``\\tparam`` command describing a template parameter."""

    kind: Literal["tparam_command"] = "tparam_command"
    command: str = CommandName.TPARAM.value
    arguments: list[CommandArgument] = Field(default_factory=list)
    paragraph: ParagraphComment | None = None
    position: list[int] = Field(default_factory=list)


class VerbatimBlockLineComment(_CommentModel):
    kind: Literal["verbatim_block_line"] = "verbatim_block_line"
    text: str


class VerbatimBlockComment(_CommentModel):
    kind: Literal["verbatim_block"] = "verbatim_block"
    command: str = "verbatim"
    lines: list[VerbatimBlockLineComment] = Field(default_factory=list)


class VerbatimLineComment(_CommentModel):
    kind: Literal["verbatim_line"] = "verbatim_line"
    command: str = "fn"
    text: str = ""


BlockContent = Annotated[
    Union[
        BlockCommandComment,
        ParamCommandComment,
        TParamCommandComment,
        VerbatimBlockComment,
        VerbatimLineComment,
        ParagraphComment,
    ],
    Field(discriminator="kind"),
]


class FullComment(_CommentModel):
    """Root of a parsed documentation comment."""

    kind: Literal["full"] = "full"
    blocks: list[BlockContent] = Field(default_factory=list)


Comment = Annotated[
    Union[
        FullComment,
        BlockCommandComment,
        ParamCommandComment,
        TParamCommandComment,
        VerbatimBlockComment,
        VerbatimLineComment,
        ParagraphComment,
        HTMLTagComment,
        HTMLStartTagComment,
        HTMLEndTagComment,
        TextComment,
        InlineContentComment,
        InlineCommandComment,
        VerbatimBlockLineComment,
    ],
    Field(discriminator="kind"),
]
