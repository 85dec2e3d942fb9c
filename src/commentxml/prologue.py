"""Line prologues for the supported comment styles."""

from __future__ import annotations

from enum import Enum

from commentxml.exceptions import UnknownCommentKindError


class CommentKind(str, Enum):
    """Comment style used in the generated source file."""

    BCPL = "bcpl"
    C = "c"
    BCPL_SLASH = "bcpl_slash"
    BCPL_EXCL = "bcpl_excl"
    JAVADOC = "javadoc"
    QT = "qt"


_PROLOGUES: dict[CommentKind, str] = {
    CommentKind.BCPL: "//",
    CommentKind.BCPL_EXCL: "//",
    CommentKind.C: " *",
    CommentKind.JAVADOC: " *",
    CommentKind.QT: " *",
    CommentKind.BCPL_SLASH: "///",
}


def get_multi_line_comment_prologue(kind: CommentKind | str) -> str:
    """Return the prefix written at the start of every line of a comment block.

    Raises:
        UnknownCommentKindError: If ``kind`` is not a known comment style.
    """
    try:
        return _PROLOGUES[CommentKind(kind)]
    except ValueError as exc:
        raise UnknownCommentKindError(f"Unknown comment kind: {kind!r}") from exc
