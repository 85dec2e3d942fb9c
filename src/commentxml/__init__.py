"""commentxml: transcode parsed doc comments into XML documentation comments."""

from commentxml.exceptions import (
    CommentParseError,
    CommentXmlError,
    UnknownCommentKindError,
)
from commentxml.loader import load_comment, load_comment_file
from commentxml.printer import transcode
from commentxml.prologue import CommentKind, get_multi_line_comment_prologue
from commentxml.schemas import Comment, FullComment

__all__ = [
    "Comment",
    "CommentKind",
    "CommentParseError",
    "CommentXmlError",
    "FullComment",
    "UnknownCommentKindError",
    "get_multi_line_comment_prologue",
    "load_comment",
    "load_comment_file",
    "transcode",
]
