"""Custom exceptions for commentxml."""


class CommentXmlError(Exception):
    """Base exception for commentxml operations."""


class CommentParseError(CommentXmlError):
    """Comment tree input could not be loaded or validated."""


class UnknownCommentKindError(CommentXmlError, ValueError):
    """Comment kind has no known line prologue."""
