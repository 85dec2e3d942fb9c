"""Load comment trees from the parser's JSON output."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic import TypeAdapter, ValidationError

from commentxml.exceptions import CommentParseError
from commentxml.schemas import Comment

_COMMENT_ADAPTER: TypeAdapter[Comment] = TypeAdapter(Comment)


def load_comment(data: str | bytes | Mapping[str, Any]) -> Comment:
    """Validate a comment tree given as JSON text or a decoded mapping.

    Args:
        data: JSON document, or the mapping it decodes to.

    Returns:
        The root node of the comment tree.

    Raises:
        CommentParseError: If the input is not valid JSON or does not describe
            a known comment node.
    """
    try:
        if isinstance(data, (str, bytes)):
            return _COMMENT_ADAPTER.validate_json(data)
        return _COMMENT_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise CommentParseError(f"Invalid comment tree: {exc}") from exc


def load_comment_file(path: Path | str) -> Comment:
    """Read and validate a comment tree stored as a UTF-8 JSON file."""
    return load_comment(Path(path).read_text(encoding="utf-8"))
