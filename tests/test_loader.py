"""Tests for loading comment trees from JSON."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from commentxml.exceptions import CommentParseError
from commentxml.loader import load_comment, load_comment_file
from commentxml.schemas import (
    BlockCommandComment,
    FullComment,
    InlineCommandComment,
    ParagraphComment,
    ParamCommandComment,
    ParamDirection,
    TextComment,
)

_TREE = {
    "kind": "full",
    "blocks": [
        {
            "kind": "paragraph",
            "content": [
                {"kind": "text", "text": " Opens a file.", "has_trailing_newline": True},
                {"kind": "inline_command", "command": "b", "arguments": [{"text": "path"}]},
            ],
        },
        {
            "kind": "param_command",
            "arguments": [{"text": "path"}],
            "direction": "in",
            "paragraph": {"kind": "paragraph", "content": [{"kind": "text", "text": " file"}]},
        },
        {"kind": "block_command", "command": "return"},
        {"kind": "verbatim_block", "lines": [{"kind": "verbatim_block_line", "text": "x"}]},
    ],
}


class TestLoadComment:
    """Tests for load_comment function."""

    def test_loads_mapping(self) -> None:
        comment = load_comment(_TREE)

        assert isinstance(comment, FullComment)
        paragraph, param, command, _ = comment.blocks
        assert isinstance(paragraph, ParagraphComment)
        assert isinstance(paragraph.content[0], TextComment)
        assert paragraph.content[0].has_trailing_newline
        assert isinstance(paragraph.content[1], InlineCommandComment)
        assert isinstance(param, ParamCommandComment)
        assert param.direction is ParamDirection.IN
        assert isinstance(command, BlockCommandComment)
        assert command.paragraph is None

    def test_loads_json_text(self) -> None:
        assert load_comment(json.dumps(_TREE)) == load_comment(_TREE)

    def test_loads_json_bytes(self) -> None:
        comment = load_comment(b'{"kind": "text", "text": "hi"}')
        assert comment == TextComment(text="hi")

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(CommentParseError, match="Invalid comment tree"):
            load_comment({"kind": "unknown"})

    def test_rejects_inline_node_as_block(self) -> None:
        """Block lists only accept block-level node kinds."""
        with pytest.raises(CommentParseError):
            load_comment({"kind": "full", "blocks": [{"kind": "text", "text": "x"}]})

    def test_rejects_malformed_json(self) -> None:
        with pytest.raises(CommentParseError):
            load_comment("{not json")


class TestLoadCommentFile:
    """Tests for load_comment_file function."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "comment.json"
        path.write_text(json.dumps(_TREE), encoding="utf-8")

        assert load_comment_file(path) == load_comment(_TREE)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_comment_file(tmp_path / "missing.json")
