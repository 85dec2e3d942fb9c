"""Tests for the command line interface."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from commentxml.cli import main

_TREE = {
    "kind": "full",
    "blocks": [
        {"kind": "paragraph", "content": [{"kind": "text", "text": " Hello"}]},
        {
            "kind": "block_command",
            "command": "return",
            "paragraph": {"kind": "paragraph", "content": [{"kind": "text", "text": " zero"}]},
        },
    ],
}


class TestMain:
    """Tests for main function."""

    def test_transcodes_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "comment.json"
        path.write_text(json.dumps(_TREE), encoding="utf-8")

        assert main([str(path), "--kind", "bcpl_slash"]) == 0

        assert capsys.readouterr().out == (
            "/// <summary>Hello</summary>\n/// <returns>zero</returns>\n"
        )

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(_TREE)))

        assert main(["--kind", "c"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            " * <summary>Hello</summary>",
            " * <returns>zero</returns>",
        ]

    def test_empty_comment_prints_nothing(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "empty.json"
        path.write_text('{"kind": "full"}', encoding="utf-8")

        assert main([str(path), "--kind", "bcpl_slash"]) == 0
        assert capsys.readouterr().out == ""

    def test_invalid_tree_fails(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"kind": "nope"}', encoding="utf-8")

        assert main([str(path)]) == 1
        assert "Invalid comment tree" in capsys.readouterr().err

    def test_missing_file_fails(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "missing.json")]) == 1
        assert "commentxml:" in capsys.readouterr().err

    def test_rejects_unknown_kind(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-", "--kind", "rem"])
        assert exc_info.value.code == 2
