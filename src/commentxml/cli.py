"""Command line interface for commentxml."""

from __future__ import annotations

import argparse
import sys

from commentxml.config import COMMENTXML_COMMENT_KIND, COMMENTXML_LOG_LEVEL
from commentxml.exceptions import CommentParseError
from commentxml.loader import load_comment, load_comment_file
from commentxml.printer import transcode
from commentxml.prologue import CommentKind
from commentxml.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commentxml",
        description="Transcode a parsed doc comment (JSON) into an XML documentation comment.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="JSON comment tree to read ('-' or omitted for stdin)",
    )
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in CommentKind],
        default=COMMENTXML_COMMENT_KIND,
        help="Comment style of the generated lines (default: %(default)s)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else COMMENTXML_LOG_LEVEL)

    try:
        if args.path == "-":
            comment = load_comment(sys.stdin.read())
        else:
            comment = load_comment_file(args.path)
    except (OSError, CommentParseError) as exc:
        logger.debug("Failed to load %s", args.path, exc_info=True)
        print(f"commentxml: {exc}", file=sys.stderr)
        return 1

    rendered = transcode(comment, args.kind)
    if rendered:
        print(rendered)
    return 0
