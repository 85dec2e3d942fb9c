"""Local configuration for commentxml."""

from __future__ import annotations

import os


DEFAULT_COMMENT_KIND = "bcpl_slash"
DEFAULT_NEWLINE = "\n"
DEFAULT_LOG_LEVEL = "WARNING"
# Stray tag-like tokens (e.g. "<b" or "</em>") that the parser leaves in text nodes.
DEFAULT_TAG_PATTERN = r"^(<|</)[a-zA-Z][\w\-]*?>?$"

COMMENTXML_COMMENT_KIND = os.getenv("COMMENTXML_COMMENT_KIND", DEFAULT_COMMENT_KIND)
COMMENTXML_NEWLINE = os.getenv("COMMENTXML_NEWLINE", DEFAULT_NEWLINE)
COMMENTXML_TAG_PATTERN = os.getenv("COMMENTXML_TAG_PATTERN", DEFAULT_TAG_PATTERN)
COMMENTXML_LOG_LEVEL = os.getenv("COMMENTXML_LOG_LEVEL", DEFAULT_LOG_LEVEL)
