"""Constants used across the md2html package."""

from __future__ import annotations

import re

# Line classification
HEADER_PATTERN = re.compile(r"^(#{1,4}) (.*)$")
ORDERED_ITEM_PATTERN = re.compile(r"^\d+\.\s(.*)$")
UNORDERED_ITEM_PREFIX = "- "
FENCE_DELIMITER = "```"
TAB_WIDTH = 4

# Inline spans; NUL only ever appears inside placeholder tokens
PLACEHOLDER_MARK = "\x00"
PLACEHOLDER_PATTERN = re.compile(r"\x00(\d+)\x00")
CODE_SPAN_PATTERN = re.compile(r"`([^`\x00]+)`")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)\x00]+)\)")
AUTOLINK_PATTERN = re.compile(r"https?://[^\s)<\x00]+")

# Output layout
LIST_INDENT_WIDTH = 8
ITEM_INDENT_OFFSET = 4
DEFAULT_CODE_BLOCK_CLASS = "code"

# Templates
DEFAULT_TITLE = "Converted Document"
DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>{{ Title }}</title>
</head>
<body>
{{ Content }}
</body>
</html>
"""

# Limits
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
