"""Markers and separators used when rendering class text."""

from __future__ import annotations

import re

CLASS_SEPARATOR: str = " "

DEBUG_PASS_MARKER: str = "•"
DEBUG_FAIL_MARKER: str = "✕"
DEBUG_JOINER: str = "\u2060"
DEBUG_LINE_BREAK: str = "\r\n"

WHITESPACE_RUN_PATTERN: re.Pattern[str] = re.compile(r"\s+")
WORD_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9_-]+")
NAMESPACE_MARKER_PATTERN: re.Pattern[str] = re.compile(r"[A-Za-z0-9_-]+:")
