"""Stable validation error codes for options and condition files."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type

COND001: str = "COND001"  # conditions file not found / unreadable
COND002: str = "COND002"  # invalid YAML parse
COND003: str = "COND003"  # document is not a list or a mapping with a conditions list
COND004: str = "COND004"  # condition is neither a string nor a mapping
COND005: str = "COND005"  # unknown condition key
COND006: str = "COND006"  # invalid use value
COND007: str = "COND007"  # invalid when value

ALL_CFG_CODES: tuple[str, ...] = (CFG001, CFG002, CFG003, CFG004, CFG005)
ALL_COND_CODES: tuple[str, ...] = (COND001, COND002, COND003, COND004, COND005, COND006, COND007)
