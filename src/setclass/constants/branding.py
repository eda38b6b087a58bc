"""CLI branding strings."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "setclass - resolve conditional utility class names against a set of properties.\n\n"
    "Conditions are read from a YAML document; properties are passed as key=value pairs."
)
