"""Shared converter constants: single source of truth."""

from __future__ import annotations

DEFAULT_JSON_INDENT: int = 4
"""Indentation of the vice JSON output."""

STDIO_PATH: str = "-"
"""Path placeholder for standard input (input) or standard output (output)."""

SKIP_SEGMENT_SUFFIX: str = "Skipping this segment."
"""Tail of the diagnostic emitted for every dropped malformed segment."""
