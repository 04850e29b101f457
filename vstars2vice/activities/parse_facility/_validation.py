"""Input loading and XML well-formedness checks for facility parsing.

Responsibilities:
- Read the facility file (or standard input) into memory
- Parse bytes into an lxml root element, rejecting malformed XML
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from vstars2vice.core.constants import STDIO_PATH
from vstars2vice.core.exceptions import PermanentError, ValidationError

if TYPE_CHECKING:
    from lxml.etree import _Element

# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from __init__)
# ---------------------------------------------------------------------------


class FacilityReadError(PermanentError):
    """Raised when the facility file cannot be opened or read."""

    default_stage = "parse_facility"
    default_code = "FACILITY_READ_FAILED"


class FacilityParseError(ValidationError):
    """Raised when the facility file is not well-formed XML."""

    default_stage = "parse_facility"
    default_code = "FACILITY_PARSE_FAILED"


# ---------------------------------------------------------------------------
# Input loading
# ---------------------------------------------------------------------------


def read_facility_bytes(facility_path: Path | str) -> bytes:
    """Read the whole facility file, or standard input for ``-``.

    Raises:
        FacilityReadError: If the file cannot be opened or read.
    """
    try:
        if str(facility_path) == STDIO_PATH:
            return sys.stdin.buffer.read()
        return Path(facility_path).read_bytes()
    except OSError as exc:
        msg = f"Cannot read facility file: {exc}"
        raise FacilityReadError(msg) from exc


# ---------------------------------------------------------------------------
# XML well-formedness
# ---------------------------------------------------------------------------


def parse_xml_root(content: bytes, source_name: str, *, huge_tree: bool = False) -> _Element:
    """Parse facility bytes into an lxml root element.

    Raises:
        FacilityParseError: If the content is empty or not well-formed XML.
    """
    from lxml import etree  # type: ignore[attr-defined]

    if not content.strip():
        msg = f"Facility file {source_name} is empty"
        raise FacilityParseError(msg)

    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=huge_tree)
    try:
        return etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        msg = f"Facility file {source_name} is not valid XML: {exc}"
        raise FacilityParseError(msg) from exc
