"""Facility parsing activity: dual-shape vSTARS XML decoder.

Parses a vSTARS facility file and returns its video maps with raw
element attributes. The document is decoded as a facility bundle
first; if that finds no video maps at all, the same input is decoded
again from the start as a bare ``<VideoMaps>`` document.

The fallback is a heuristic for alternate exports, not format
detection: it is triggered only by an empty first result.

The parsing pipeline is split into focused stages:
- **_validation**: input loading and XML well-formedness
- **_lxml_parser**: the two shape decoders
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from vstars2vice.activities.parse_facility._constants import XSI_NAMESPACE
from vstars2vice.activities.parse_facility._lxml_parser import (
    decode_facility_bundle,
    decode_video_maps_root,
)
from vstars2vice.activities.parse_facility._validation import (
    FacilityParseError,
    FacilityReadError,
    parse_xml_root,
    read_facility_bytes,
)

if TYPE_CHECKING:
    from pathlib import Path

    from vstars2vice.models.video_map import FacilityBundle

logger = logging.getLogger("vstars2vice.activities.parse_facility")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

__all__ = [
    "XSI_NAMESPACE",
    "FacilityParseError",
    "FacilityReadError",
    "decode_facility_bundle",
    "decode_video_maps_root",
    "parse_facility_bytes",
    "parse_facility_file",
    "parse_xml_root",
    "read_facility_bytes",
]


def parse_facility_file(facility_path: Path | str, *, huge_tree: bool = False) -> FacilityBundle:
    """Parse a vSTARS facility file into a ``FacilityBundle``.

    Args:
        facility_path: Path to the XML file, or ``-`` for standard input.
        huge_tree: Lift lxml's limits on very large documents.

    Returns:
        The decoded bundle. Empty if neither document shape holds any
        video maps.

    Raises:
        FacilityReadError: If the file cannot be opened or read.
        FacilityParseError: If the file is not well-formed XML.
    """
    content = read_facility_bytes(facility_path)
    return parse_facility_bytes(content, source_name=str(facility_path), huge_tree=huge_tree)


def parse_facility_bytes(
    content: bytes, *, source_name: str = "<bytes>", huge_tree: bool = False
) -> FacilityBundle:
    """Decode facility XML held in memory.

    Raises:
        FacilityParseError: If the content is not well-formed XML.
    """
    logger.debug("Parsing facility file: %s", source_name)

    bundle = decode_facility_bundle(parse_xml_root(content, source_name, huge_tree=huge_tree))

    if bundle.map_count == 0:
        logger.debug(
            "No video maps under a facility bundle in %s, retrying with <VideoMaps> as root",
            source_name,
        )
        bundle = decode_video_maps_root(parse_xml_root(content, source_name, huge_tree=huge_tree))

    if bundle.map_count == 0:
        logger.warning("No video maps found in %s", source_name)
    else:
        logger.debug("Decoded %d video map(s) from %s", bundle.map_count, source_name)
    return bundle
