"""Data model for a parsed vSTARS facility file.

A ``FacilityBundle`` is the decoded document: a list of
``VideoMapGroup`` containers (one per ``<VideoMaps>`` element), each
holding ``VideoMap`` records whose ``VideoMapElement`` children carry
the raw, still-unparsed coordinate attributes. This is the output of
the parse_facility activity and the input to extract_segments.
"""

from __future__ import annotations

from dataclasses import dataclass, field

LINE_ELEMENT_TYPE = "Line"
"""``xsi:type`` value of the only element kind that produces segments."""

DEGENERATE_COORDINATE = "0"
"""Literal value every coordinate carries on a placeholder segment."""


@dataclass(frozen=True, slots=True)
class VideoMapElement:
    """A single ``<Element>`` of a video map.

    Coordinates are kept as the raw attribute text; a missing attribute
    is the empty string. Parsing happens in extract_segments so that a
    bad value costs one segment rather than the whole file.

    Attributes:
        element_type: The ``xsi:type`` attribute (e.g. ``"Line"``, ``"Arc"``).
        start_lat: ``StartLat`` attribute text.
        start_lon: ``StartLon`` attribute text.
        end_lat: ``EndLat`` attribute text.
        end_lon: ``EndLon`` attribute text.
    """

    element_type: str = ""
    start_lat: str = ""
    start_lon: str = ""
    end_lat: str = ""
    end_lon: str = ""

    @property
    def is_line(self) -> bool:
        """Whether this element is a line segment."""
        return self.element_type == LINE_ELEMENT_TYPE

    @property
    def is_degenerate(self) -> bool:
        """Whether all four coordinates are the literal placeholder ``"0"``."""
        return all(
            value == DEGENERATE_COORDINATE
            for value in (self.start_lon, self.end_lon, self.start_lat, self.end_lat)
        )


@dataclass(frozen=True, slots=True)
class VideoMap:
    """A named video map.

    Attributes:
        long_name: ``LongName`` attribute, the key in the vice output.
        stars_group: ``STARSGroup`` attribute (group label, not exported).
        elements: Drawing elements in document order.
    """

    long_name: str
    stars_group: str = ""
    elements: list[VideoMapElement] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class VideoMapGroup:
    """One ``<VideoMaps>`` container."""

    maps: list[VideoMap] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class FacilityBundle:
    """Top-level decoded facility document."""

    groups: list[VideoMapGroup] = field(default_factory=list)

    @property
    def video_maps(self) -> list[VideoMap]:
        """All video maps across groups, in document order."""
        return [video_map for group in self.groups for video_map in group.maps]

    @property
    def map_count(self) -> int:
        """Total number of video maps in the bundle."""
        return sum(len(group.maps) for group in self.groups)
