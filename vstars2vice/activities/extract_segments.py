"""Segment extraction activity: video map elements to float32 endpoints.

Turns every ``Line`` element of a decoded video map into a start and
end ``Point2LL``. Non-line elements and all-``"0"`` placeholder lines
are filtered out silently. A coordinate that does not parse drops only
its own segment: the problem is logged and the remaining elements are
still processed, so one bad value never costs the rest of the file.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal
from typing import TYPE_CHECKING

import numpy as np

from vstars2vice.core.constants import SKIP_SEGMENT_SUFFIX
from vstars2vice.core.exceptions import ValidationError
from vstars2vice.models.point import Point2LL

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from vstars2vice.models.video_map import VideoMap, VideoMapElement

logger = logging.getLogger("vstars2vice.activities.extract_segments")

# Plain decimal literal: sign, digits with optional fraction, optional exponent.
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_FLOAT32_MAX = float(np.finfo(np.float32).max)


class CoordinateParseError(ValidationError):
    """Raised when a single coordinate attribute is not a usable number."""

    default_stage = "extract_segments"
    default_code = "COORDINATE_PARSE_FAILED"


def parse_coordinate(text: str, *, field: str = "coordinate") -> np.float32:
    """Parse one coordinate attribute as a 32-bit float.

    Args:
        text: Raw attribute text.
        field: Attribute name used in the error message.

    Returns:
        The value narrowed to float32.

    Raises:
        CoordinateParseError: If the text is not a decimal literal or
            lies outside the float32 range.
    """
    if not _DECIMAL_PATTERN.fullmatch(text):
        msg = f'parsing {field} "{text}": invalid syntax'
        raise CoordinateParseError(msg)

    value = float(text)
    if abs(value) > _FLOAT32_MAX:
        msg = f'parsing {field} "{text}": value out of range'
        raise CoordinateParseError(msg)
    return _narrow_to_float32(text, value)


def _narrow_to_float32(text: str, value: float) -> np.float32:
    """Round ``text`` to float32 once, as if parsed straight from decimal.

    ``value`` is ``text`` already rounded to float64. When that lands
    exactly halfway between two float32 neighbours, ties-to-even may pick
    the wrong one, so the decimal text decides instead.
    """
    narrowed = np.float32(value)
    if float(narrowed) == value:
        return narrowed

    toward = np.float32(np.inf) if value > float(narrowed) else np.float32(-np.inf)
    neighbour = np.nextafter(narrowed, toward)
    halfway = (float(narrowed) + float(neighbour)) / 2
    if value != halfway:
        return narrowed

    exact = Decimal(text)
    if (neighbour > narrowed and exact > Decimal(halfway)) or (
        neighbour < narrowed and exact < Decimal(halfway)
    ):
        return neighbour
    return narrowed


def extract_line_segments(video_map: VideoMap) -> list[Point2LL]:
    """Return the endpoints of every usable line of ``video_map``.

    Points come in pairs: ``(2i, 2i + 1)`` are the start and end of the
    i-th retained segment, in element order.
    """
    points: list[Point2LL] = []
    for element in video_map.elements:
        if not element.is_line or element.is_degenerate:
            continue

        try:
            start, end = _segment_endpoints(element)
        except CoordinateParseError as exc:
            logger.warning("%s: %s. %s", video_map.long_name, exc, SKIP_SEGMENT_SUFFIX)
            continue

        points.append(start)
        points.append(end)
    return points


def extract_video_maps(
    video_maps: Iterable[VideoMap],
    *,
    report: Callable[[str, int], None] | None = None,
) -> dict[str, list[Point2LL]]:
    """Build the name → endpoints mapping for all maps with segments.

    Maps without a single retained segment are left out entirely. When
    two maps share a name, the later one wins.

    Args:
        video_maps: Decoded maps in document order.
        report: Called with ``(name, segment_count)`` for every map kept.

    Returns:
        Mapping of map long name to its endpoint sequence.
    """
    segments_by_name: dict[str, list[Point2LL]] = {}
    for video_map in video_maps:
        points = extract_line_segments(video_map)
        if not points:
            logger.debug("Video map '%s' has no line segments, omitting", video_map.long_name)
            continue

        if video_map.long_name in segments_by_name:
            logger.warning("Duplicate video map name '%s', keeping the later map", video_map.long_name)
        segments_by_name[video_map.long_name] = points
        if report is not None:
            report(video_map.long_name, len(points) // 2)
    return segments_by_name


def _segment_endpoints(element: VideoMapElement) -> tuple[Point2LL, Point2LL]:
    start_lat = parse_coordinate(element.start_lat, field="StartLat")
    start_lon = parse_coordinate(element.start_lon, field="StartLon")
    end_lat = parse_coordinate(element.end_lat, field="EndLat")
    end_lon = parse_coordinate(element.end_lon, field="EndLon")
    return (
        Point2LL(longitude=start_lon, latitude=start_lat),
        Point2LL(longitude=end_lon, latitude=end_lat),
    )
