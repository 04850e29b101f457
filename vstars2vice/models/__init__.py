"""Data models.

Defines the data structures used throughout the converter:
- FacilityBundle / VideoMapGroup / VideoMap / VideoMapElement: decoded XML
- Point2LL: float32 endpoint serialised as a DMS token
"""

from vstars2vice.models.point import Point2LL
from vstars2vice.models.video_map import (
    DEGENERATE_COORDINATE,
    LINE_ELEMENT_TYPE,
    FacilityBundle,
    VideoMap,
    VideoMapElement,
    VideoMapGroup,
)

__all__ = [
    "DEGENERATE_COORDINATE",
    "LINE_ELEMENT_TYPE",
    "FacilityBundle",
    "Point2LL",
    "VideoMap",
    "VideoMapElement",
    "VideoMapGroup",
]
