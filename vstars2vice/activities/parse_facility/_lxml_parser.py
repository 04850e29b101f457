"""lxml-based decoders for the two facility document shapes.

- **Facility bundle** (primary): the root element, whatever its name,
  holds one or more ``<VideoMaps>`` children.
- **Bare VideoMaps** (fallback): the root element is itself the
  ``<VideoMaps>`` container, as produced by stand-alone map exports.

Names are matched on the local part only, so a default namespace on
the document does not hide any maps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from vstars2vice.activities.parse_facility._constants import (
    ELEMENT_TAG,
    ELEMENTS_TAG,
    END_LAT_ATTR,
    END_LON_ATTR,
    LONG_NAME_ATTR,
    STARS_GROUP_ATTR,
    START_LAT_ATTR,
    START_LON_ATTR,
    VIDEO_MAP_TAG,
    VIDEO_MAPS_TAG,
    XSI_TYPE_ATTR,
)
from vstars2vice.models.video_map import (
    FacilityBundle,
    VideoMap,
    VideoMapElement,
    VideoMapGroup,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from lxml.etree import _Element


def decode_facility_bundle(root: _Element) -> FacilityBundle:
    """Decode a document whose root wraps one or more ``<VideoMaps>``."""
    return FacilityBundle(
        groups=[_decode_group(group) for group in _children(root, VIDEO_MAPS_TAG)]
    )


def decode_video_maps_root(root: _Element) -> FacilityBundle:
    """Decode a document whose root is the ``<VideoMaps>`` container itself.

    Any other root yields an empty bundle.
    """
    if _local_name(root) != VIDEO_MAPS_TAG:
        return FacilityBundle()
    return FacilityBundle(groups=[_decode_group(root)])


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _decode_group(group_elem: _Element) -> VideoMapGroup:
    return VideoMapGroup(
        maps=[_decode_video_map(vm) for vm in _children(group_elem, VIDEO_MAP_TAG)]
    )


def _decode_video_map(video_map_elem: _Element) -> VideoMap:
    """Decode one ``<VideoMap>`` and all ``Elements/Element`` children."""
    elements = [
        _decode_element(elem)
        for block in _children(video_map_elem, ELEMENTS_TAG)
        for elem in _children(block, ELEMENT_TAG)
    ]
    return VideoMap(
        long_name=video_map_elem.get(LONG_NAME_ATTR, ""),
        stars_group=video_map_elem.get(STARS_GROUP_ATTR, ""),
        elements=elements,
    )


def _decode_element(elem: _Element) -> VideoMapElement:
    return VideoMapElement(
        element_type=elem.get(XSI_TYPE_ATTR, ""),
        start_lat=elem.get(START_LAT_ATTR, ""),
        start_lon=elem.get(START_LON_ATTR, ""),
        end_lat=elem.get(END_LAT_ATTR, ""),
        end_lon=elem.get(END_LON_ATTR, ""),
    )


def _children(parent: _Element, local_name: str) -> Iterator[_Element]:
    """Yield direct element children with the given local name."""
    for child in parent:
        if _local_name(child) == local_name:
            yield child


def _local_name(elem: _Element) -> str:
    # Comments and processing instructions carry a non-string tag.
    tag = elem.tag
    if not isinstance(tag, str):
        return ""
    return tag.rpartition("}")[2]
