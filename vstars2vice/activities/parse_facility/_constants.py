"""Shared constants for facility XML parsing."""

from __future__ import annotations

# XML Schema instance namespace carrying the element subtype
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSI_TYPE_ATTR = f"{{{XSI_NAMESPACE}}}type"

# Element local names
VIDEO_MAPS_TAG = "VideoMaps"
VIDEO_MAP_TAG = "VideoMap"
ELEMENTS_TAG = "Elements"
ELEMENT_TAG = "Element"

# VideoMap attributes
LONG_NAME_ATTR = "LongName"
STARS_GROUP_ATTR = "STARSGroup"

# Element coordinate attributes
START_LAT_ATTR = "StartLat"
START_LON_ATTR = "StartLon"
END_LAT_ATTR = "EndLat"
END_LON_ATTR = "EndLon"
