"""Degrees-minutes-seconds text encoding used by vice video maps.

Every stage runs in 32-bit floating point so the truncated digits stay
identical to the ones vice produces for the same Point2LL.

A latitude/longitude pair renders as ``N039.51.39.243,W075.16.29.511``.
"""

from __future__ import annotations

import numpy as np

_SIXTY = np.float32(60)
_THOUSAND = np.float32(1000)


def format_dms_component(value: float | np.float32) -> str:
    """Format a non-negative degree magnitude as ``DDD.MM.SS.mmm``.

    Each stage truncates; nothing is rounded, so 59.9999 seconds
    renders as ``59``.

    Args:
        value: Magnitude in decimal degrees. Converted to float32.

    Returns:
        The fixed-width component without hemisphere letter.
    """
    v = np.float32(value)
    degrees = int(v)
    v -= np.floor(v)
    v *= _SIXTY
    minutes = int(v)
    v -= np.floor(v)
    v *= _SIXTY
    seconds = int(v)
    v -= np.floor(v)
    v *= _THOUSAND
    millis = int(v)
    return f"{degrees:03d}.{minutes:02d}.{seconds:02d}.{millis:03d}"


def latitude_hemisphere(latitude: float | np.float32) -> str:
    """Return ``N`` for strictly positive latitudes, ``S`` otherwise."""
    return "N" if latitude > 0 else "S"


def longitude_hemisphere(longitude: float | np.float32) -> str:
    """Return ``E`` for strictly positive longitudes, ``W`` otherwise."""
    return "E" if longitude > 0 else "W"


def dms_token(longitude: float | np.float32, latitude: float | np.float32) -> str:
    """Render a position as a vice coordinate token, latitude first.

    Args:
        longitude: Signed decimal degrees, east positive.
        latitude: Signed decimal degrees, north positive.

    Returns:
        A token such as ``N039.51.39.243,W075.16.29.511``.
    """
    lon = np.float32(longitude)
    lat = np.float32(latitude)
    return (
        f"{latitude_hemisphere(lat)}{format_dms_component(np.abs(lat))},"
        f"{longitude_hemisphere(lon)}{format_dms_component(np.abs(lon))}"
    )
