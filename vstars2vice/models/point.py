"""Video map endpoint in single precision."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from vstars2vice.utils.dms import dms_token

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class Point2LL:
    """A ``(longitude, latitude)`` pair of float32 values.

    Longitude is index 0 and latitude index 1, both when unpacked and
    when indexed.
    """

    longitude: np.float32
    latitude: np.float32

    @classmethod
    def from_degrees(cls, longitude: float, latitude: float) -> Point2LL:
        """Build a point, narrowing both values to float32."""
        return cls(longitude=np.float32(longitude), latitude=np.float32(latitude))

    def __iter__(self) -> Iterator[np.float32]:
        yield self.longitude
        yield self.latitude

    def __getitem__(self, index: int) -> np.float32:
        return (self.longitude, self.latitude)[index]

    def __len__(self) -> int:
        return 2

    def dms_string(self) -> str:
        """Return the vice token, e.g. ``N039.51.39.243,W075.16.29.511``."""
        return dms_token(self.longitude, self.latitude)

    def to_json(self) -> str:
        """Serialise as the single DMS token vice expects."""
        return self.dms_string()
