"""Geographic coordinate value type, pure Python, no external deps."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0

MIN_LAT = -90.0
MAX_LAT = 90.0

MIN_LON = -180.0
MAX_LON = 180.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(frozen=True)
class Coordinate:
    """A point on Earth in decimal degrees.

    Out-of-range inputs are clamped to the nearest bound rather than wrapped:
    (91, 181) becomes (90, 180) and (91, -181) becomes (90, -180).
    """

    latitude: float             # [-90, 90], north positive
    longitude: float            # [-180, 180], east positive

    def __post_init__(self):
        lat = _clamp(float(self.latitude), MIN_LAT, MAX_LAT)
        lon = _clamp(float(self.longitude), MIN_LON, MAX_LON)

        if lat != self.latitude:
            logger.debug("latitude %s clamped to %s", self.latitude, lat)
        if lon != self.longitude:
            logger.debug("longitude %s clamped to %s", self.longitude, lon)

        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)

    def distance_in_km(self, other: Coordinate) -> float:
        """Great-circle distance to ``other`` in kilometers.

        Uses the spherical law of cosines on a sphere of radius 6371 km:

            d = R * acos(sin(lat1) * sin(lat2) + cos(lat1) * cos(lat2) * cos(lon2 - lon1))
        """
        rlat1, rlon1 = math.radians(self.latitude), math.radians(self.longitude)
        rlat2, rlon2 = math.radians(other.latitude), math.radians(other.longitude)

        cos_angle = (
            math.sin(rlat1) * math.sin(rlat2)
            + math.cos(rlat1) * math.cos(rlat2) * math.cos(rlon2 - rlon1)
        )
        # Rounding can push the argument just outside acos' domain
        if not -1.0 <= cos_angle <= 1.0:
            logger.debug("acos argument %r clamped to [-1, 1]", cos_angle)
            cos_angle = _clamp(cos_angle, -1.0, 1.0)

        return EARTH_RADIUS_KM * math.acos(cos_angle)
