"""Great-circle distance between geographic coordinates."""

from coord_distance.geo import Coordinate, EARTH_RADIUS_KM

__all__ = ["Coordinate", "EARTH_RADIUS_KM"]
