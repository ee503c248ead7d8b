#!/usr/bin/env python3
"""
Distance Calculator - Great-circle distance between two coordinates.
"""
import math

from pro_scout.matcher.models import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    # Rounding can push a past 1.0 for near-antipodal points
    a = min(1.0, max(0.0, a))

    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


class DistanceCalculator:
    """Calculate haversine distance between geographic points."""

    @staticmethod
    def calculate(a: GeoPoint, b: GeoPoint) -> float:
        """
        Calculate the great-circle distance between two points.

        Args:
            a: First point
            b: Second point

        Returns:
            Distance in kilometers; symmetric, and 0.0 for identical points
        """
        return haversine_km(a.lat, a.lng, b.lat, b.lng)
