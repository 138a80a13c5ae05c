"""
Distance helpers for location-based search types.

Not yet used by any filter: the school and subway searches need an external
school-rating or transit-station source before distances can decide anything.
"""

import math

EARTH_RADIUS_KM = 6371
WALKING_SPEED_KMH = 5


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance between two coordinates.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in kilometres
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(max(0.0, 1 - a)))
    return EARTH_RADIUS_KM * c


def walking_minutes(distance_km: float) -> float:
    """Walking time in minutes at 5 km/h."""
    return distance_km / WALKING_SPEED_KMH * 60
