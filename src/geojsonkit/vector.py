#!/usr/bin/env python3
"""
Great-circle navigation on a spherical Earth.

Distances are in meters and bearings in degrees clockwise from north.
"""

import math
from typing import Tuple

# Mean Earth radius in meters
EARTH_RADIUS_M = 6_371_000


def normalize_bearing(bearing: float) -> float:
    """Map any bearing in degrees into [0, 360)."""
    normalized = bearing % 360
    # A tiny negative input rounds up to exactly 360.0
    if normalized >= 360:
        return 0.0
    return normalized


def initial_bearing(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Calculate the initial bearing of the great circle from one position to another.

    Args:
        lon1: Start longitude in decimal degrees
        lat1: Start latitude in decimal degrees
        lon2: End longitude in decimal degrees
        lat2: End latitude in decimal degrees

    Returns:
        Bearing in degrees, in [0, 360)
    """
    phi1, lambda1 = math.radians(lat1), math.radians(lon1)
    phi2, lambda2 = math.radians(lat2), math.radians(lon2)
    dlon = lambda2 - lambda1

    y = math.sin(dlon) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        dlon
    )
    theta = math.degrees(math.atan2(y, x))

    return normalize_bearing(theta + 360)


def haversine_distance(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Calculate the haversine distance between two positions.

    Args:
        lon1: Start longitude in decimal degrees
        lat1: Start latitude in decimal degrees
        lon2: End longitude in decimal degrees
        lat2: End latitude in decimal degrees

    Returns:
        Distance in meters
    """
    phi1, lambda1 = math.radians(lat1), math.radians(lon1)
    phi2, lambda2 = math.radians(lat2), math.radians(lon2)

    dlat = phi2 - phi1
    dlon = lambda2 - lambda1
    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a just past 1 for antipodal positions
    a = min(a, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def destination(
    lon: float, lat: float, meters: float, bearing: float
) -> Tuple[float, float]:
    """
    Project a position along a great circle.

    Args:
        lon: Start longitude in decimal degrees
        lat: Start latitude in decimal degrees
        meters: Distance to travel
        bearing: Initial bearing in degrees (any value, normalized first)

    Returns:
        Tuple of (longitude, latitude) of the destination in decimal degrees.
        The longitude is wrapped into [-180, 180] if the path crosses the
        antimeridian.
    """
    theta = math.radians(normalize_bearing(bearing))
    phi1, lambda1 = math.radians(lat), math.radians(lon)
    delta = meters / EARTH_RADIUS_M

    sin_phi2 = (
        math.sin(phi1) * math.cos(delta)
        + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    # Rounding can push the sine just past 1 in magnitude at a pole
    phi2 = math.asin(max(-1.0, min(1.0, sin_phi2)))
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )

    lon2 = math.degrees(lambda2)
    if lon2 < -180 or lon2 > 180:
        lon2 = (lon2 + 540) % 360 - 180

    return lon2, math.degrees(phi2)


class Vector:
    """Distance and initial bearing connecting two points on the sphere."""

    def __init__(self, meters: float, bearing: float):
        """Initializes a Vector.

        Args:
            meters: Great-circle distance in meters.
            bearing: Initial bearing in degrees; stored normalized into [0, 360).
        """
        self.meters = meters
        self.bearing = bearing

    @property
    def bearing(self) -> float:
        """Bearing in degrees, 0..360."""
        return self._bearing

    @bearing.setter
    def bearing(self, bearing: float) -> None:
        self._bearing = normalize_bearing(bearing)

    def __repr__(self) -> str:
        return f"Vector(meters={self.meters!r}, bearing={self.bearing!r})"
