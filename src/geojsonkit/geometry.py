#!/usr/bin/env python3
"""
Geometry objects: points, curves and surfaces in WGS 84 coordinate space.

Every geometry derives its ``coordinates`` member from the Points it is built
from, so a Point is the only place where a position is stored and validated.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Optional, Union
import logging
import math

from .base import GeoJSONObject
from .vector import Vector, destination, haversine_distance, initial_bearing

logger = logging.getLogger(__name__)

# [longitude, latitude] or [longitude, latitude, elevation]
Position = List[float]


class CoordinateRangeError(ValueError):
    """Raised when a longitude or latitude is assigned outside its valid range."""


class Geometry(GeoJSONObject):
    """A GeoJSON object carrying a ``coordinates`` member."""

    @property
    @abstractmethod
    def coordinates(self) -> Any:
        """Nested position arrays for this geometry."""

    def _json_members(self) -> Dict[str, Any]:
        return {"coordinates": self.coordinates}


class Point(Geometry):
    """For type "Point", the "coordinates" member is a single position."""

    geojson_type = "Point"

    def __init__(
        self, longitude: float, latitude: float, elevation: Optional[float] = None
    ):
        """Initializes a Point.

        A NaN longitude or latitude is not out of range and is stored as given.

        Args:
            longitude: Easting in decimal degrees, -180..180.
            latitude: Northing in decimal degrees, -90..90.
            elevation: Height in meters above or below the WGS 84 ellipsoid.

        Raises:
            CoordinateRangeError: If longitude or latitude is out of range.
        """
        super().__init__()
        self.longitude = longitude
        self.latitude = latitude
        self.elevation = elevation

    @property
    def longitude(self) -> float:
        return self._longitude

    @longitude.setter
    def longitude(self, longitude: float) -> None:
        if longitude < -180 or longitude > 180:
            logger.debug(f"Rejected longitude {longitude}")
            raise CoordinateRangeError("Longitude needs to be -180..180")
        self._longitude = longitude

    @property
    def latitude(self) -> float:
        return self._latitude

    @latitude.setter
    def latitude(self, latitude: float) -> None:
        if latitude < -90 or latitude > 90:
            logger.debug(f"Rejected latitude {latitude}")
            raise CoordinateRangeError("Latitude needs to be -90..90")
        self._latitude = latitude

    @property
    def coordinates(self) -> Position:
        if self.elevation is None or math.isnan(self.elevation):
            return [self.longitude, self.latitude]
        return [self.longitude, self.latitude, self.elevation]

    def get_vector_to(self, other: "Point") -> Vector:
        """
        Calculate the great-circle distance and initial bearing to another point.

        Args:
            other: Destination point

        Returns:
            Vector with distance in meters and bearing in degrees [0, 360)
        """
        return Vector(
            haversine_distance(
                self.longitude, self.latitude, other.longitude, other.latitude
            ),
            initial_bearing(
                self.longitude, self.latitude, other.longitude, other.latitude
            ),
        )

    def get_point_by(self, vector: Vector) -> "Point":
        """
        Find the point reached by travelling along a vector from this point.

        Args:
            vector: Distance and initial bearing to travel

        Returns:
            New Point at the destination, keeping this point's elevation
        """
        longitude, latitude = destination(
            self.longitude, self.latitude, vector.meters, vector.bearing
        )
        return Point(longitude, latitude, self.elevation)

    def __repr__(self) -> str:
        return (
            f"Point(longitude={self.longitude!r}, latitude={self.latitude!r}, "
            f"elevation={self.elevation!r})"
        )


class MultiPoint(Geometry):
    """For type "MultiPoint", the "coordinates" member is an array of positions."""

    geojson_type = "MultiPoint"

    def __init__(self, points: Optional[List[Point]] = None):
        super().__init__()
        self.points: List[Point] = points if points is not None else []

    @property
    def coordinates(self) -> List[Position]:
        return [point.coordinates for point in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]


class LineString(MultiPoint):
    """
    For type "LineString", the "coordinates" member is an array of two or
    more positions. The minimum length is left to the caller.
    """

    geojson_type = "LineString"


class Polygon(MultiPoint):
    """
    A single linear ring.

    The first and last positions of a ring MUST be identical, and exterior
    rings are counterclockwise. Neither rule is checked here.
    """

    geojson_type = "Polygon"

    def _geo_interface_members(self) -> Dict[str, Any]:
        return {"coordinates": [self.coordinates]}


class MultiLineString(Geometry):
    """For type "MultiLineString", the "coordinates" member is an array of
    LineString coordinate arrays."""

    geojson_type = "MultiLineString"

    def __init__(self, line_strings: Optional[List[LineString]] = None):
        super().__init__()
        self.line_strings: List[LineString] = (
            line_strings if line_strings is not None else []
        )

    @property
    def coordinates(self) -> List[List[Position]]:
        return [line_string.coordinates for line_string in self.line_strings]


class MultiPolygon(Geometry):
    """For type "MultiPolygon", the "coordinates" member is an array of
    Polygon coordinate arrays."""

    geojson_type = "MultiPolygon"

    def __init__(self, polygons: Optional[List[Polygon]] = None):
        super().__init__()
        self.polygons: List[Polygon] = polygons if polygons is not None else []

    @property
    def coordinates(self) -> List[List[Position]]:
        return [polygon.coordinates for polygon in self.polygons]

    def _geo_interface_members(self) -> Dict[str, Any]:
        return {"coordinates": [[ring] for ring in self.coordinates]}


class GeometryCollection(GeoJSONObject):
    """A heterogeneous composition of smaller Geometry objects."""

    geojson_type = "GeometryCollection"

    def __init__(self, geometries: Optional[List[Geometry]] = None):
        super().__init__()
        self.geometries: List[Geometry] = (
            geometries if geometries is not None else []
        )

    def _json_members(self) -> Dict[str, Any]:
        return {"geometries": [geometry.to_json() for geometry in self.geometries]}

    def _geo_interface_members(self) -> Dict[str, Any]:
        return {
            "geometries": [
                geometry.__geo_interface__ for geometry in self.geometries
            ]
        }


AnyGeometry = Union[Geometry, GeometryCollection]
