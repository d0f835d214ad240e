#!/usr/bin/env python3
"""
GeoJSON Kit - A typed GeoJSON object model with great-circle navigation.

This package provides Point, LineString, Polygon and the other GeoJSON
geometries, Features and FeatureCollections that project themselves to
GeoJSON, and distance/bearing calculations between points on a sphere.
"""
import importlib.metadata

__version__ = importlib.metadata.version("geojsonkit")

# Import main classes for public API
from .base import BoundingBox, GeoJSONObject, JSONValue
from .geometry import (
    CoordinateRangeError,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .feature import Feature, FeatureCollection
from .vector import EARTH_RADIUS_M, Vector
from .serialization import dump, dumps, to_shapely

__all__ = [
    "BoundingBox",
    "GeoJSONObject",
    "JSONValue",
    "CoordinateRangeError",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "Feature",
    "FeatureCollection",
    "EARTH_RADIUS_M",
    "Vector",
    "dump",
    "dumps",
    "to_shapely",
]
