#!/usr/bin/env python3
"""
Build GeoJSON features from GPX waypoints, tracks and routes.
"""

from typing import List, Optional, TextIO
import logging

import gpxpy
import gpxpy.gpx

from .feature import Feature, FeatureCollection
from .geometry import LineString, MultiLineString, MultiPoint, Point

logger = logging.getLogger(__name__)


def path_length(line: MultiPoint) -> float:
    """
    Calculate the great-circle length along consecutive points.

    Args:
        line: LineString (or any MultiPoint-shaped geometry)

    Returns:
        Length in meters; 0.0 for fewer than two points
    """
    return sum(
        line.points[i - 1].get_vector_to(line.points[i]).meters
        for i in range(1, len(line.points))
    )


def _to_point(gpx_point: gpxpy.gpx.GPXWaypoint) -> Point:
    return Point(gpx_point.longitude, gpx_point.latitude, gpx_point.elevation)


def _line_from_points(points) -> Optional[LineString]:
    if not points:
        return None
    return LineString([_to_point(point) for point in points])


def _track_feature(track: gpxpy.gpx.GPXTrack) -> Optional[Feature]:
    lines: List[LineString] = []
    for segment in track.segments:
        line = _line_from_points(segment.points)
        if line is None:
            logger.debug(f"Skipping empty segment in track {track.name!r}")
            continue
        lines.append(line)

    if not lines:
        logger.debug(f"Skipping track {track.name!r} without points")
        return None

    geometry = lines[0] if len(lines) == 1 else MultiLineString(lines)
    feature = Feature(geometry)
    feature.title = track.name
    feature.description = track.description
    feature.set_property("length_m", sum(path_length(line) for line in lines))
    return feature


def _route_feature(route: gpxpy.gpx.GPXRoute) -> Optional[Feature]:
    line = _line_from_points(route.points)
    if line is None:
        logger.debug(f"Skipping route {route.name!r} without points")
        return None

    feature = Feature(line)
    feature.title = route.name
    feature.description = route.description
    feature.set_property("length_m", path_length(line))
    return feature


def feature_collection_from_gpx(file_input: TextIO) -> FeatureCollection:
    """
    Parse GPX data into a FeatureCollection.

    Waypoints become Point features, tracks become LineString features (or
    MultiLineString features when they have several segments), and routes
    become LineString features.

    Args:
        file_input: File-like object containing GPX data

    Returns:
        FeatureCollection with waypoints first, then tracks, then routes

    Raises:
        CoordinateRangeError: If a GPX point is outside the valid range.
        gpxpy.gpx.GPXException: If GPX data is malformed.
    """
    gpx_data = gpxpy.parse(file_input)

    collection = FeatureCollection()

    for waypoint in gpx_data.waypoints:
        feature = Feature.create_with_point(
            waypoint.longitude,
            waypoint.latitude,
            waypoint.elevation,
            title=waypoint.name,
        )
        feature.description = waypoint.description
        collection.add_feature(feature)

    for track in gpx_data.tracks:
        feature = _track_feature(track)
        if feature is not None:
            collection.add_feature(feature)

    for route in gpx_data.routes:
        feature = _route_feature(route)
        if feature is not None:
            collection.add_feature(feature)

    logger.debug(
        f"Parsed {len(gpx_data.waypoints)} waypoints, {len(gpx_data.tracks)} tracks "
        f"and {len(gpx_data.routes)} routes into {len(collection)} features"
    )

    return collection


def feature_collection_from_file(filename: str) -> FeatureCollection:
    """
    Load and parse a GPX file into a FeatureCollection.

    Args:
        filename: Path to GPX file

    Returns:
        FeatureCollection built from the file

    Raises:
        FileNotFoundError: If file doesn't exist.
        PermissionError: If file can't be read.
        CoordinateRangeError: If a GPX point is outside the valid range.
        gpxpy.gpx.GPXException: If GPX file is malformed.
    """
    logger.debug(f"Reading GPX file: {filename}")
    with open(filename, "r", encoding="utf-8") as f:
        return feature_collection_from_gpx(f)
