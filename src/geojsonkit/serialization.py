"""
Helpers for writing GeoJSON objects as JSON text and handing geometries to
Shapely.
"""

from typing import Any, IO
import json
import logging

from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from .base import GeoJSONObject
from .geometry import AnyGeometry

logger = logging.getLogger(__name__)


def _default(obj: Any) -> Any:
    if isinstance(obj, GeoJSONObject):
        return obj.to_json()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(obj: GeoJSONObject, **kwargs: Any) -> str:
    """
    Serialize a GeoJSON object tree to a JSON string.

    Args:
        obj: Any GeoJSON object
        **kwargs: Passed through to ``json.dumps`` (e.g. ``indent``)

    Returns:
        JSON text
    """
    return json.dumps(obj, default=_default, **kwargs)


def dump(obj: GeoJSONObject, fp: IO[str], **kwargs: Any) -> None:
    """Serialize a GeoJSON object tree to a writable text file object."""
    json.dump(obj, fp, default=_default, **kwargs)


def write_file(obj: GeoJSONObject, filename: str, indent: int = 2) -> None:
    """
    Write a GeoJSON object tree to a UTF-8 file.

    Args:
        obj: Any GeoJSON object
        filename: Destination path
        indent: JSON indentation; 0 writes compact output

    Raises:
        PermissionError: If the file can't be written.
    """
    logger.debug(f"Writing {obj.geojson_type} to {filename}")
    with open(filename, "w", encoding="utf-8") as f:
        dump(obj, f, indent=indent or None, ensure_ascii=False)
        f.write("\n")


def to_shapely(geometry: AnyGeometry) -> BaseGeometry:
    """
    Convert a geometry into the equivalent Shapely geometry.

    Polygons in this model are a single ring, so the ring becomes the
    exterior shell of the Shapely polygon.

    Args:
        geometry: Geometry or GeometryCollection

    Returns:
        Shapely geometry in longitude/latitude coordinates

    Raises:
        ValueError: If Shapely rejects the coordinates, e.g. a ring with
            fewer than three positions.
    """
    return shape(geometry.__geo_interface__)
