#!/usr/bin/env python3
"""
Feature collection visualization using folium maps.
"""

from typing import Iterator, List, Tuple
import logging
import folium

from .base import GeoJSONObject
from .feature import FeatureCollection
from .geometry import Geometry, GeometryCollection

logger = logging.getLogger(__name__)


CARTO_ATTRIBUTION = (
    "&copy; <a href='https://www.openstreetmap.org/copyright'>OpenStreetMap</a> "
    "contributors &copy; <a href='https://carto.com/attributions'>CARTO</a>"
)
ESRI_IMAGERY_URL = (
    "https://server.arcgisonline.com/ArcGIS/rest/services/"
    "World_Imagery/MapServer/tile/{z}/{y}/{x}"
)
ESRI_ATTRIBUTION = (
    "Tiles &copy; Esri &mdash; Source: Esri, i-cubed, USDA, USGS, AEX, GeoEye, "
    "Getmapping, Aerogrid, IGN, IGP, UPR-EGP, and the GIS User Community"
)

# (layer name, tiles, attribution); the first one is shown initially
BASE_LAYERS = (
    ("Standard", "CartoDB positron", CARTO_ATTRIBUTION),
    ("Satellite", ESRI_IMAGERY_URL, ESRI_ATTRIBUTION),
)


def _add_base_layers(feature_map: folium.Map) -> None:
    for index, (name, tiles, attribution) in enumerate(BASE_LAYERS):
        folium.TileLayer(
            tiles=tiles,
            attr=attribution,
            name=name,
            control=True,
            show=index == 0,
        ).add_to(feature_map)


def _iter_positions(geometry: GeoJSONObject) -> Iterator[List[float]]:
    if isinstance(geometry, GeometryCollection):
        for child in geometry.geometries:
            yield from _iter_positions(child)
        return
    if not isinstance(geometry, Geometry):
        return

    coordinates = geometry.coordinates
    # Descend until the innermost [lon, lat(, elev)] arrays
    stack = [coordinates]
    while stack:
        item = stack.pop()
        if item and not isinstance(item[0], list):
            yield item
        else:
            stack.extend(item)


def collection_extent(
    collection: FeatureCollection,
) -> Tuple[float, float, float, float]:
    """
    Calculate the extent of all positions in a collection, for display.

    Args:
        collection: FeatureCollection to measure

    Returns:
        Tuple of (south, west, north, east) in decimal degrees

    Raises:
        ValueError: If the collection contains no positions
    """
    longitudes: List[float] = []
    latitudes: List[float] = []
    for feature in collection:
        if feature.geometry is None:
            continue
        for position in _iter_positions(feature.geometry):
            longitudes.append(position[0])
            latitudes.append(position[1])

    if not longitudes:
        raise ValueError("Feature collection has no positions")

    return (min(latitudes), min(longitudes), max(latitudes), max(longitudes))


def create_feature_map(collection: FeatureCollection, output_filename: str) -> None:
    """
    Create an interactive map showing every feature in a collection, save as HTML.

    The map is fitted to the collection's own bbox when the caller has set
    one, otherwise to the extent of its positions.

    Args:
        collection: FeatureCollection to display
        output_filename: Path where HTML map file should be saved

    Raises:
        ValueError: If the collection is empty or has no positions
    """
    if not collection:
        raise ValueError("Cannot create map for empty feature collection")

    bbox = collection.bbox
    if bbox is not None:
        if len(bbox) == 6:
            west, south, _, east, north, _ = bbox
        else:
            west, south, east, north = bbox
    else:
        south, west, north, east = collection_extent(collection)

    center_lat = (south + north) / 2
    center_lon = (west + east) / 2

    logger.debug(f"Creating map centered at ({center_lat:.4f}, {center_lon:.4f})")

    feature_map = folium.Map(
        location=[center_lat, center_lon],
        tiles=None,
    )

    _add_base_layers(feature_map)

    has_titles = all(feature.title for feature in collection)
    folium.GeoJson(
        collection.__geo_interface__,
        name="Features",
        style_function=lambda _: {"color": "#2E86AB", "weight": 3, "opacity": 0.8},
        tooltip=(
            folium.GeoJsonTooltip(fields=["title"], labels=False)
            if has_titles
            else None
        ),
    ).add_to(feature_map)

    folium.LayerControl().add_to(feature_map)

    # Southwest corner, northeast corner
    feature_map.fit_bounds([[south, west], [north, east]])

    feature_map.save(output_filename)

    logger.debug(f"Map saved to {output_filename} with {len(collection)} features")
