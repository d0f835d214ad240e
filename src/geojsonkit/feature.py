#!/usr/bin/env python3
"""
Features and feature collections.

Property keys follow the simplestyle spec where they overlap with it
(``title``, ``description``, ``marker-symbol``, ``marker-color``, ``stroke``,
``fill``); any other JSON-compatible value is accepted as well.
See https://github.com/mapbox/simplestyle-spec/blob/master/1.1.0/README.md
"""

from typing import Any, Dict, Iterator, List, Optional, Union

from .base import GeoJSONObject, JSONValue
from .geometry import AnyGeometry, Point

FeatureId = Union[str, int, float]


class Feature(GeoJSONObject):
    """A spatially bounded thing."""

    geojson_type = "Feature"

    def __init__(
        self,
        geometry: Optional[AnyGeometry] = None,
        properties: Optional[Dict[str, JSONValue]] = None,
        id: Optional[FeatureId] = None,
    ):
        """Initializes a Feature.

        Args:
            geometry: Geometry or GeometryCollection owned by this feature.
            properties: Free-form JSON-compatible properties.
            id: Optional string or numeric identifier.
        """
        super().__init__()
        self.geometry = geometry
        self.properties: Dict[str, JSONValue] = (
            properties if properties is not None else {}
        )
        self.id = id

    def set_property(self, key: str, value: JSONValue) -> None:
        """
        Set ``properties[key]``, or remove the key when ``value`` is None.

        Args:
            key: Property name
            value: Any JSON-compatible value; None deletes the property
        """
        if value is None:
            self.properties.pop(key, None)
            return
        self.properties[key] = value

    @property
    def title(self) -> Optional[str]:
        return self.properties.get("title")  # type: ignore[return-value]

    @title.setter
    def title(self, title: Optional[str]) -> None:
        self.set_property("title", title)

    @property
    def description(self) -> Optional[str]:
        return self.properties.get("description")  # type: ignore[return-value]

    @description.setter
    def description(self, description: Optional[str]) -> None:
        self.set_property("description", description)

    def _json_members(self) -> Dict[str, Any]:
        members: Dict[str, Any] = {
            "geometry": self.geometry.to_json() if self.geometry is not None else None
        }
        if self.id is not None:
            members["id"] = self.id
        if self.properties:
            members["properties"] = dict(self.properties)
        return members

    def _geo_interface_members(self) -> Dict[str, Any]:
        # Consumers such as folium look up properties on every feature
        members: Dict[str, Any] = {
            "geometry": (
                self.geometry.__geo_interface__ if self.geometry is not None else None
            ),
            "properties": dict(self.properties),
        }
        if self.id is not None:
            members["id"] = self.id
        return members

    @classmethod
    def create_with_point(
        cls,
        longitude: float,
        latitude: float,
        elevation: Optional[float] = None,
        title: Optional[str] = None,
        id: Optional[FeatureId] = None,
    ) -> "Feature":
        """
        Create a Feature with a Point geometry.

        Args:
            longitude: Easting in decimal degrees, -180..180
            latitude: Northing in decimal degrees, -90..90
            elevation: Height in meters above or below the WGS 84 ellipsoid
            title: Value for ``properties["title"]``; None leaves it unset
            id: Feature identifier

        Returns:
            Feature built from the given parameters

        Raises:
            CoordinateRangeError: If longitude or latitude is out of range.
        """
        feature = cls(Point(longitude, latitude, elevation), {}, id)
        feature.title = title
        return feature


class FeatureCollection(GeoJSONObject):
    """An ordered collection of Features."""

    geojson_type = "FeatureCollection"

    def __init__(self, features: Optional[List[Feature]] = None):
        super().__init__()
        self.features: List[Feature] = features if features is not None else []

    def add_feature(self, feature: Feature) -> None:
        """Append a feature; ids are not checked for uniqueness."""
        self.features.append(feature)

    def _json_members(self) -> Dict[str, Any]:
        return {"features": [feature.to_json() for feature in self.features]}

    def _geo_interface_members(self) -> Dict[str, Any]:
        return {"features": [feature.__geo_interface__ for feature in self.features]}

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __getitem__(self, index):
        return self.features[index]
