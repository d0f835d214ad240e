"""
Shared base for every GeoJSON object: the bounding box holder and the
JSON projection that all geometries, features and collections extend.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Optional, Union

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]


@dataclass
class BoundingBox:
    """
    Extents of a GeoJSON object as set by the caller.

    The values are stored verbatim; no ordering or min/max check is applied,
    and nothing in this package fills them in from contained coordinates.
    """

    west: Optional[float] = None
    south: Optional[float] = None
    low: Optional[float] = None
    east: Optional[float] = None
    north: Optional[float] = None
    high: Optional[float] = None

    def as_list(self) -> Optional[List[float]]:
        """
        Build the public ``bbox`` array.

        Returns:
            None unless west, south, east and north are all set. Otherwise
            ``[west, south, east, north]``, or
            ``[west, south, low, east, north, high]`` when both low and high
            are set as well.
        """
        if (
            self.west is None
            or self.south is None
            or self.east is None
            or self.north is None
        ):
            return None

        if self.low is None or self.high is None:
            return [self.west, self.south, self.east, self.north]

        return [self.west, self.south, self.low, self.east, self.north, self.high]


class GeoJSONObject(ABC):
    """A Geometry, Feature, or collection of Features."""

    geojson_type: ClassVar[str]

    def __init__(self) -> None:
        self.bounding_box = BoundingBox()

    @property
    def bbox(self) -> Optional[List[float]]:
        """Bounding box array, or None when the extents are incomplete."""
        return self.bounding_box.as_list()

    @abstractmethod
    def _json_members(self) -> Dict[str, Any]:
        """Members this variant adds to the base ``type``/``bbox`` fields."""

    def _geo_interface_members(self) -> Dict[str, Any]:
        """Members for ``__geo_interface__``; the JSON members unless overridden."""
        return self._json_members()

    def _with_base_fields(self, members: Dict[str, Any]) -> Dict[str, Any]:
        json_dict: Dict[str, Any] = {"type": self.geojson_type}

        bbox = self.bbox
        if bbox is not None:
            json_dict["bbox"] = bbox

        json_dict.update(members)
        return json_dict

    def to_json(self) -> Dict[str, Any]:
        """
        Project this object to its GeoJSON mapping.

        Returns:
            Plain dict ready for ``json.dumps``: ``type``, ``bbox`` when set,
            then the variant's own members.
        """
        return self._with_base_fields(self._json_members())

    @property
    def __geo_interface__(self) -> Dict[str, Any]:
        """
        Mapping in the layout Shapely, folium and other geo-interface
        consumers expect.

        Identical to ``to_json()`` except that each Polygon ring is wrapped
        as the single shell of a polygon.
        """
        return self._with_base_fields(self._geo_interface_members())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GeoJSONObject):
            return NotImplemented
        return self.to_json() == other.to_json()

    __hash__ = None  # type: ignore[assignment]
