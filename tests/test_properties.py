import json

import pytest
from hypothesis import HealthCheck, assume, given, settings, strategies as st

from geojsonkit.feature import Feature
from geojsonkit.geometry import CoordinateRangeError, LineString, Point
from geojsonkit.vector import Vector, normalize_bearing

valid_lon = st.floats(-180.0, 180.0)
valid_lat = st.floats(-90.0, 90.0)
elevation = st.one_of(st.none(), st.floats(-500.0, 9000.0))
valid_point = st.builds(Point, longitude=valid_lon, latitude=valid_lat, elevation=elevation)

# Keep clear of the poles for navigation round trips
navigable_point = st.builds(
    Point, longitude=st.floats(-170.0, 170.0), latitude=st.floats(-80.0, 80.0)
)

json_scalar = st.one_of(
    st.booleans(),
    st.integers(-(10**6), 10**6),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=10),
)


class TestPointProperties:
    @given(valid_lon, valid_lat)
    def test_valid_coordinates_read_back_exactly(self, longitude, latitude):
        point = Point(longitude, latitude)
        assert point.longitude == longitude
        assert point.latitude == latitude

    @given(
        st.one_of(
            st.floats(max_value=-180.0, exclude_max=True, allow_nan=False),
            st.floats(min_value=180.0, exclude_min=True, allow_nan=False),
        )
    )
    def test_out_of_range_longitude_rejected(self, longitude):
        with pytest.raises(CoordinateRangeError):
            Point(longitude, 0)

    @given(
        st.one_of(
            st.floats(max_value=-90.0, exclude_max=True, allow_nan=False),
            st.floats(min_value=90.0, exclude_min=True, allow_nan=False),
        )
    )
    def test_out_of_range_latitude_rejected(self, latitude):
        with pytest.raises(CoordinateRangeError):
            Point(0, latitude)

    @given(valid_point)
    def test_json_round_trip_preserves_coordinates(self, point):
        projected = json.loads(json.dumps(point.to_json()))
        assert projected["type"] == "Point"
        assert projected["coordinates"] == point.coordinates
        expected_length = 2 if point.elevation is None else 3
        assert len(projected["coordinates"]) == expected_length

    @given(st.lists(valid_point, max_size=8))
    def test_line_string_coordinates_follow_points(self, points):
        line = LineString(points)
        projected = json.loads(json.dumps(line.to_json()))
        assert projected["coordinates"] == [point.coordinates for point in points]


class TestNavigationProperties:
    @given(navigable_point, navigable_point)
    def test_vector_is_non_negative_with_normalized_bearing(self, start, end):
        vector = start.get_vector_to(end)
        assert vector.meters >= 0
        assert 0 <= vector.bearing < 360

    @given(navigable_point, navigable_point)
    def test_distance_is_symmetric(self, start, end):
        forward = start.get_vector_to(end).meters
        backward = end.get_vector_to(start).meters
        assert forward == pytest.approx(backward, abs=1e-6)

    @given(navigable_point, navigable_point)
    @settings(suppress_health_check=[HealthCheck.filter_too_much])
    def test_point_by_inverts_vector_to(self, start, end):
        vector = start.get_vector_to(end)
        assume(1.0 < vector.meters < 5_000_000)

        reached = start.get_point_by(vector)

        assert reached.get_vector_to(end).meters < 0.01

    @given(st.floats(-1e6, 1e6))
    def test_bearing_always_in_range(self, bearing):
        assert 0 <= Vector(0, bearing).bearing < 360
        assert 0 <= normalize_bearing(bearing) < 360

    @given(st.floats(0, 359.999))
    def test_bearing_in_range_unchanged(self, bearing):
        assert Vector(0, bearing).bearing == bearing


class TestFeatureProperties:
    @given(st.dictionaries(st.text(max_size=5), json_scalar, max_size=5), st.text(max_size=5))
    def test_set_property_none_never_stores_null(self, properties, key):
        feature = Feature(Point(0, 0), dict(properties))
        feature.set_property(key, None)
        assert key not in feature.properties
        assert None not in feature.properties.values()

    @given(st.text(max_size=5), json_scalar)
    def test_set_property_value_overwrites(self, key, value):
        feature = Feature(Point(0, 0), {key: "old"})
        feature.set_property(key, value)
        assert feature.properties[key] == value
