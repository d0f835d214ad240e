import io

import pytest
import gpxpy.gpx

from geojsonkit.geometry import (
    CoordinateRangeError,
    LineString,
    MultiLineString,
    Point,
)
from geojsonkit.gpx import (
    feature_collection_from_file,
    feature_collection_from_gpx,
    path_length,
)

GPX_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">\n'
)
GPX_FOOTER = "</gpx>\n"

SAMPLE_GPX = (
    GPX_HEADER
    + """
  <wpt lat="58.109285" lon="6.5664576">
    <ele>49</ele>
    <name>Lighthouse</name>
    <desc>Lindesnes fyr</desc>
  </wpt>
  <trk>
    <name>Morning ride</name>
    <trkseg>
      <trkpt lat="47.12322" lon="-122.85051"><ele>30.84</ele></trkpt>
      <trkpt lat="47.12308" lon="-122.85048"><ele>30.96</ele></trkpt>
      <trkpt lat="47.12299" lon="-122.85039"><ele>31.15</ele></trkpt>
    </trkseg>
  </trk>
  <trk>
    <name>Split</name>
    <trkseg>
      <trkpt lat="0" lon="0"></trkpt>
      <trkpt lat="0" lon="1"></trkpt>
    </trkseg>
    <trkseg></trkseg>
    <trkseg>
      <trkpt lat="1" lon="0"></trkpt>
      <trkpt lat="1" lon="1"></trkpt>
    </trkseg>
  </trk>
  <trk>
    <name>Empty</name>
  </trk>
  <rte>
    <name>Planned</name>
    <rtept lat="25.489981" lon="-80.379414"></rtept>
    <rtept lat="25.320653" lon="-80.279153"></rtept>
  </rte>
"""
    + GPX_FOOTER
)


@pytest.fixture
def collection():
    return feature_collection_from_gpx(io.StringIO(SAMPLE_GPX))


def test_feature_order_and_count(collection):
    titles = [feature.title for feature in collection]
    assert titles == ["Lighthouse", "Morning ride", "Split", "Planned"]


def test_waypoint_feature(collection):
    waypoint = collection[0]
    assert waypoint.to_json() == {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [6.5664576, 58.109285, 49.0]},
        "properties": {"title": "Lighthouse", "description": "Lindesnes fyr"},
    }


def test_single_segment_track_is_line_string(collection):
    track = collection[1]
    assert isinstance(track.geometry, LineString)
    assert track.geometry.coordinates == [
        [-122.85051, 47.12322, 30.84],
        [-122.85048, 47.12308, 30.96],
        [-122.85039, 47.12299, 31.15],
    ]
    assert "description" not in track.properties


def test_multi_segment_track_skips_empty_segments(collection):
    track = collection[2]
    assert isinstance(track.geometry, MultiLineString)
    assert track.geometry.coordinates == [[[0, 0], [1, 0]], [[0, 1], [1, 1]]]
    # Two one-degree arcs along the equator and the 1st parallel
    assert track.properties["length_m"] == pytest.approx(222_373, rel=1e-3)


def test_route_feature(collection):
    route = collection[3]
    assert isinstance(route.geometry, LineString)
    assert round(route.properties["length_m"]) == 21352


def test_track_length_property(collection):
    expected = path_length(collection[1].geometry)
    assert collection[1].properties["length_m"] == expected
    assert 20 < expected < 40


def test_path_length_short_lines():
    assert path_length(LineString([])) == 0.0
    assert path_length(LineString([Point(5, 5)])) == 0.0


def test_empty_gpx():
    collection = feature_collection_from_gpx(io.StringIO(GPX_HEADER + GPX_FOOTER))
    assert len(collection) == 0
    assert collection.to_json() == {"type": "FeatureCollection", "features": []}


def test_invalid_gpx_raises():
    with pytest.raises(gpxpy.gpx.GPXException):
        feature_collection_from_gpx(io.StringIO("this is not gpx"))


def test_out_of_range_point_raises():
    bad = GPX_HEADER + '<wpt lat="95" lon="0"><name>Nowhere</name></wpt>' + GPX_FOOTER
    with pytest.raises((CoordinateRangeError, gpxpy.gpx.GPXException)):
        feature_collection_from_gpx(io.StringIO(bad))


def test_from_file(tmp_path):
    path = tmp_path / "sample.gpx"
    path.write_text(SAMPLE_GPX, encoding="utf-8")
    assert len(feature_collection_from_file(str(path))) == 4


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        feature_collection_from_file(str(tmp_path / "missing.gpx"))
