"""Tests for coordinate extraction — points, routes, track segments, elevation."""

import math
import xml.etree.ElementTree as ET

import pytest

from geogpx.geometry import (
    coordinate_of,
    extract_coordinates,
    line_coordinates,
    multi_line_coordinates,
    parse_float,
    point_coordinates,
)
from geogpx.models import GeometryKind


TRACK_XML = """\
<trk>
  <name>Morning Patrol</name>
  <trkseg>
    <trkpt lat="37.7749" lon="-122.4194"><ele>10</ele></trkpt>
    <trkpt lat="37.7760" lon="-122.4180"><ele>12</ele></trkpt>
  </trkseg>
  <trkseg/>
</trk>
"""

ROUTE_XML = """\
<rte>
  <name>Supply Route</name>
  <rtept lat="37.7749" lon="-122.4194"/>
  <rtept lat="37.7800" lon="-122.4100"><ele>4.5</ele></rtept>
  <extensions><rtept lat="0" lon="0"/></extensions>
</rte>
"""


class TestParseFloat:
    """Permissive number parsing for attributes and ele text."""

    def test_plain_number(self):
        assert parse_float("-122.4194") == pytest.approx(-122.4194)

    def test_surrounding_whitespace(self):
        assert parse_float("  \n 100.0 \t") == 100.0

    def test_numeric_prefix(self):
        assert parse_float("12.5abc") == 12.5
        assert parse_float("3e2m") == 300.0

    def test_leading_dot_and_sign(self):
        assert parse_float(".5") == 0.5
        assert parse_float("+7") == 7.0

    def test_no_number_is_nan(self):
        assert math.isnan(parse_float("north"))
        assert math.isnan(parse_float(""))
        assert math.isnan(parse_float(None))

    def test_infinity(self):
        assert parse_float("-Infinity") == -math.inf


class TestCoordinateOf:
    """[lng, lat] and [lng, lat, ele] from a point element."""

    def test_lng_lat_order(self):
        """GPX lat/lon attributes become [lng, lat], exactly two values."""
        node = ET.fromstring('<wpt lon="1.5" lat="2.5"/>')
        assert coordinate_of(node) == [1.5, 2.5]

    def test_elevation_from_child(self):
        node = ET.fromstring('<wpt lon="1.5" lat="2.5"><ele>100.0</ele></wpt>')
        assert coordinate_of(node, include_elevation=True) == [1.5, 2.5, 100.0]

    def test_elevation_ignored_when_not_requested(self):
        node = ET.fromstring('<wpt lon="1.5" lat="2.5"><ele>100.0</ele></wpt>')
        assert coordinate_of(node) == [1.5, 2.5]

    def test_missing_elevation_defaults_to_zero(self):
        node = ET.fromstring('<wpt lon="1.5" lat="2.5"><name>x</name></wpt>')
        coord = coordinate_of(node, include_elevation=True)
        assert coord == [1.5, 2.5, 0]

    def test_nested_elevation(self):
        """The first ele descendant counts, even inside extensions."""
        node = ET.fromstring(
            '<wpt lon="1" lat="2"><extensions><x><ele>55</ele></x></extensions>'
            "<ele>10</ele></wpt>"
        )
        assert coordinate_of(node, include_elevation=True) == [1.0, 2.0, 55.0]

    def test_namespaced_elevation(self):
        node = ET.fromstring(
            '<wpt xmlns="http://www.topografix.com/GPX/1/1" lon="1" lat="2">'
            "<ele>8</ele></wpt>"
        )
        assert coordinate_of(node, include_elevation=True) == [1.0, 2.0, 8.0]

    def test_empty_elevation_is_nan(self):
        node = ET.fromstring('<wpt lon="1" lat="2"><ele/></wpt>')
        assert math.isnan(coordinate_of(node, include_elevation=True)[2])

    def test_missing_attributes_are_nan(self):
        """Absent lat/lon is not an error; it degrades to NaN."""
        node = ET.fromstring('<wpt lat="2"/>')
        lng, lat = coordinate_of(node)
        assert math.isnan(lng)
        assert lat == 2.0

    def test_non_numeric_attribute_is_nan(self):
        node = ET.fromstring('<wpt lon="east" lat="north"/>')
        assert all(math.isnan(v) for v in coordinate_of(node))

    def test_no_range_validation(self):
        node = ET.fromstring('<wpt lon="540" lat="-95"/>')
        assert coordinate_of(node) == [540.0, -95.0]


class TestGeometryBuilders:
    """Point, LineString and MultiLineString coordinate arrays."""

    def test_point(self):
        node = ET.fromstring('<wpt lon="3" lat="4"/>')
        assert point_coordinates(node) == [3.0, 4.0]

    def test_route_direct_rtepts_only(self):
        """Only direct rtept children count; ones inside extensions do not."""
        coords = line_coordinates(ET.fromstring(ROUTE_XML))
        assert coords == [
            [pytest.approx(-122.4194), pytest.approx(37.7749)],
            [pytest.approx(-122.41), pytest.approx(37.78)],
        ]

    def test_route_with_elevation(self):
        coords = line_coordinates(ET.fromstring(ROUTE_XML), include_elevation=True)
        assert coords[0][2] == 0
        assert coords[1][2] == 4.5

    def test_empty_route(self):
        assert line_coordinates(ET.fromstring("<rte><name>r</name></rte>")) == []

    def test_track_keeps_empty_segment(self):
        """Two segments, the second empty -> [[c1, c2], []]."""
        coords = multi_line_coordinates(ET.fromstring(TRACK_XML))
        assert len(coords) == 2
        assert len(coords[0]) == 2
        assert coords[1] == []
        assert coords[0][0] == [pytest.approx(-122.4194), pytest.approx(37.7749)]

    def test_track_with_elevation(self):
        coords = multi_line_coordinates(ET.fromstring(TRACK_XML), include_elevation=True)
        assert [c[2] for c in coords[0]] == [10.0, 12.0]

    def test_track_points_nested_in_segment(self):
        """trkpt descendants of a segment are collected in document order."""
        node = ET.fromstring(
            "<trk><trkseg>"
            '<trkpt lon="1" lat="1"/>'
            '<group><trkpt lon="2" lat="2"/></group>'
            '<trkpt lon="3" lat="3"/>'
            "</trkseg></trk>"
        )
        assert multi_line_coordinates(node) == [[[1.0, 1.0], [2.0, 2.0], [3.0, 3.0]]]

    def test_track_without_segments(self):
        assert multi_line_coordinates(ET.fromstring("<trk><name>t</name></trk>")) == []

    def test_extract_coordinates_dispatch(self):
        wpt = ET.fromstring('<wpt lon="3" lat="4"/>')
        trk = ET.fromstring(TRACK_XML)
        assert extract_coordinates(GeometryKind.POINT, wpt) == [3.0, 4.0]
        assert extract_coordinates(GeometryKind.MULTI_LINE_STRING, trk) == \
            multi_line_coordinates(trk)
