"""GPX to GeoJSON conversion.

Reads GPX 1.0/1.1 documents (waypoints, tracks, routes) and produces GeoJSON
FeatureCollections (RFC 7946). Uses xml.etree.ElementTree for parsing.
"""

from geogpx.config import Settings, get_settings
from geogpx.converter import GpxConverter
from geogpx.errors import GeoGpxError, ParseError
from geogpx.features import (
    build_feature,
    convert,
    extract_properties,
    gpx_to_geojson,
    to_geojson,
)
from geogpx.geometry import coordinate_of
from geogpx.models import GeometryKind, GpxDocument, dumps
from geogpx.reader import read, read_file

__all__ = [
    "GeoGpxError",
    "GeometryKind",
    "GpxConverter",
    "GpxDocument",
    "ParseError",
    "Settings",
    "build_feature",
    "convert",
    "coordinate_of",
    "dumps",
    "extract_properties",
    "get_settings",
    "gpx_to_geojson",
    "read",
    "read_file",
    "to_geojson",
]
