"""Assemble GeoJSON Features and FeatureCollections from a GpxDocument.

Each root-level wpt, rte and trk becomes one Feature, in document order:

    wpt -> Point
    rte -> LineString
    trk -> MultiLineString

Other root children (metadata, extensions, ...) are skipped. Properties come
from the element's direct children; vendor fields under <extensions> are
flattened in with a prefix so they cannot shadow standard GPX tags.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections import Counter

from loguru import logger

from geogpx.config import get_settings
from geogpx.geometry import extract_coordinates
from geogpx.models import (
    SOURCE_TAGS,
    GeometryKind,
    GpxDocument,
    child_elements,
    first_descendant,
    local_name,
    text_content,
)
from geogpx.reader import read

_EXTENSIONS = "extensions"


def extract_properties(
    node: ET.Element, extension_prefix: str | None = None
) -> dict[str, str]:
    """Flatten an element's direct children into a property dict.

    Args:
        node: A wpt, rte or trk element.
        extension_prefix: Prefix for keys taken from the first <extensions>
            element anywhere below ``node`` (for a track this is usually
            the one inside its first trkpt). Defaults to
            ``Settings.extension_prefix``.

    Returns:
        Dict of tag name -> text content. Repeated tags keep the last value.
    """
    if extension_prefix is None:
        extension_prefix = get_settings().extension_prefix

    props: dict[str, str] = {}
    for child in child_elements(node):
        name = local_name(child.tag)
        if name != _EXTENSIONS:
            props[name] = text_content(child)

    extensions = first_descendant(node, _EXTENSIONS)
    if extensions is not None:
        for ext in child_elements(extensions):
            props[f"{extension_prefix}{local_name(ext.tag)}"] = text_content(ext)

    return props


def build_feature(
    kind: GeometryKind | str, coordinates: list, properties: dict[str, str]
) -> dict:
    """Wrap a geometry and its properties in a GeoJSON Feature dict."""
    geometry_type = GeometryKind(kind).value
    return {
        "type": "Feature",
        "geometry": {
            "type": geometry_type,
            "coordinates": coordinates,
        },
        "properties": properties,
    }


def to_geojson(
    document: GpxDocument,
    include_elevation: bool = False,
    extension_prefix: str | None = None,
) -> dict:
    """Convert a parsed GPX document to a GeoJSON FeatureCollection dict.

    Args:
        document: Result of ``geogpx.read``.
        include_elevation: Emit [lng, lat, ele] coordinates.
        extension_prefix: Overrides the configured extensions prefix.

    Returns:
        Dict representing a GeoJSON FeatureCollection.

    Raises:
        TypeError: If ``document`` is not a GpxDocument.
    """
    if not isinstance(document, GpxDocument):
        raise TypeError(
            f"Expected GpxDocument, got {type(document).__name__}"
        )

    features = []
    counts: Counter[str] = Counter()
    for child in child_elements(document.root):
        name = local_name(child.tag)
        kind = SOURCE_TAGS.get(name)
        if kind is None:
            logger.debug(f"Skipping <{name}> at GPX root")
            continue
        coordinates = extract_coordinates(kind, child, include_elevation)
        properties = extract_properties(child, extension_prefix)
        features.append(build_feature(kind, coordinates, properties))
        counts[kind.value] += 1

    logger.debug(f"Converted GPX to {len(features)} features: {dict(counts)}")
    return {
        "type": "FeatureCollection",
        "features": features,
    }


# Alias for to_geojson
convert = to_geojson


def gpx_to_geojson(
    gpx_text: str | bytes,
    include_elevation: bool = False,
    extension_prefix: str | None = None,
) -> dict:
    """Read GPX text and convert it in one call.

    Raises:
        ParseError: If the text is not well-formed XML.
    """
    return to_geojson(read(gpx_text), include_elevation, extension_prefix)
