"""Build GeoJSON coordinate arrays from GPX point elements.

GPX carries latitude/longitude as attributes (latitude first); output is
always [lng, lat] or [lng, lat, ele]. Coordinates are not validated: a
missing or non-numeric attribute becomes NaN and flows into the output.
"""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET

from geogpx.models import (
    GeometryKind,
    child_elements,
    descendants,
    first_descendant,
    text_content,
)

# Longest numeric prefix, after leading whitespace
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_float(text: str | None) -> float:
    """Permissive float parse.

    Leading whitespace is skipped and the longest numeric prefix is used, so
    ``"12.5abc"`` gives 12.5. Text without a numeric prefix (or None) gives
    NaN instead of raising.
    """
    if text is None:
        return math.nan
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def coordinate_of(node: ET.Element, include_elevation: bool = False) -> list[float]:
    """Extract [lng, lat] or [lng, lat, ele] from a point element.

    Args:
        node: Element with ``lat``/``lon`` attributes (wpt, trkpt, rtept).
        include_elevation: Append elevation from the first ``ele``
            descendant. A missing ``ele`` gives 0, not NaN.

    Returns:
        Coordinate list.
    """
    coord = [parse_float(node.get("lon")), parse_float(node.get("lat"))]
    if include_elevation:
        ele = first_descendant(node, "ele")
        coord.append(parse_float(text_content(ele)) if ele is not None else 0)
    return coord


def point_coordinates(wpt: ET.Element, include_elevation: bool = False) -> list[float]:
    """Coordinates for a waypoint Point."""
    return coordinate_of(wpt, include_elevation)


def line_coordinates(
    rte: ET.Element, include_elevation: bool = False
) -> list[list[float]]:
    """Coordinates for a route LineString, one per direct rtept child."""
    return [
        coordinate_of(rtept, include_elevation)
        for rtept in child_elements(rte, "rtept")
    ]


def multi_line_coordinates(
    trk: ET.Element, include_elevation: bool = False
) -> list[list[list[float]]]:
    """Coordinates for a track MultiLineString.

    Each trkseg child becomes one line holding every trkpt beneath it.
    Segments without points stay in the output as empty lines.
    """
    return [
        [coordinate_of(trkpt, include_elevation) for trkpt in descendants(seg, "trkpt")]
        for seg in child_elements(trk, "trkseg")
    ]


_BUILDERS = {
    GeometryKind.POINT: point_coordinates,
    GeometryKind.LINE_STRING: line_coordinates,
    GeometryKind.MULTI_LINE_STRING: multi_line_coordinates,
}


def extract_coordinates(
    kind: GeometryKind, node: ET.Element, include_elevation: bool = False
) -> list:
    """Build the coordinate array for a geometry kind."""
    return _BUILDERS[kind](node, include_elevation)
