"""Data model for GPX input and GeoJSON output.

GPX elements are plain ``xml.etree.ElementTree.Element`` nodes; tag matching
is done on the local name so namespaced (GPX 1.0/1.1) and namespace-free
documents behave the same. All coordinates follow the GeoJSON convention:
[lng, lat] or [lng, lat, ele].
"""

from __future__ import annotations

import enum
import json
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any


class GeometryKind(enum.Enum):
    """GeoJSON geometry produced for each kind of GPX source element."""

    POINT = "Point"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"


# Root-level GPX tag -> geometry it converts to. Anything else is skipped.
SOURCE_TAGS: dict[str, GeometryKind] = {
    "wpt": GeometryKind.POINT,
    "rte": GeometryKind.LINE_STRING,
    "trk": GeometryKind.MULTI_LINE_STRING,
}


@dataclass(frozen=True)
class GpxDocument:
    """A parsed GPX document.

    Attributes:
        root: The root element (normally ``gpx``). Never mutated.
    """

    root: ET.Element

    @property
    def tag(self) -> str:
        return local_name(self.root.tag)


def local_name(tag: Any) -> str:
    """Strip a ``{namespace}`` prefix from an ElementTree tag."""
    if not isinstance(tag, str):
        # Comments and processing instructions carry a factory as tag
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def text_content(elem: ET.Element) -> str:
    """Concatenated text of an element and all of its descendants."""
    return "".join(elem.itertext())


def child_elements(elem: ET.Element, name: str | None = None) -> list[ET.Element]:
    """Direct element children, optionally filtered by local name."""
    children = [c for c in elem if isinstance(c.tag, str)]
    if name is None:
        return children
    return [c for c in children if local_name(c.tag) == name]


def first_descendant(elem: ET.Element, name: str) -> ET.Element | None:
    """First descendant (document order, excluding elem) with the local name."""
    for node in elem.iter():
        if node is not elem and local_name(node.tag) == name:
            return node
    return None


def descendants(elem: ET.Element, name: str) -> list[ET.Element]:
    """All descendants with the local name, in document order."""
    return [
        node for node in elem.iter()
        if node is not elem and local_name(node.tag) == name
    ]


def _nan_to_none(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, list):
        return [_nan_to_none(v) for v in value]
    if isinstance(value, dict):
        return {k: _nan_to_none(v) for k, v in value.items()}
    return value


def dumps(collection: dict, strict: bool = False, **kwargs: Any) -> str:
    """Serialize a FeatureCollection dict to JSON text.

    Args:
        collection: GeoJSON dict as returned by ``to_geojson``.
        strict: Emit NaN coordinates as ``null`` so the output is valid
            RFC 8259 JSON. By default Python's ``NaN`` literal is written.
        **kwargs: Passed through to ``json.dumps``. ``allow_nan`` is
            ignored when ``strict`` is set.

    Returns:
        JSON string.
    """
    if strict:
        kwargs.pop("allow_nan", None)
        return json.dumps(_nan_to_none(collection), allow_nan=False, **kwargs)
    return json.dumps(collection, **kwargs)
