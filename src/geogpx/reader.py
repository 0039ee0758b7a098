"""Read GPX text into a GpxDocument.

Python's ElementTree raises on malformed XML, while DOM-style parsers report
errors in-band as ``parsererror`` elements. Both end up as a single
``ParseError`` carrying one message per violation.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET

from loguru import logger

from geogpx.errors import ParseError
from geogpx.models import GpxDocument, local_name, text_content

_ERROR_MARKER = "parsererror"


def read(gpx_text: str | bytes) -> GpxDocument:
    """Parse GPX text into a GpxDocument.

    Args:
        gpx_text: Raw GPX XML content.

    Returns:
        GpxDocument wrapping the parsed tree, unchanged.

    Raises:
        ParseError: If the text is not well-formed XML or the parsed tree
            contains in-band parser error markers.
    """
    try:
        root = ET.fromstring(gpx_text)
    except ET.ParseError as e:
        raise _parse_error([str(e)]) from e

    markers = [
        node for node in root.iter()
        if local_name(node.tag) == _ERROR_MARKER
    ]
    if markers:
        raise _parse_error([text_content(m).strip() for m in markers])

    return GpxDocument(root=root)


def read_file(path: str | os.PathLike) -> GpxDocument:
    """Read and parse a GPX file.

    The file is read as bytes so the XML declaration decides the encoding.
    """
    with open(path, "rb") as f:
        return read(f.read())


def _parse_error(details: list[str]) -> ParseError:
    """Log each violation and build the ParseError for them."""
    messages = [
        f"Parsing Error {i}: {detail}" for i, detail in enumerate(details, 1)
    ]
    for message in messages:
        logger.error(f"Failed to parse GPX: {message}")
    return ParseError(messages)
