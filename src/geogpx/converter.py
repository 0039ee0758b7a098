"""Stateless convenience wrapper around the conversion functions."""

from __future__ import annotations

import os

from geogpx.config import Settings, get_settings
from geogpx.features import to_geojson
from geogpx.models import GpxDocument
from geogpx.reader import read, read_file


class GpxConverter:
    """Holds conversion defaults; keeps no per-call state.

    Options left as None fall back to ``settings`` (or the default
    ``Settings()`` when none is given). Instances are safe to
    share between threads.
    """

    def __init__(
        self,
        extension_prefix: str | None = None,
        include_elevation: bool | None = None,
        settings: Settings | None = None,
    ) -> None:
        if settings is None:
            settings = get_settings()
        self.extension_prefix = (
            settings.extension_prefix if extension_prefix is None else extension_prefix
        )
        self.include_elevation = (
            settings.include_elevation if include_elevation is None else include_elevation
        )

    def read(self, gpx_text: str | bytes) -> GpxDocument:
        return read(gpx_text)

    def read_file(self, path: str | os.PathLike) -> GpxDocument:
        return read_file(path)

    def to_geojson(
        self, document: GpxDocument, include_elevation: bool | None = None
    ) -> dict:
        if include_elevation is None:
            include_elevation = self.include_elevation
        return to_geojson(document, include_elevation, self.extension_prefix)

    def convert(
        self, gpx_text: str | bytes, include_elevation: bool | None = None
    ) -> dict:
        """Read GPX text and return its FeatureCollection dict."""
        return self.to_geojson(self.read(gpx_text), include_elevation)
