"""Error types raised by geogpx.

Only malformed input is fatal. Every other irregularity in a GPX document
(missing attributes, missing elevation, unknown elements) degrades into the
output instead of raising.
"""

from __future__ import annotations


class GeoGpxError(Exception):
    """Base class for errors raised by geogpx."""


class ParseError(GeoGpxError, ValueError):
    """Raised when GPX text is not well-formed XML.

    Attributes:
        messages: One message per detected well-formedness violation.
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))
