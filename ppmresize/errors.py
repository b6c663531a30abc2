from __future__ import annotations

from typing import Optional


class PpmError(Exception):
    """Base class for errors raised by the PPM codec."""


class FormatError(PpmError):
    """The byte stream does not follow the PPM header or payload grammar."""

    def __init__(self, reason: str, offset: Optional[int] = None) -> None:
        self.reason = reason
        self.offset = offset
        if offset is None:
            message = reason
        else:
            message = f"{reason} (at byte {offset})"
        super().__init__(message)


class EncodingError(PpmError):
    """A raster is structurally inconsistent and cannot be serialized."""
