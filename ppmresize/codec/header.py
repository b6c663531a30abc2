from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Optional

from ..errors import FormatError
from .types import PixelFormat

WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")
DIGITS = frozenset(b"0123456789")
COMMENT = ord("#")
NEWLINE = ord("\n")
READ_CHUNK_SIZE = 1 << 16


@dataclass(frozen=True)
class Header:
    pixel_format: PixelFormat
    width: int
    height: int
    max_value: int


class HeaderReader:
    """Byte-at-a-time reader for the PPM header.

    Keeps a single byte of lookahead and the offset of the next unread byte so
    errors can point at the exact position in the stream.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._lookahead: Optional[int] = None
        self.offset = 0

    def peek(self) -> Optional[int]:
        if self._lookahead is None:
            chunk = self._stream.read(1)
            if not chunk:
                return None
            self._lookahead = chunk[0]
        return self._lookahead

    def next(self) -> Optional[int]:
        value = self.peek()
        if value is not None:
            self._lookahead = None
            self.offset += 1
        return value

    def read(self, size: int) -> bytes:
        """Read up to ``size`` payload bytes following the header.

        The stream is read at most ``READ_CHUNK_SIZE`` bytes at a time and
        reading stops at the first empty chunk.
        """
        out = bytearray()
        if size > 0 and self._lookahead is not None:
            out.append(self._lookahead)
            self._lookahead = None
        while len(out) < size:
            chunk = self._stream.read(min(size - len(out), READ_CHUNK_SIZE))
            if not chunk:
                break
            out += chunk
        self.offset += len(out)
        return bytes(out)

    def read_rest(self) -> bytes:
        out = bytearray()
        if self._lookahead is not None:
            out.append(self._lookahead)
            self._lookahead = None
        out += self._stream.read()
        self.offset += len(out)
        return bytes(out)

    def read_header(self) -> Header:
        pixel_format = self.read_marker()
        self.skip_separator("width")
        width = self.read_unsigned("width")
        self.skip_separator("height")
        height = self.read_unsigned("height")
        self.skip_separator("max value")
        max_value = self.read_unsigned("max value")
        if max_value == 0:
            raise FormatError("Max value must be greater than zero", self.offset - 1)
        offset = self.offset
        terminator = self.next()
        if terminator is None:
            raise FormatError("Unexpected end of stream after max value", offset)
        if terminator not in WHITESPACE:
            raise FormatError("Header must end with a whitespace byte", offset)
        return Header(pixel_format, width, height, max_value)

    def read_marker(self) -> PixelFormat:
        if self.next() != ord("P"):
            raise FormatError("Not a PPM file: missing 'P' marker", 0)
        digit = self.next()
        if digit is None:
            raise FormatError("Unexpected end of stream in marker", 1)
        try:
            return PixelFormat.from_marker_digit(bytes([digit]))
        except ValueError as exc:
            raise FormatError(str(exc), 1) from None

    def skip_separator(self, before: str) -> None:
        """Consume a mandatory run of whitespace and ``#`` comments."""
        value = self.peek()
        if value is None:
            raise FormatError(f"Unexpected end of stream before {before}", self.offset)
        if value != COMMENT and value not in WHITESPACE:
            raise FormatError(f"Expected whitespace or comment before {before}", self.offset)
        while value is not None and (value == COMMENT or value in WHITESPACE):
            if value == COMMENT:
                self._skip_comment()
            else:
                self.next()
            value = self.peek()

    def _skip_comment(self) -> None:
        start = self.offset
        while True:
            value = self.next()
            if value is None:
                raise FormatError("Unexpected end of stream inside header comment", start)
            if value == NEWLINE:
                return

    def read_unsigned(self, name: str) -> int:
        value = self.peek()
        if value is None:
            raise FormatError(f"Unexpected end of stream in {name}", self.offset)
        if value not in DIGITS:
            raise FormatError(f"Expected decimal digits for {name}", self.offset)
        number = 0
        while value is not None and value in DIGITS:
            number = number * 10 + (value - 0x30)
            self.next()
            value = self.peek()
        return number
