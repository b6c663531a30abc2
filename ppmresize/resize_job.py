from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .codec import Raster, decode, encode
from .rendering import raster_to_image
from .resample import downsample

SUPPORTED_EXTENSIONS = {".ppm"}
DEFAULT_OUTPUT_PATH = "small.ppm"
OUTPUT_ENV_VAR = "PPMRESIZE_OUTPUT"


def default_output_path() -> str:
    return os.environ.get(OUTPUT_ENV_VAR) or DEFAULT_OUTPUT_PATH


@dataclass
class ResizeSettings:
    output_path: str = field(default_factory=default_output_path)
    preview_path: Optional[str] = None


@dataclass(frozen=True)
class ResizeResult:
    source_path: str
    output_path: str
    source: Raster
    resized: Raster
    bytes_written: int
    preview_path: Optional[str] = None


class ResizeJobBuilder:
    def __init__(self, settings: Optional[ResizeSettings] = None) -> None:
        self.settings = settings or ResizeSettings()

    def load(self, path: str) -> Raster:
        self.validate_input_path(path)
        with open(path, "rb") as handle:
            return decode(handle)

    def build_from_file(self, path: str) -> bytes:
        return encode(downsample(self.load(path)))

    def run(self, path: str) -> ResizeResult:
        source = self.load(path)
        resized = downsample(source)
        data = encode(resized)
        preview_path = self.settings.preview_path
        preview = raster_to_image(resized) if preview_path else None
        with open(self.settings.output_path, "wb") as handle:
            handle.write(data)
        if preview is not None:
            preview.save(preview_path)
        return ResizeResult(
            source_path=path,
            output_path=self.settings.output_path,
            source=source,
            resized=resized,
            bytes_written=len(data),
            preview_path=preview_path,
        )

    @staticmethod
    def validate_input_path(path: str) -> None:
        if not has_supported_extension(path):
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")


def has_supported_extension(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in SUPPORTED_EXTENSIONS
