from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from .errors import PpmError
from .resize_job import ResizeJobBuilder, ResizeSettings, has_supported_extension

PROMPT = "Enter ppm file name: "


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Halve a P3/P6 PPM image by averaging 2x2 pixel blocks."
    )
    parser.add_argument("path", nargs="?", help="Input .ppm file (prompted for when omitted)")
    parser.add_argument("-o", "--output", help="Output path (default: $PPMRESIZE_OUTPUT or small.ppm)")
    parser.add_argument("--preview", metavar="IMAGE", help="Also save the result as IMAGE (e.g. .png)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print image sizes to stderr")
    return parser.parse_args(argv)


def prompt_for_path(read_line: Optional[Callable[[str], str]] = None) -> str:
    read_line = read_line or input
    while True:
        path = read_line(PROMPT).strip()
        if has_supported_extension(path):
            return path
        print("Please input a .ppm file")


def build_settings(args: argparse.Namespace) -> ResizeSettings:
    settings = ResizeSettings(preview_path=args.preview)
    if args.output:
        settings.output_path = args.output
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    path = args.path
    if not path:
        try:
            path = prompt_for_path()
        except EOFError:
            print("Missing file path. Use --help for usage.", file=sys.stderr)
            return 2
    builder = ResizeJobBuilder(build_settings(args))
    try:
        result = builder.run(path)
    except (PpmError, ValueError, OSError) as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return 2
    if args.verbose:
        src, out = result.source, result.resized
        print(
            f"{result.source_path} {src.width}x{src.height} -> "
            f"{result.output_path} {out.width}x{out.height} ({result.bytes_written} bytes)",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
