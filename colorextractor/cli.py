# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Command-line interface: print the representative colors of images."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from colorextractor.errors import ColorExtractorError
from colorextractor.measure.extract import ExtractionConfig, extract_colors
from colorextractor.runtime.serializers import SerializerFormat, serialize_colors


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='colorextractor',
        description='Extract the most representative colors of images.'
    )
    parser.add_argument(
        'images',
        nargs='+',
        help='Image files to analyze (JPEG, PNG, GIF, ...)'
    )
    parser.add_argument(
        '--limit', '-n',
        type=int,
        default=5,
        help='Maximum number of colors per image (default: 5)'
    )
    parser.add_argument(
        '--no-hash',
        action='store_true',
        help='Print hex colors without the leading #'
    )
    parser.add_argument(
        '--format', '-f',
        choices=[f.value for f in SerializerFormat],
        default=SerializerFormat.TEXT.value,
        help='Output format (default: text)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log debug details to stderr'
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level: <8}</level> | {name}:{function} - {message}",
    )
    logger.enable("colorextractor")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = ExtractionConfig(limit=args.limit, prepend_hash=not args.no_hash)
    except ColorExtractorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    fmt = SerializerFormat(args.format)
    multiple = len(args.images) > 1

    for image in args.images:
        path = Path(image)
        if not path.is_file():
            print(f"Error: Image not found: {path}", file=sys.stderr)
            return 2

        try:
            colors = extract_colors(path, config)
        except ColorExtractorError as e:
            print(f"Error: {path}: {e}", file=sys.stderr)
            return 2

        print(serialize_colors(colors, format=fmt, image_id=str(path) if multiple else None))

    return 0


if __name__ == '__main__':
    sys.exit(main())
