# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
colorextractor -- Representative color palettes from image pixels.

Counts pixel colors, ranks them by visual salience and merges
perceptually similar ones (CIEDE2000) into a small ordered palette.

Quick start::

    from colorextractor import Palette

    palette = Palette.from_image("image.png")
    palette.most_representative_colors(3)   # ['#F3EC18', '#F49225', '#E82E31']
    palette.most_used_colors(10)            # [(0xF3EC18, 5120), ...]
"""

from __future__ import annotations

__version__ = "1.0.0"

from loguru import logger

from colorextractor.errors import ColorExtractorError, InvalidInputError, NotFoundError
from colorextractor.measure import ExtractionConfig, Palette, extract_colors, merge_colors
from colorextractor.schema import (
    LabColor,
    WeightedColor,
    hex_to_int_color,
    int_color_to_hex,
    pack,
    unpack,
)

# Library logging stays silent unless the application enables it
logger.disable("colorextractor")

__all__ = [
    # Core API
    "Palette",
    "extract_colors",
    "ExtractionConfig",
    "merge_colors",
    # Codec
    "pack",
    "unpack",
    "int_color_to_hex",
    "hex_to_int_color",
    # Types
    "LabColor",
    "WeightedColor",
    # Errors
    "ColorExtractorError",
    "InvalidInputError",
    "NotFoundError",
    # Version
    "__version__",
]
