# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Main extraction API.

This is the primary entry point: image in, representative hex colors out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from colorextractor.errors import InvalidInputError
from colorextractor.measure.palette import Palette


@dataclass(frozen=True)
class ExtractionConfig:
    """Configuration for representative color extraction."""

    # Maximum number of colors returned
    limit: int = 5

    # "#F3EC18" vs "F3EC18"
    prepend_hash: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise InvalidInputError(f"limit must be an int, got {self.limit!r}")
        if self.limit < 1:
            raise InvalidInputError(f"limit must be >= 1, got {self.limit}")


def extract_colors(
    image: Any,
    config: Optional[ExtractionConfig] = None,
) -> list[str]:
    """
    Extract the most representative colors of an image.

    Args:
        image: One of:
            - Path to image file (str or Path), ICC profiles converted to sRGB
            - NumPy array of shape (H, W, 3) with uint8 sRGB values
            - PIL.Image.Image
            - Pixel source (``width``, ``height``, ``color_at(x, y)``)
        config: Extraction settings (uses defaults if None)

    Returns:
        Hex color strings, most representative first

    Example:
        >>> from colorextractor import extract_colors
        >>> extract_colors("image.png", ExtractionConfig(limit=3))
        ['#F3EC18', '#F49225', '#E82E31']
    """
    cfg = config or ExtractionConfig()

    palette = Palette.from_image(image)
    colors = palette.most_representative_colors(cfg.limit, prepend_hash=cfg.prepend_hash)

    logger.info(
        "Extracted {} of {} distinct colors from {} pixels",
        len(colors), palette.count(), palette.pixel_count(),
    )
    return colors
