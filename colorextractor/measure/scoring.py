# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Salience scoring for palette colors.

Ranks colors before clustering so that the most visually salient ones
seed the clusters. The heuristic is HSL-like but runs on *linearized*
channels (after the sRGB inverse transfer), not on raw byte/255 values.
Existing palettes depend on that, so it is kept as-is.
"""

from __future__ import annotations

from colorextractor.errors import InvalidInputError
from colorextractor.measure.colorspace import rgb_to_linear
from colorextractor.schema import unpack


def saturation_luminosity(color: int) -> tuple[float, float]:
    """
    Saturation and luminosity of a packed color, on linear channels.

    Returns:
        (saturation, luminosity), both in [0, 1]
    """
    R, G, B = (float(v) for v in rgb_to_linear(unpack(color)))

    hi = max(R, G, B)
    lo = min(R, G, B)
    diff = hi - lo
    total = hi + lo

    saturation = 0.0
    if diff:
        saturation = diff / (2.0 - diff) if total / 2.0 > 0.5 else diff / total

    luminosity = (total / 2.0 + 0.2126 * R + 0.7152 * G + 0.0722 * B) / 2.0

    return saturation, luminosity


def color_score(color: int, count: int, total_distinct_colors: int) -> float:
    """
    Salience score of a color given its pixel count.

    Desaturated colors (saturation < 0.5) score by darkness times relative
    frequency. Saturated colors score by count × saturation × luminosity,
    which favors bright, vivid, frequent colors.

    Args:
        color: Packed color
        count: Pixel count of the color
        total_distinct_colors: Number of distinct colors in the palette

    Returns:
        Score (higher = more representative)

    Raises:
        InvalidInputError: If total_distinct_colors < 1.
    """
    if total_distinct_colors < 1:
        raise InvalidInputError(
            f"total_distinct_colors must be >= 1, got {total_distinct_colors}"
        )

    saturation, luminosity = saturation_luminosity(color)

    if saturation < 0.5:
        return (1.0 - luminosity) * (count / total_distinct_colors)
    return count * saturation * luminosity
