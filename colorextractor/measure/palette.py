# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Palette: a color frequency table with representative-color selection.

Two views of the same table:
1. Most used: exact pixel colors ranked by count
2. Most representative: colors ranked by salience score, then merged
   perceptually (CIEDE2000) so near-duplicates do not crowd the output
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

import numpy as np
from loguru import logger

from colorextractor.errors import InvalidInputError, NotFoundError
from colorextractor.measure.merge import merge_colors
from colorextractor.measure.pixels import as_pixel_source, check_dimensions
from colorextractor.measure.scoring import color_score
from colorextractor.schema import MAX_COLOR, int_color_to_hex


class Palette:
    """
    Mapping of packed color → pixel count.

    Every stored count is >= 1; a color is either present with a positive
    count or absent. Mutating methods return the palette so calls chain.

    Example:
        >>> palette = Palette.from_image("image.png")
        >>> palette.most_representative_colors(3)
        ['#F3EC18', '#F49225', '#E82E31']
    """

    def __init__(self) -> None:
        self._colors: dict[int, int] = {}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_image(cls, image: Any) -> Palette:
        """
        Count every pixel of an image.

        After the scan the table is ordered by count descending.

        Args:
            image: Pixel source, file path, (H, W, 3) uint8 array or PIL
                image (see ``as_pixel_source``)

        Raises:
            InvalidInputError: If the image is not a valid, non-empty 2D
                pixel grid.
        """
        source = as_pixel_source(image)
        width, height = source.width, source.height
        check_dimensions(width, height)

        palette = cls()
        packed = getattr(source, "packed", None)

        if packed is not None:
            colors, counts = np.unique(packed(), return_counts=True)
            for color, count in zip(colors.tolist(), counts.tolist()):
                palette.add_color(color, count)
        else:
            for x in range(width):
                for y in range(height):
                    palette.add_color(source.color_at(x, y))

        palette._sort_by_count()

        logger.debug(
            "Scanned {}x{} image: {} distinct colors",
            width, height, len(palette._colors),
        )
        return palette

    def _sort_by_count(self) -> None:
        self._colors = dict(
            sorted(self._colors.items(), key=lambda item: item[1], reverse=True)
        )

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_color(self, color: int, count: int = 1) -> Palette:
        """
        Add ``count`` pixels of ``color``.

        Raises:
            InvalidInputError: If the color is not a 24-bit value or
                count < 1.
        """
        if not 0 <= color <= MAX_COLOR:
            raise InvalidInputError(f"Color must be 0-0xFFFFFF, got {color!r}")
        if count < 1:
            raise InvalidInputError(f"Count must be >= 1, got {count}")

        self._colors[color] = self._colors.get(color, 0) + count
        return self

    def remove_color(self, color: int) -> Palette:
        """Remove a color entirely. No-op if absent."""
        self._colors.pop(color, None)
        return self

    def clear(self) -> Palette:
        self._colors = {}
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def count(self) -> int:
        """Number of distinct colors."""
        return len(self._colors)

    def pixel_count(self) -> int:
        """Total number of pixels across all colors."""
        return sum(self._colors.values())

    def color_count(self, color: int) -> int:
        """
        Pixel count of a single color.

        Raises:
            NotFoundError: If the color is not in the palette.
        """
        try:
            return self._colors[color]
        except KeyError:
            raise NotFoundError(
                f"Color {color!r} is not in the palette"
            ) from None

    def most_used_colors(self, limit: Optional[int] = None) -> list[tuple[int, int]]:
        """
        (color, count) pairs by pixel count.

        Args:
            limit: Number of pairs to return, highest count first (ties keep
                table order). None returns every pair in table order.
        """
        if limit is None:
            return list(self._colors.items())
        ranked = sorted(self._colors.items(), key=lambda item: item[1], reverse=True)
        return ranked[:max(0, limit)]

    def most_representative_colors(
        self,
        limit: int,
        prepend_hash: bool = True,
    ) -> list[str]:
        """
        The ``limit`` most representative colors as hex strings.

        Colors are scored for salience, sorted by score, then merged with a
        ΔE threshold of ``100 / (limit + 1)``: the more colors requested,
        the finer the distinctions kept.

        Args:
            limit: Maximum number of colors to return
            prepend_hash: Prefix each hex string with ``#`` (default: True)

        Returns:
            Hex strings ordered by accumulated score, at most ``limit``
            long. Empty when the palette is empty or limit <= 0.
        """
        if limit <= 0 or not self._colors:
            return []

        distinct = len(self._colors)
        scores = {
            color: color_score(color, count, distinct)
            for color, count in self._colors.items()
        }
        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)

        merged = merge_colors(ranked, limit, max_delta=100 / (limit + 1))

        return [int_color_to_hex(wc.color, prepend_hash) for wc in merged[:limit]]

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(list(self._colors.items()))

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def __repr__(self) -> str:
        return f"Palette(colors={len(self._colors)}, pixels={self.pixel_count()})"
