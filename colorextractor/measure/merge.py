# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Greedy perceptual merging of ranked colors.

Single pass, nearest-available-cluster assignment (not k-medoids):
the first color seeds a cluster, and every following color either joins
the first existing cluster within ``max_delta`` (CIEDE2000) or seeds a
new one. Results depend on input order, so callers sort by weight first
and the heaviest colors become the seeds.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Optional, Union

from loguru import logger

from colorextractor.measure.colorspace import color_to_lab, delta_e
from colorextractor.schema import LabColor, WeightedColor


def _lab(color: int, lab_cache: dict[int, LabColor]) -> LabColor:
    lab = lab_cache.get(color)
    if lab is None:
        lab = lab_cache[color] = color_to_lab(color)
    return lab


def merge_colors(
    colors: Union[Mapping[int, float], Iterable[tuple[int, float]]],
    limit: int,
    max_delta: float = 5.0,
    lab_cache: Optional[dict[int, LabColor]] = None,
) -> tuple[WeightedColor, ...]:
    """
    Merge perceptually similar colors into at most ``limit`` clusters.

    A cluster representative never changes; merged colors only add their
    weight to it. Scanning stops as soon as ``min(limit, len(colors))``
    clusters exist, so trailing colors are dropped, not merged.

    Args:
        colors: (color, weight) pairs, or a color → weight mapping,
            already ordered by weight descending
        limit: Maximum number of clusters
        max_delta: Colors with CIEDE2000 ΔE strictly below this join an
            existing cluster (default: 5.0)
        lab_cache: Optional color → Lab memo for this call. A fresh one is
            used when omitted; never share one across unrelated calls.

    Returns:
        Tuple of WeightedColor (representative, accumulated weight),
        ordered by weight descending.
    """
    items = list(colors.items() if isinstance(colors, Mapping) else colors)
    limit = min(limit, len(items))
    if limit <= 0:
        return ()

    if lab_cache is None:
        lab_cache = {}

    # Representative → accumulated weight, in creation order
    merged: dict[int, float] = {}

    for color, weight in items:
        if color in merged:
            merged[color] += weight
        elif merged:
            lab = _lab(color, lab_cache)
            for representative in merged:
                if delta_e(lab, _lab(representative, lab_cache)) < max_delta:
                    merged[representative] += weight
                    break
            else:
                merged[color] = weight
        else:
            merged[color] = weight

        if len(merged) >= limit:
            break

    logger.debug(
        "Merged {} colors into {} clusters (limit={}, max_delta={:.2f})",
        len(items), len(merged), limit, max_delta,
    )

    ranked = sorted(merged.items(), key=lambda item: item[1], reverse=True)
    return tuple(WeightedColor(color=c, weight=w) for c, w in ranked)
