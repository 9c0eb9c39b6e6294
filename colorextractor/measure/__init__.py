# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Measurement core for colorextractor.

Deterministic color counting, scoring and perceptual merging.
All operations are pixel-based and synchronous.
"""

from colorextractor.measure.extract import ExtractionConfig, extract_colors
from colorextractor.measure.merge import merge_colors
from colorextractor.measure.palette import Palette

__all__ = ["extract_colors", "ExtractionConfig", "merge_colors", "Palette"]
