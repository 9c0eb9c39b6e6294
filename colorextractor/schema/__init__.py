# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color value types.

Colors are packed 24-bit integers. Derived types (Lab values, weighted
cluster entries) are immutable frozen dataclasses.
"""

from colorextractor.schema.color import (
    MAX_COLOR,
    LabColor,
    WeightedColor,
    hex_to_int_color,
    int_color_to_hex,
    pack,
    unpack,
)

__all__ = [
    # Codec
    "MAX_COLOR",
    "pack",
    "unpack",
    "int_color_to_hex",
    "hex_to_int_color",
    # Derived types
    "LabColor",
    "WeightedColor",
]
