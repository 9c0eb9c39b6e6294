# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color value types and the packed-integer codec.

A color is a plain ``int`` packing three 8-bit channels:

- red   = bits 16-23
- green = bits 8-15
- blue  = bits 0-7

So ``0xF3EC18`` is red 0xF3, green 0xEC, blue 0x18. Equality is integer
equality, which makes packed colors usable directly as dictionary keys.
"""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass

from colorextractor.errors import InvalidInputError


MAX_COLOR = 0xFFFFFF

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{6})")


# =============================================================================
# Packed Integer Codec
# =============================================================================


def pack(r: int, g: int, b: int) -> int:
    """
    Pack 8-bit red, green and blue components into a single color.

    Components must be integers (NumPy integers included). Values outside
    0-255 are rejected rather than clamped, and floats are never truncated.

    Raises:
        InvalidInputError: If any component is not an integer or out of range.
    """
    for name, value in (("red", r), ("green", g), ("blue", b)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise InvalidInputError(
                f"{name} component must be an integer, got {type(value).__name__}"
            )
        if not 0 <= value <= 255:
            raise InvalidInputError(f"{name} component must be 0-255, got {value}")
    return (int(r) << 16) | (int(g) << 8) | int(b)


def unpack(color: int) -> tuple[int, int, int]:
    """
    Split a packed color into its (r, g, b) components.

    Raises:
        InvalidInputError: If the color is outside 0-0xFFFFFF.
    """
    if not 0 <= color <= MAX_COLOR:
        raise InvalidInputError(f"Color must be 0-0xFFFFFF, got {color!r}")
    color = int(color)
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def int_color_to_hex(color: int, prepend_hash: bool = True) -> str:
    """
    Format a packed color as six uppercase hex digits.

    Args:
        color: Packed 24-bit color
        prepend_hash: Prefix the result with ``#`` (default: True)

    Returns:
        Hex string like "#F3EC18" (or "F3EC18")
    """
    r, g, b = unpack(color)
    return f"{'#' if prepend_hash else ''}{r:02X}{g:02X}{b:02X}"


def hex_to_int_color(hex_color: str) -> int:
    """
    Parse "#RRGGBB" or "RRGGBB" (any case) into a packed color.

    Raises:
        InvalidInputError: If the string is not a six-digit hex color.
    """
    m = _HEX_RE.fullmatch(hex_color.strip())
    if not m:
        raise InvalidInputError(f"Not a hex color: {hex_color!r}")
    return int(m.group(1), 16)


# =============================================================================
# Derived Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class LabColor:
    """
    A color in CIE L*a*b* (D65).

    Attributes:
        L: Lightness (0.0 = black, 100.0 = white)
        a: Green (-) to red (+) axis
        b: Blue (-) to yellow (+) axis
    """
    L: float
    a: float
    b: float


@dataclass(frozen=True, slots=True)
class WeightedColor:
    """
    A packed color with an accumulated weight.

    Produced by clustering. The weight is whatever the caller ranked
    colors by: a salience score, or a raw pixel count.
    """
    color: int
    weight: float

    @property
    def hex(self) -> str:
        """Hex string like "#3941C8"."""
        return int_color_to_hex(self.color)
