# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Color space conversions and perceptual distance.

Conversion chain: packed RGB → Linear RGB → CIE XYZ → CIE L*a*b*

References:
- sRGB primaries / D65: http://en.wikipedia.org/wiki/SRGB
- CIELAB: http://en.wikipedia.org/wiki/Lab_color_space#CIELAB-CIEXYZ_conversions
- CIEDE2000: Sharma, Wu, Dalal (2005), "The CIEDE2000 Color-Difference Formula"

Conversions are NumPy-vectorized and accept scalars or arrays. The
ΔE function is scalar and works in degrees throughout, as published.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from colorextractor.schema import LabColor, unpack


# =============================================================================
# sRGB → Linear RGB
# =============================================================================

# Legacy sRGB threshold (IEC draft value), kept for palette compatibility
_LINEAR_THRESHOLD = 0.03928


def rgb_to_linear(value: ArrayLike) -> NDArray[np.float64]:
    """
    Convert 8-bit sRGB channel values [0, 255] to linear RGB [0, 1].

    sRGB uses a piecewise gamma curve on the normalized value v:
    - For v <= 0.03928: v / 12.92
    - For v > 0.03928: ((v + 0.055) / 1.055) ^ 2.4
    """
    v = np.asarray(value, dtype=np.float64) / 255.0
    return np.where(
        v <= _LINEAR_THRESHOLD,
        v / 12.92,
        np.power((v + 0.055) / 1.055, 2.4),
    )


# =============================================================================
# Linear RGB → CIE XYZ
# =============================================================================

# sRGB primaries, D65 white point
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)


def linear_to_xyz(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert linear RGB to CIE XYZ.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with XYZ values (Y = 1.0 for white)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    return np.einsum('...j,ij->...i', rgb, _RGB_TO_XYZ)


# =============================================================================
# CIE XYZ → CIE L*a*b*
# =============================================================================

# D65 reference white: http://en.wikipedia.org/wiki/Illuminant_D65#Definition
_WHITE_D65 = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

_DELTA = 6.0 / 29.0


def _lab_f(t: NDArray[np.float64]) -> NDArray[np.float64]:
    """CIE companding: cube root above (6/29)^3, linear segment below."""
    return np.where(
        t > _DELTA ** 3,
        np.cbrt(t),
        t / (3.0 * _DELTA ** 2) + 4.0 / 29.0,
    )


def xyz_to_lab(xyz: ArrayLike) -> NDArray[np.float64]:
    """
    Convert CIE XYZ to CIE L*a*b* relative to D65.

    Args:
        xyz: Array of shape (..., 3) with XYZ values

    Returns:
        Array of shape (..., 3) with (L, a, b); L spans [0, 100]
    """
    xyz = np.asarray(xyz, dtype=np.float64)
    f = _lab_f(xyz / _WHITE_D65)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    L = 116.0 * fy - 16.0
    a = 500.0 * (fx - fy)
    b = 200.0 * (fy - fz)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: packed color → Lab (full chain)
# =============================================================================


def color_to_lab(color: int) -> LabColor:
    """
    Convert a packed color to CIE L*a*b*.

    Full chain: packed RGB → Linear RGB → XYZ → Lab
    """
    linear = rgb_to_linear(unpack(color))
    L, a, b = xyz_to_lab(linear_to_xyz(linear))
    return LabColor(L=float(L), a=float(a), b=float(b))


# =============================================================================
# ΔE Distance (CIEDE2000)
# =============================================================================

_25_POW_7 = 25.0 ** 7


def _hue_degrees(b: float, a_prime: float) -> float:
    """Hue angle in [0, 360); zero when the color has no chroma."""
    if a_prime == 0.0 and b == 0.0:
        return 0.0
    return math.degrees(math.atan2(b, a_prime)) % 360.0


def _cos_deg(deg: float) -> float:
    return math.cos(math.radians(deg))


def _sin_deg(deg: float) -> float:
    return math.sin(math.radians(deg))


def delta_e(lab1: LabColor, lab2: LabColor) -> float:
    """
    Calculate perceptual color difference with the CIEDE2000 formula.

    Weighting factors kL, kC, kH are all 1. Every angle is in degrees;
    conversion to radians happens only at the sin/cos calls.

    Reference thresholds:
    - ΔE ≈ 1: just noticeable difference
    - ΔE ≈ 2-10: perceptible at a glance
    - ΔE ≈ 50+: clearly different colors

    Args:
        lab1: First color
        lab2: Second color

    Returns:
        ΔE value (0 for identical colors, symmetric in its arguments)
    """
    L1, a1, b1 = lab1.L, lab1.a, lab1.b
    L2, a2, b2 = lab2.L, lab2.a, lab2.b

    # Chroma correction for the a axis
    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    Cb7 = ((C1 + C2) / 2.0) ** 7
    G = 0.5 * (1.0 - math.sqrt(Cb7 / (Cb7 + _25_POW_7)))

    a1p = (1.0 + G) * a1
    a2p = (1.0 + G) * a2

    C1p = math.hypot(a1p, b1)
    C2p = math.hypot(a2p, b2)

    h1p = _hue_degrees(b1, a1p)
    h2p = _hue_degrees(b2, a2p)

    # Differences
    dLp = L2 - L1
    dCp = C2p - C1p

    chroma_product = C1p * C2p
    if chroma_product == 0.0:
        dhp = 0.0
    elif abs(h2p - h1p) <= 180.0:
        dhp = h2p - h1p
    elif h2p - h1p > 180.0:
        dhp = h2p - h1p - 360.0
    else:
        dhp = h2p - h1p + 360.0

    dHp = 2.0 * math.sqrt(chroma_product) * _sin_deg(dhp / 2.0)

    # Means
    Lbp = (L1 + L2) / 2.0
    Cbp = (C1p + C2p) / 2.0

    if chroma_product == 0.0:
        hbp = h1p + h2p
    elif abs(h1p - h2p) <= 180.0:
        hbp = (h1p + h2p) / 2.0
    elif h1p + h2p < 360.0:
        hbp = (h1p + h2p + 360.0) / 2.0
    else:
        hbp = (h1p + h2p - 360.0) / 2.0

    # Weighting functions
    T = (
        1.0
        - 0.17 * _cos_deg(hbp - 30.0)
        + 0.24 * _cos_deg(2.0 * hbp)
        + 0.32 * _cos_deg(3.0 * hbp + 6.0)
        - 0.20 * _cos_deg(4.0 * hbp - 63.0)
    )

    sigma_delta = 30.0 * math.exp(-(((hbp - 275.0) / 25.0) ** 2))

    Cbp7 = Cbp ** 7
    Rc = 2.0 * math.sqrt(Cbp7 / (Cbp7 + _25_POW_7))

    Lbp_50_sq = (Lbp - 50.0) ** 2
    Sl = 1.0 + (0.015 * Lbp_50_sq) / math.sqrt(20.0 + Lbp_50_sq)
    Sc = 1.0 + 0.045 * Cbp
    Sh = 1.0 + 0.015 * Cbp * T

    Rt = -_sin_deg(2.0 * sigma_delta) * Rc

    dL = dLp / Sl
    dC = dCp / Sc
    dH = dHp / Sh

    # Rounding can push the sum a hair below zero for near-identical colors
    return math.sqrt(max(0.0, dL * dL + dC * dC + dH * dH + Rt * dC * dH))
