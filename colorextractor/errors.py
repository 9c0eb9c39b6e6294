# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""Exception types raised by colorextractor."""


class ColorExtractorError(Exception):
    """Base class for all colorextractor errors."""


class InvalidInputError(ColorExtractorError, ValueError):
    """
    Raised for malformed input.

    Covers pixel sources with non-positive dimensions or out-of-range
    coordinates, color components outside 0-255, and invalid counts or
    configuration values.
    """


class NotFoundError(ColorExtractorError, LookupError):
    """Raised when a color is queried that the palette does not contain."""
