# Copyright (c) 2026 Coriro
# SPDX-License-Identifier: MIT

"""
Pixel sources.

A pixel source is anything with ``width``, ``height`` and
``color_at(x, y)`` returning a packed RGB color. Indexed images must
already resolve palette indices to their true RGB value.

Sources that can also hand over all pixels at once implement
``packed()``, which lets the palette count colors with NumPy instead of
one ``color_at`` call per pixel.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, Union, runtime_checkable

import numpy as np
from loguru import logger
from numpy.typing import NDArray

from colorextractor.errors import InvalidInputError
from colorextractor.schema import pack

if TYPE_CHECKING:
    from PIL import Image


@runtime_checkable
class PixelSource(Protocol):
    """Rectangular grid of packed RGB colors."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def color_at(self, x: int, y: int) -> int: ...


def pack_array(pixels: NDArray[np.uint8]) -> NDArray[np.uint32]:
    """
    Pack an (..., 3) uint8 RGB array into packed colors.

    Returns:
        Flat array of packed colors, row-major
    """
    p = pixels.reshape(-1, 3).astype(np.uint32)
    return (p[:, 0] << 16) | (p[:, 1] << 8) | p[:, 2]


def check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidInputError(
            f"Image must have positive dimensions, got {width}x{height}"
        )


def _check_bounds(x: int, y: int, width: int, height: int) -> None:
    if not (0 <= x < width and 0 <= y < height):
        raise InvalidInputError(
            f"Pixel ({x}, {y}) is outside the {width}x{height} image"
        )


# =============================================================================
# NumPy Arrays
# =============================================================================


class ArrayPixelSource:
    """
    Pixel source over an (H, W, 3) uint8 sRGB array.

    The caller is responsible for the array being in sRGB.
    """

    def __init__(self, pixels: NDArray[np.uint8]) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise InvalidInputError(
                f"Expected (H, W, 3) array, got shape {pixels.shape}"
            )
        if pixels.dtype != np.uint8:
            raise InvalidInputError(f"Expected uint8 array, got {pixels.dtype}")

        self.pixels = pixels
        self.height, self.width = pixels.shape[:2]
        check_dimensions(self.width, self.height)

    def color_at(self, x: int, y: int) -> int:
        _check_bounds(x, y, self.width, self.height)
        r, g, b = self.pixels[y, x]
        return pack(int(r), int(g), int(b))

    def packed(self) -> NDArray[np.uint32]:
        return pack_array(self.pixels)


# =============================================================================
# Pillow Images
# =============================================================================


class PillowPixelSource:
    """
    Pixel source over a Pillow image.

    Palette ("P") images keep their indices and resolve each one through
    the image palette on access. Every other mode is converted to RGB up
    front.
    """

    def __init__(self, image: Image.Image) -> None:
        if image.mode == "P":
            self._palette = image.getpalette() or []
        else:
            self._palette = None
            if image.mode != "RGB":
                image = image.convert("RGB")

        self.image = image
        self.width, self.height = image.size
        check_dimensions(self.width, self.height)

    @property
    def is_indexed(self) -> bool:
        return self._palette is not None

    def color_at(self, x: int, y: int) -> int:
        _check_bounds(x, y, self.width, self.height)
        value = self.image.getpixel((x, y))

        if self._palette is not None:
            offset = 3 * value
            rgb = self._palette[offset:offset + 3]
            if len(rgb) != 3:
                raise InvalidInputError(
                    f"Palette index {value} at ({x}, {y}) has no palette entry"
                )
            return pack(*rgb)

        r, g, b = value
        return pack(r, g, b)

    def packed(self) -> NDArray[np.uint32]:
        if self._palette is None:
            return pack_array(np.asarray(self.image, dtype=np.uint8))

        # convert() would map indices past the palette to black
        top = int(np.asarray(self.image).max())
        if top >= len(self._palette) // 3:
            raise InvalidInputError(f"Palette index {top} has no palette entry")
        return pack_array(np.asarray(self.image.convert("RGB"), dtype=np.uint8))


def _import_pil():
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for image loading. "
            "Install with: pip install Pillow"
        ) from e
    return Image


def load_image(path: Union[str, Path]) -> PillowPixelSource:
    """
    Open an image file as a pixel source.

    Applies ICC profile conversion to sRGB if the image has an embedded
    color profile, so colors match what color pickers show.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidInputError: If Pillow cannot decode the file.
    """
    Image = _import_pil()
    from PIL import UnidentifiedImageError

    # Pillow decodes lazily; load now so corrupt data fails here
    try:
        img = Image.open(path)
        img.load()
    except FileNotFoundError:
        raise
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidInputError(f"Cannot decode image: {path}: {e}") from e

    if 'icc_profile' in img.info:
        from PIL import ImageCms
        import io

        if img.mode != "RGB":
            img = img.convert("RGB")
        try:
            embedded_profile = ImageCms.ImageCmsProfile(
                io.BytesIO(img.info['icc_profile'])
            )
            srgb_profile = ImageCms.createProfile('sRGB')
            img = ImageCms.profileToProfile(img, embedded_profile, srgb_profile)
        except (OSError, ImageCms.PyCMSError) as e:
            logger.warning("ICC conversion failed for {}, using plain RGB: {}", path, e)

    logger.debug("Loaded {} ({}x{}, mode {})", path, img.width, img.height, img.mode)
    return PillowPixelSource(img)


def as_pixel_source(image: Any) -> PixelSource:
    """
    Coerce supported image inputs into a pixel source.

    Args:
        image: One of:
            - Path to image file (str or Path), loaded with Pillow
            - NumPy array of shape (H, W, 3) with uint8 sRGB values
            - PIL.Image.Image
            - Any object already implementing the pixel source protocol

    Raises:
        InvalidInputError: For unsupported input types.
    """
    if isinstance(image, (str, Path)):
        return load_image(image)
    if isinstance(image, np.ndarray):
        return ArrayPixelSource(image)
    if isinstance(image, PixelSource):
        return image

    Image = _import_pil()
    if isinstance(image, Image.Image):
        return PillowPixelSource(image)

    raise InvalidInputError(
        f"Expected file path, numpy array, PIL image or pixel source, got {type(image)}"
    )
