"""
PrintSize Backend — Image Metadata Resolver
=============================================

What:  Reads pixel size and resolution from raw image bytes.
How:   Pillow decodes the header (`Image.open` is lazy, pixel data is never
       loaded) and `Image.getexif()` exposes the XResolution/YResolution tags.
       Decoding runs in a worker thread so the event loop stays responsive.

Resolution handling:
    A resolution tag may arrive as an IFDRational, a (numerator, denominator)
    pair, or a plain number. Each axis is resolved on its own: the EXIF tag
    first, then the format header density (`image.info["dpi"]`: JPEG JFIF,
    PNG pHYs). Anything absent, unparseable, zero, negative or non-finite
    leaves that axis at None, which the calculator turns into the default DPI.
    Errors raised by the EXIF reader are logged and swallowed: a broken EXIF
    block must never fail the request.

Pixel limit:
    Only the header is read, so Pillow's decompression-bomb limit is taken
    from settings.max_image_pixels (unlimited by default) instead of
    Pillow's own default of ~179M pixels.
"""

import logging
import math
import numbers
from io import BytesIO
from typing import Any, Optional, Tuple

import anyio
from PIL import Image, UnidentifiedImageError

from printsize.config import settings
from printsize.exceptions import ImageProcessingError, ValidationError
from printsize.schemas.dimensions import ImageMetadata

logger = logging.getLogger(__name__)

Image.MAX_IMAGE_PIXELS = settings.max_image_pixels

# EXIF tag IDs (PIL.ExifTags.Base.XResolution / YResolution)
EXIF_X_RESOLUTION = 0x011A
EXIF_Y_RESOLUTION = 0x011B


def resolution_to_dpi(value: Any) -> Optional[float]:
    """
    Convert one EXIF resolution value into a DPI float.

    Returns None when the value cannot be interpreted as a positive, finite
    resolution.
    """
    if value is None or isinstance(value, (bool, str, bytes)):
        return None

    try:
        if isinstance(value, (tuple, list)):
            if len(value) < 2:
                return None
            dpi = float(value[0]) / float(value[1])
        elif isinstance(value, numbers.Real):
            dpi = float(value)
        else:
            return None
    except (TypeError, ValueError, ZeroDivisionError):
        return None

    if not math.isfinite(dpi) or dpi <= 0:
        return None
    return dpi


def _read_exif_resolution(image: Image.Image) -> Tuple[Optional[float], Optional[float]]:
    try:
        exif = image.getexif()
        dpi_x = resolution_to_dpi(exif.get(EXIF_X_RESOLUTION))
        dpi_y = resolution_to_dpi(exif.get(EXIF_Y_RESOLUTION))
    except Exception as e:
        logger.warning("Could not read EXIF data, using default DPI: %s", e)
        return None, None
    return dpi_x, dpi_y


def _read_header_resolution(image: Image.Image) -> Tuple[Optional[float], Optional[float]]:
    """DPI from the format header (JPEG JFIF density, PNG pHYs), per axis."""
    dpi = image.info.get("dpi")
    if not isinstance(dpi, (tuple, list)) or len(dpi) < 2:
        return None, None
    return resolution_to_dpi(dpi[0]), resolution_to_dpi(dpi[1])


def read_resolution(image: Image.Image) -> Tuple[Optional[float], Optional[float]]:
    """EXIF resolution first, then the format header for any axis still missing."""
    dpi_x, dpi_y = _read_exif_resolution(image)
    if dpi_x is None or dpi_y is None:
        header_x, header_y = _read_header_resolution(image)
        dpi_x = dpi_x if dpi_x is not None else header_x
        dpi_y = dpi_y if dpi_y is not None else header_y
    return dpi_x, dpi_y


def read_metadata(image_bytes: bytes) -> ImageMetadata:
    """
    Decode pixel size and resolution synchronously.

    Raises:
        ValidationError: the header reports more pixels than MAX_IMAGE_PIXELS.
        ImageProcessingError: Pillow cannot identify the bytes as an image.
    """
    try:
        with Image.open(BytesIO(image_bytes)) as image:
            width, height = image.size or (0, 0)
            dpi_x, dpi_y = read_resolution(image)
    except Image.DecompressionBombError as e:
        raise ValidationError(
            message="Image dimensions exceed the configured pixel limit",
            field="file",
            context={"limit": Image.MAX_IMAGE_PIXELS, "error": str(e)},
        ) from e
    except UnidentifiedImageError as e:
        raise ImageProcessingError(
            details=str(e),
            context={"size": len(image_bytes)},
        ) from e

    logger.debug(
        "Decoded image: %dx%d px, dpi_x=%s, dpi_y=%s", width, height, dpi_x, dpi_y
    )
    return ImageMetadata(
        width=width or 0,
        height=height or 0,
        dpi_x=dpi_x,
        dpi_y=dpi_y,
    )


async def resolve(image_bytes: bytes) -> ImageMetadata:
    """Async wrapper around `read_metadata` that decodes in a worker thread."""
    return await anyio.to_thread.run_sync(read_metadata, image_bytes)
