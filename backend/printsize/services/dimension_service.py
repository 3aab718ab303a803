"""
PrintSize Backend — Dimension Calculator
==========================================

What:  Converts pixel dimensions + DPI into physical millimeters.
How:   mm = pixels / dpi * 25.4, rounded to two decimals.

A missing or zero DPI falls back to DEFAULT_DPI, so the division is always
safe and the function has no error conditions.
"""

from printsize.schemas.dimensions import ImageDimensions, ImageMetadata

# Resolution assumed when an image carries none (the historical screen DPI)
DEFAULT_DPI = 72

MM_PER_INCH = 25.4


def pixels_to_mm(pixels: int, dpi: float) -> float:
    """Length in millimeters of `pixels` printed at `dpi`, rounded to 0.01mm."""
    return round((pixels / dpi) * MM_PER_INCH, 2)


def calculate(metadata: ImageMetadata) -> ImageDimensions:
    """
    Compute the printed size of an image.

    Args:
        metadata: Pixel size plus optional horizontal/vertical DPI.

    Returns:
        ImageDimensions with millimeter sizes and the DPI actually used.
    """
    dpi_x = metadata.dpi_x or DEFAULT_DPI
    dpi_y = metadata.dpi_y or DEFAULT_DPI

    return ImageDimensions(
        width_mm=pixels_to_mm(metadata.width, dpi_x),
        height_mm=pixels_to_mm(metadata.height, dpi_y),
        dpi_x=dpi_x,
        dpi_y=dpi_y,
    )
