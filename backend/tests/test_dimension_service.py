"""
PrintSize Backend — Dimension Calculator Unit Tests
=====================================================

What:  Tests for the pixels + DPI → millimeters conversion.
Why:   This is the number clients print from; rounding and the DPI default
       must be exact.
"""

import pytest

from printsize.schemas.dimensions import ImageMetadata
from printsize.services.dimension_service import DEFAULT_DPI, calculate, pixels_to_mm


class TestCalculate:
    """Tests for calculate()."""

    def test_72_dpi_example(self):
        """720x480 at 72 DPI is exactly 10in x 6.67in."""
        result = calculate(ImageMetadata(width=720, height=480, dpi_x=72, dpi_y=72))

        assert result.width_mm == 254
        assert result.height_mm == 169.33
        assert result.dpi_x == 72
        assert result.dpi_y == 72

    def test_missing_dpi_defaults_to_72(self):
        result = calculate(ImageMetadata(width=300, height=300))

        assert result.width_mm == 105.83
        assert result.height_mm == 105.83
        assert result.dpi_x == DEFAULT_DPI
        assert result.dpi_y == DEFAULT_DPI

    def test_zero_dpi_treated_as_missing(self):
        result = calculate(ImageMetadata(width=300, height=300, dpi_x=0, dpi_y=0))

        assert result.dpi_x == 72
        assert result.dpi_y == 72
        assert result.width_mm == 105.83

    def test_axes_resolve_independently(self):
        """Only the missing axis falls back to the default."""
        result = calculate(ImageMetadata(width=600, height=600, dpi_x=300, dpi_y=None))

        assert result.dpi_x == 300
        assert result.dpi_y == 72
        assert result.width_mm == 50.8
        assert result.height_mm == 211.67

    def test_zero_pixels(self):
        result = calculate(ImageMetadata(width=0, height=0))

        assert result.width_mm == 0
        assert result.height_mm == 0

    @pytest.mark.parametrize(
        "width,height,dpi_x,dpi_y",
        [
            (1, 1, 1, 1),
            (2480, 3508, 300, 300),
            (1024, 768, 96, 96),
            (4000, 3000, 240.5, 180.25),
            (17, 9999, 0.5, 1200),
        ],
    )
    def test_matches_formula(self, width, height, dpi_x, dpi_y):
        result = calculate(ImageMetadata(width=width, height=height, dpi_x=dpi_x, dpi_y=dpi_y))

        assert result.width_mm == round(width / dpi_x * 25.4, 2)
        assert result.height_mm == round(height / dpi_y * 25.4, 2)
        assert result.width_mm >= 0
        assert result.height_mm >= 0


class TestPixelsToMm:

    def test_one_inch(self):
        assert pixels_to_mm(300, 300) == 25.4

    def test_rounds_to_two_decimals(self):
        assert pixels_to_mm(1, 3) == 8.47
