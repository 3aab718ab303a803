"""
PrintSize Backend — Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the data passed between services and the API
       contract returned to clients.
Why:   Validation, serialization and OpenAPI doc generation from one definition.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Internal Models — passed between services
# ══════════════════════════════════════════════════════════════════════════


class ImageMetadata(BaseModel):
    """
    What:  Pixel size and embedded resolution of one decoded image.
    Who:   Produced by the metadata resolver, consumed by the calculator.

    dpi_x / dpi_y are None (or 0) when the file carries no usable resolution;
    the calculator substitutes the default DPI in that case.
    """
    width: int = Field(default=0, ge=0, description="Image width in pixels")
    height: int = Field(default=0, ge=0, description="Image height in pixels")
    dpi_x: Optional[float] = Field(default=None, ge=0, description="Horizontal resolution")
    dpi_y: Optional[float] = Field(default=None, ge=0, description="Vertical resolution")


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class ImageDimensions(BaseModel):
    """
    What:  Physical print size of an uploaded image.
    Who:   Returned by POST /upload and the serverless upload function.

    Example:
        {"width_mm": 254.0, "height_mm": 169.33, "dpi_x": 72.0, "dpi_y": 72.0}
    """
    width_mm: float = Field(description="Printed width in millimeters (2 decimals)")
    height_mm: float = Field(description="Printed height in millimeters (2 decimals)")
    dpi_x: float = Field(description="Horizontal DPI used for the conversion")
    dpi_y: float = Field(description="Vertical DPI used for the conversion")


class ErrorResponse(BaseModel):
    """
    What:  Error body returned for every 4xx/5xx response.

    Example:
        {"error": "Internal server error", "details": "cannot identify image file"}
    """
    error: str = Field(description="Human-readable error description")
    details: Optional[str] = Field(default=None, description="Failure detail (500s only)")


class HealthResponse(BaseModel):
    """Static liveness payload for GET /health."""
    status: str = Field(default="ok", description="Always 'ok' while the process serves requests")
