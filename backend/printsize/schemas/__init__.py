from printsize.schemas.dimensions import (
    ErrorResponse,
    HealthResponse,
    ImageDimensions,
    ImageMetadata,
)

__all__ = ["ErrorResponse", "HealthResponse", "ImageDimensions", "ImageMetadata"]
