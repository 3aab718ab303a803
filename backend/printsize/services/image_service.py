"""
PrintSize Backend — Image Service (Orchestrator)
==================================================

What:  The one pipeline every entry point calls: bytes → metadata → dimensions.
Why:   Keeps the FastAPI route and the serverless adapter free of any
       conversion logic of their own.
"""

import logging

from printsize.schemas.dimensions import ImageDimensions
from printsize.services import dimension_service, metadata_service

logger = logging.getLogger(__name__)


async def process_image(content: bytes) -> ImageDimensions:
    """
    Compute the physical print size of an uploaded image.

    Raises:
        ImageProcessingError: the bytes are not a decodable image.
    """
    metadata = await metadata_service.resolve(content)
    dimensions = dimension_service.calculate(metadata)

    logger.info(
        "Measured %dx%d px at %.2fx%.2f DPI -> %.2fx%.2f mm",
        metadata.width,
        metadata.height,
        dimensions.dpi_x,
        dimensions.dpi_y,
        dimensions.width_mm,
        dimensions.height_mm,
    )
    return dimensions
