"""
PrintSize Backend — Upload Route Handler
==========================================

What:  Handles POST /upload: accepts one image and returns its print size.
How:   Validates the request, lets Starlette's form parser (python-multipart)
       decode the body, validates the `file` part, then delegates to the
       shared image service.

Request Flow:
    1. Content-Type must be multipart/form-data with a boundary
    2. Body must be non-empty
    3. The `file` part must exist, be non-empty, fit the size limit and
       declare an image/* type
       (a `file` part sent without filename= arrives as a text field; it is
       validated the same way and, having no declared type, is rejected
       as "File must be an image", matching the serverless adapter)
    4. image_service.process_image() → 200 ImageDimensions

Error responses (rendered by the global handlers in main.py):
    HTTP 400: ValidationError
    HTTP 405: any method other than POST (router)
    HTTP 500: undecodable image or unexpected failure
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request
from starlette.datastructures import UploadFile

from printsize.exceptions import ImageProcessingError, PrintSizeError
from printsize.schemas.dimensions import ErrorResponse, ImageDimensions
from printsize.services.image_service import process_image
from printsize.services.upload_service import FILE_FIELD, upload_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Upload"])


@router.post(
    "/upload",
    response_model=ImageDimensions,
    responses={
        200: {"description": "Physical print size of the image", "model": ImageDimensions},
        400: {"description": "Invalid upload", "model": ErrorResponse},
        405: {"description": "Method not allowed", "model": ErrorResponse},
        500: {"description": "Image could not be processed", "model": ErrorResponse},
    },
    summary="Measure the print size of an image",
    description=(
        "Upload an image as multipart/form-data in a field named `file`. "
        "Returns its width and height in millimeters, computed from the pixel "
        "size and the EXIF or header resolution (72 DPI when the file has none)."
    ),
)
async def upload_image(request: Request) -> ImageDimensions:
    upload_service.validate_content_type(request.headers.get("content-type"))

    body = await request.body()
    upload_service.validate_body(body)

    form = await request.form()
    try:
        upload = form.get(FILE_FIELD)
        content: Optional[bytes] = None
        content_type: Optional[str] = None
        if isinstance(upload, UploadFile):
            content = await upload.read()
            content_type = upload.content_type
        elif isinstance(upload, str):
            # A `file` part without filename= is parsed as a text field
            content = upload.encode("utf-8")

        content = upload_service.validate_file(content, content_type)

        logger.info(
            "Received upload: filename=%s, type=%s, size=%d bytes",
            getattr(upload, "filename", None) or "unknown",
            content_type,
            len(content),
        )

        try:
            return await process_image(content)
        except PrintSizeError:
            raise
        except Exception as e:
            logger.error("Image processing failed: %s", e, exc_info=True)
            raise ImageProcessingError(details=str(e)) from e
    finally:
        await form.close()
