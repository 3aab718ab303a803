"""
PrintSize Backend — Upload Validation Service
===============================================

What:  Request- and part-level checks shared by every entry point.
Why:   The FastAPI route and the serverless adapter must accept and reject
       exactly the same uploads with the same messages.
How:   Each check raises ValidationError (HTTP 400) with a client-facing
       message; callers run them in order and let the error propagate.

Order of checks (first failure wins):
    1. Content-Type contains multipart/form-data
    2. Content-Type carries a boundary parameter
    3. Body is non-empty
    4. A part named `file` exists
    5. The part is non-empty
    6. The part fits within MAX_FILE_SIZE
    7. The part declares an image/* MIME type (when REQUIRE_IMAGE_MIME)
"""

import logging
from typing import Optional

from printsize.config import settings
from printsize.exceptions import ValidationError
from printsize.services.multipart import parse_boundary

logger = logging.getLogger(__name__)

FILE_FIELD = "file"

MULTIPART_FORM_DATA = "multipart/form-data"


class UploadService:
    """Validation rules for uploaded image parts."""

    def __init__(
        self,
        max_file_size: Optional[int] = None,
        require_image_mime: Optional[bool] = None,
    ):
        """
        Args:
            max_file_size: Override settings.max_file_size (used in tests).
            require_image_mime: Override settings.require_image_mime.
        """
        self.max_file_size = max_file_size if max_file_size is not None else settings.max_file_size
        self.require_image_mime = (
            require_image_mime if require_image_mime is not None else settings.require_image_mime
        )

    def validate_content_type(self, content_type: Optional[str]) -> str:
        """
        Check the request Content-Type and return its boundary.

        Raises:
            ValidationError: not multipart/form-data, or no boundary parameter.
        """
        content_type = content_type or ""
        if MULTIPART_FORM_DATA not in content_type.lower():
            raise ValidationError(
                message="Content-Type must be multipart/form-data",
                context={"content_type": content_type},
            )

        boundary = parse_boundary(content_type)
        if not boundary:
            raise ValidationError(
                message="Missing boundary in Content-Type",
                context={"content_type": content_type},
            )
        return boundary

    def validate_body(self, body: bytes) -> None:
        if not body:
            raise ValidationError(message="Request body is empty")

    def validate_file(self, content: Optional[bytes], content_type: Optional[str]) -> bytes:
        """
        Validate the extracted `file` part.

        Args:
            content: Part payload, or None when no `file` part was found.
            content_type: MIME type declared by the part, if any.

        Returns:
            The payload, unchanged.
        """
        if content is None:
            raise ValidationError(message="No file uploaded", field=FILE_FIELD)

        if len(content) == 0:
            raise ValidationError(message="Empty file", field=FILE_FIELD)

        self.validate_size(len(content))

        if self.require_image_mime:
            self.validate_mime_type(content_type)

        return content

    def validate_size(self, actual_size: int) -> None:
        if actual_size > self.max_file_size:
            max_mb = self.max_file_size / (1024 * 1024)
            raise ValidationError(
                message=f"File size ({actual_size / (1024 * 1024):.1f}MB) exceeds maximum of {max_mb:.0f}MB",
                field=FILE_FIELD,
                context={"max_size": self.max_file_size, "actual_size": actual_size},
            )

    def validate_mime_type(self, content_type: Optional[str]) -> None:
        """Reject parts whose declared type is absent or not image/*."""
        if not content_type or not content_type.lower().startswith("image/"):
            logger.info("Rejected upload with declared type %r", content_type)
            raise ValidationError(
                message="File must be an image",
                field=FILE_FIELD,
                context={"content_type": content_type},
            )


upload_service = UploadService()
