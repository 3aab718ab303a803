"""
PrintSize Backend — Serverless Function Adapter
=================================================

What:  Function-as-a-service entry points (Netlify / AWS Lambda style).
How:   The platform passes an event dict and expects a response dict:

    event    = {"httpMethod": "POST", "headers": {...}, "body": "...",
                "isBase64Encoded": True}
    response = {"statusCode": 200, "headers": {...}, "body": "<json>"}

The body arrives as a string, so the file part is located with the raw
multipart extractor instead of the framework's form parser. Validation and
the measurement pipeline are the same ones the FastAPI route uses.
"""

import asyncio
import base64
import binascii
import json
import logging
from typing import Any, Dict, Mapping, Optional

from printsize.config import settings
from printsize.exceptions import MethodNotAllowedError, PrintSizeError, ValidationError
from printsize.logging_setup import setup_logging
from printsize.services.image_service import process_image
from printsize.services.multipart import find_part
from printsize.services.upload_service import FILE_FIELD, upload_service

logger = logging.getLogger(__name__)

_logging_configured = False


def _ensure_logging() -> None:
    global _logging_configured
    if not _logging_configured:
        setup_logging()
        _logging_configured = True


def json_response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": settings.cors_allow_origin,
        },
        "body": json.dumps(payload),
    }


def header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    """Case-insensitive header lookup; platforms differ in header casing."""
    if not headers:
        return None
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def decode_body(event: Mapping[str, Any]) -> bytes:
    """Raw request bytes from the event, undoing base64 transport encoding."""
    body = event.get("body") or b""
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValidationError(message="Request body is not valid base64") from e
    if isinstance(body, bytes):
        return body
    return body.encode("utf-8")


async def handle_upload(event: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate the event, extract `file` and measure it."""
    method = (event.get("httpMethod") or "").upper()

    try:
        if method != "POST":
            raise MethodNotAllowedError(method=method)

        content_type = header(event.get("headers"), "content-type")
        logger.debug("Content-Type: %s", content_type)
        boundary = upload_service.validate_content_type(content_type)

        body = decode_body(event)
        logger.debug("Body length: %d", len(body))
        upload_service.validate_body(body)

        part = find_part(body, boundary, FILE_FIELD)
        content = upload_service.validate_file(
            part.data if part is not None else None,
            part.content_type if part is not None else None,
        )

        dimensions = await process_image(content)
    except PrintSizeError as e:
        if e.status_code >= 500:
            logger.error("Upload function error: %s | Context: %s", e.message, e.context)
        else:
            logger.warning("Upload rejected: %s", e.message)
        return json_response(e.status_code, e.to_dict())
    except Exception as e:
        logger.error("Upload function error: %s", e, exc_info=True)
        return json_response(500, {"error": "Internal server error", "details": str(e)})

    return json_response(200, dimensions.model_dump())


def handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """Upload function entry point."""
    _ensure_logging()
    return asyncio.run(handle_upload(event))


def diagnostics_handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """Echo the shape of the incoming event; used to debug platform wiring."""
    _ensure_logging()
    body = event.get("body")
    return json_response(
        200,
        {
            "message": "Test endpoint working",
            "method": event.get("httpMethod"),
            "headers": dict(event.get("headers") or {}),
            "bodyLength": len(body) if body else 0,
            "isBase64": bool(event.get("isBase64Encoded")),
        },
    )
