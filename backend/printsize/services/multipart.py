"""
PrintSize Backend — Multipart Extractor
=========================================

What:  Minimal multipart/form-data decoder for entry points that receive the
       raw request body (the serverless adapter).
Why:   Serverless events hand us the body as a string, not a stream, so the
       framework's form parser is not available there.
How:   Split the body on `--{boundary}`, split each segment at the first blank
       line into headers and payload, and match the part's `name="..."`.

Body layout:
    --XYZ\\r\\n
    Content-Disposition: form-data; name="file"; filename="a.png"\\r\\n
    Content-Type: image/png\\r\\n
    \\r\\n
    <payload>\\r\\n
    --XYZ--\\r\\n

`extract()` returns None when the field does not exist and b"" when it exists
but is empty; callers report the two cases differently.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional

HEADER_SEPARATOR = b"\r\n\r\n"
LINE_TERMINATOR = b"\r\n"

_NAME_RE = re.compile(rb'(?<![\w*])name="([^"]*)"', re.IGNORECASE)
_FILENAME_RE = re.compile(rb'filename="([^"]*)"', re.IGNORECASE)
_CONTENT_TYPE_RE = re.compile(rb"^content-type:\s*([^\r\n;]+)", re.IGNORECASE | re.MULTILINE)
_BOUNDARY_RE = re.compile(r"boundary=([^;]*)", re.IGNORECASE)


@dataclass
class FormPart:
    """One decoded part of a multipart body."""

    name: str
    data: bytes
    filename: Optional[str] = None
    content_type: Optional[str] = None


def parse_boundary(content_type: str) -> Optional[str]:
    """
    Return the boundary parameter of a multipart Content-Type header.

    Handles quoted values and trailing parameters:
        'multipart/form-data; boundary="abc"; charset=utf-8' -> 'abc'
    """
    match = _BOUNDARY_RE.search(content_type)
    if match is None:
        return None
    boundary = match.group(1).strip().strip('"')
    return boundary or None


def _decode(value: bytes) -> str:
    return value.decode("utf-8", errors="replace")


def _parse_part(segment: bytes) -> Optional[FormPart]:
    if HEADER_SEPARATOR not in segment:
        return None

    headers, payload = segment.split(HEADER_SEPARATOR, 1)

    name_match = _NAME_RE.search(headers)
    if name_match is None:
        return None

    if payload.endswith(LINE_TERMINATOR):
        payload = payload[: -len(LINE_TERMINATOR)]

    filename_match = _FILENAME_RE.search(headers)
    content_type_match = _CONTENT_TYPE_RE.search(headers.lstrip(b"\r\n"))

    return FormPart(
        name=_decode(name_match.group(1)),
        data=payload,
        filename=_decode(filename_match.group(1)) if filename_match else None,
        content_type=_decode(content_type_match.group(1)).strip() if content_type_match else None,
    )


def iter_parts(body: bytes, boundary: str) -> Iterator[FormPart]:
    """Yield every part found between successive boundary markers."""
    marker = b"--" + boundary.encode("latin-1")

    start = body.find(marker)
    while start != -1:
        segment_start = start + len(marker)
        end = body.find(marker, segment_start)
        if end == -1:
            break

        part = _parse_part(body[segment_start:end])
        if part is not None:
            yield part

        start = end


def find_part(body: bytes, boundary: str, field_name: str) -> Optional[FormPart]:
    """First part named `field_name`, or None."""
    for part in iter_parts(body, boundary):
        if part.name == field_name:
            return part
    return None


def extract(body: bytes, boundary: str, field_name: str) -> Optional[bytes]:
    """
    Raw bytes of the form field `field_name`.

    Returns:
        None if the body has no such field (or no boundary at all),
        b"" if the field is present but empty, the payload otherwise.
    """
    part = find_part(body, boundary, field_name)
    if part is None:
        return None
    return part.data
