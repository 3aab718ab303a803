"""
PrintSize Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── make_image:      Builds PNG/JPEG bytes in memory, optionally with EXIF DPI
    ├── large_png:       PNG whose pixel count exceeds Pillow's default bomb limit
    ├── multipart_body:  Builds a raw multipart/form-data body for a boundary
    └── test_client:     HTTPX AsyncClient bound to the FastAPI app
"""

import os

# Override settings for testing BEFORE any application imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"
os.environ["REQUIRE_IMAGE_MIME"] = "true"

from io import BytesIO
from typing import Iterable, Optional, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from PIL import Image
from PIL.TiffImagePlugin import IFDRational

EXIF_X_RESOLUTION = 282
EXIF_Y_RESOLUTION = 283
EXIF_RESOLUTION_UNIT = 296


@pytest.fixture
def make_image():
    """
    Factory for in-memory image bytes.

    Usage:
        png = make_image(300, 300)
        jpeg = make_image(720, 480, fmt="JPEG", dpi=(300, 300))
        jfif = make_image(600, 600, fmt="JPEG", header_dpi=(300, 300))
        broken = make_image(10, 10, fmt="JPEG", exif=b"Exif\\x00\\x00garbage")

    dpi is written as EXIF XResolution/YResolution rationals; JPEG only.
    header_dpi is handed to Pillow's own writer (JPEG JFIF density, PNG pHYs).
    """

    def _make(
        width: int,
        height: int,
        fmt: str = "PNG",
        dpi: Optional[Tuple[float, float]] = None,
        exif: Optional[bytes] = None,
        header_dpi: Optional[Tuple[float, float]] = None,
    ) -> bytes:
        image = Image.new("RGB", (width, height), color=(255, 255, 255))
        buffer = BytesIO()
        save_kwargs = {}

        if dpi is not None:
            tags = Image.Exif()
            tags[EXIF_X_RESOLUTION] = IFDRational(dpi[0])
            tags[EXIF_Y_RESOLUTION] = IFDRational(dpi[1])
            tags[EXIF_RESOLUTION_UNIT] = 2  # inches
            save_kwargs["exif"] = tags.tobytes()
        elif exif is not None:
            save_kwargs["exif"] = exif
        if header_dpi is not None:
            save_kwargs["dpi"] = header_dpi

        image.save(buffer, format=fmt, **save_kwargs)
        return buffer.getvalue()

    return _make


@pytest.fixture(scope="session")
def large_png() -> bytes:
    """20000x10000 bilevel PNG: over Pillow's default pixel limit, tens of KB encoded."""
    buffer = BytesIO()
    Image.new("1", (20000, 10000)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def multipart_body():
    """
    Factory for raw multipart/form-data bodies.

    Each part is (name, data, filename, content_type); filename and
    content_type may be None to omit them from the part headers.
    """

    def _build(
        boundary: str,
        parts: Iterable[Tuple[str, bytes, Optional[str], Optional[str]]],
    ) -> bytes:
        chunks = []
        for name, data, filename, content_type in parts:
            disposition = f'Content-Disposition: form-data; name="{name}"'
            if filename is not None:
                disposition += f'; filename="{filename}"'
            headers = [disposition]
            if content_type is not None:
                headers.append(f"Content-Type: {content_type}")
            chunks.append(f"--{boundary}\r\n".encode())
            chunks.append(("\r\n".join(headers) + "\r\n\r\n").encode())
            chunks.append(data)
            chunks.append(b"\r\n")
        chunks.append(f"--{boundary}--\r\n".encode())
        return b"".join(chunks)

    return _build


@pytest_asyncio.fixture
async def test_client():
    """
    HTTPX AsyncClient routed directly to the FastAPI app (no server needed).

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from printsize.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
