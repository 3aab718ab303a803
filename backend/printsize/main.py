"""
PrintSize Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance;
       run() starts it under uvicorn on HOST:PORT.
Who:   uvicorn (`uvicorn printsize.main:app`), the `printsize` console
       script, and the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────┐ ┌─────────┐ ┌──────────────┐ ┌──────┐   │
    │  │ Req ID │→│ Logging │→│ Allow-Origin │→│ CORS │   │
    │  └────────┘ └─────────┘ └──────────────┘ └──────┘   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌─────────────────┐               │
    │  │ POST /upload │ │ GET /health     │               │
    │  └──────────────┘ └─────────────────┘               │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ HTTP→status │ Other→500     │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from printsize import __version__
from printsize.config import settings
from printsize.exceptions import PrintSizeError
from printsize.logging_setup import setup_logging
from printsize.middleware.cors import ALLOW_ORIGIN_HEADER, AllowOriginMiddleware
from printsize.middleware.logging import RequestLoggingMiddleware
from printsize.middleware.request_id import RequestIDMiddleware, request_id_var
from printsize.routes import health, upload

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("PrintSize %s starting up", __version__)
    logger.info("Server listening on http://%s:%d", settings.host, settings.port)

    yield

    logger.info("PrintSize shutting down")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(status_code: int, content: dict) -> JSONResponse:
    """JSON error body with the CORS header always attached."""
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={ALLOW_ORIGIN_HEADER: settings.cors_allow_origin},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to `{"error": ...}` responses.

    Handler hierarchy:
        PrintSizeError          → its own status_code (400 / 405 / 500)
        StarletteHTTPException  → router status (404, 405)
        Exception (fallback)    → 500 with details
    """

    @app.exception_handler(PrintSizeError)
    async def handle_app_error(request: Request, exc: PrintSizeError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
        else:
            logger.warning("[%s] %s", rid, exc.message)
        return error_response(exc.status_code, exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            message = "Method not allowed"
        else:
            message = str(exc.detail)
        response = error_response(exc.status_code, {"error": message})
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(
            500,
            {"error": "Internal server error", "details": str(exc)},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="PrintSize API",
        description=(
            "Returns the physical print dimensions of an uploaded image, computed "
            "from its pixel size and embedded DPI (72 DPI when none is present)."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(AllowOriginMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(upload.router)
    app.include_router(health.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on settings.host:settings.port."""
    uvicorn.run(
        "printsize.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
