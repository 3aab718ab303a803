"""
PrintSize Backend — Permissive CORS Header Middleware
=======================================================

What:  Adds Access-Control-Allow-Origin to every response.
Why:   Starlette's CORSMiddleware only answers requests that carry an Origin
       header; clients of this API expect the header unconditionally,
       including on error responses.

Preflight (OPTIONS) handling stays with CORSMiddleware in main.py.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from printsize.config import settings

ALLOW_ORIGIN_HEADER = "Access-Control-Allow-Origin"


class AllowOriginMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        if ALLOW_ORIGIN_HEADER not in response.headers:
            response.headers[ALLOW_ORIGIN_HEADER] = settings.cors_allow_origin
        return response
