"""
PrintSize Backend — Health Check Route
========================================

What:  Liveness endpoint for load balancers and container health checks.
How:   The service has no dependencies to probe, so the answer is static.
"""

from fastapi import APIRouter

from printsize.schemas.dimensions import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok")
