"""Health check endpoints."""

from fastapi import APIRouter

from todo_mapper import __version__
from todo_mapper.api.dependencies import Registry
from todo_mapper.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(registry: Registry) -> HealthResponse:
    """
    Health check endpoint.

    Returns the service version and the languages it can scan.
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        languages=[lang.value for lang in registry.supported_languages],
    )


@router.get("/live")
async def liveness_check() -> dict:
    """
    Liveness probe for Kubernetes.

    Returns 200 if the service is alive.
    """
    return {"alive": True}
