"""FastAPI dependency injection."""

from typing import Annotated

from fastapi import Depends

from todo_mapper.parsers import FrontEndRegistry, get_front_end_registry
from todo_mapper.services import ScanningService


def get_registry() -> FrontEndRegistry:
    """Dependency for the front-end registry."""
    return get_front_end_registry()


def get_scanning_service(
    registry: FrontEndRegistry = Depends(get_registry),
) -> ScanningService:
    """Dependency for ScanningService."""
    return ScanningService(registry=registry)


# Type aliases for injected dependencies
Registry = Annotated[FrontEndRegistry, Depends(get_registry)]
ScanService = Annotated[ScanningService, Depends(get_scanning_service)]
