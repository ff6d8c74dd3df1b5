"""API route modules."""

from todo_mapper.api.routes.comments import router as comments_router
from todo_mapper.api.routes.health import router as health_router

__all__ = [
    "comments_router",
    "health_router",
]
