"""API Routes for Vrishti."""

from vrishti.infrastructure.api.routes.auth_router import router as auth_router
from vrishti.infrastructure.api.routes.wastes_router import router as wastes_router

__all__ = [
    "auth_router",
    "wastes_router",
]
