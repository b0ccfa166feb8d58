"""API routers."""

from a11y_health.routers.health import router as health_router
from a11y_health.routers.audits import router as audits_router

__all__ = [
    'health_router',
    'audits_router',
]
