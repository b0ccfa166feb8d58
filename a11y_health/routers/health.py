"""Health check endpoints."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from a11y_health import __version__
from a11y_health.utils.config import settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "a11y-health-api",
        "version": __version__
    }


@router.get("/health/config")
async def config_check():
    """Show non-sensitive process settings."""
    return {
        "log_level": settings.LOG_LEVEL,
        "log_format": settings.LOG_FORMAT,
        "helper_timeout_ms": settings.HELPER_TIMEOUT_MS,
        "settle_delay_ms": settings.SETTLE_DELAY_MS,
        "accept_language": settings.ACCEPT_LANGUAGE,
        "docs_enabled": settings.ENABLE_DOCS
    }
