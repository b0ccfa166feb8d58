"""
Accessibility Health Check API

Endpoints:
- GET /health - Liveness and version
- GET /health/config - Non-sensitive process settings
- GET /checkers - Available accessibility checkers
- POST /audits - Audit a list of URLs and return the report
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from a11y_health import __version__
from a11y_health.routers import audits_router, health_router
from a11y_health.utils.config import settings
from a11y_health.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Accessibility Health Check API starting...")
    yield
    logger.info("Accessibility Health Check API shutting down...")


app = FastAPI(
    title="Accessibility Health Check API",
    description="WCAG accessibility audits of rendered web pages",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.ENABLE_DOCS else None,
    redoc_url="/redoc" if settings.ENABLE_DOCS else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(audits_router)


def run() -> None:
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
