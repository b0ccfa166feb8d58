"""
Audit endpoints.

POST /audits runs a full multi-URL check and returns the HealthCheckReport
JSON. Reports are not written to disk unless the request asks for a format.
"""

import logging
from typing import Any, Callable, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from a11y_health.constants import CHECKER_DESCRIPTIONS
from a11y_health.exceptions import ConfigurationError, PageCheckError
from a11y_health.models.config import HealthCheckConfig, build_config
from a11y_health.services.health_checker import AccessibilityHealthChecker
from a11y_health.utils.urls import is_valid_url

logger = logging.getLogger(__name__)
router = APIRouter()

# API runs produce no console/file output unless asked to
API_DEFAULTS: Dict[str, Any] = {"output": {"format": []}}


class AuditRequest(BaseModel):
    urls: List[str] = Field(..., min_length=1, description="Absolute http(s) URLs to audit")
    config: Dict[str, Any] = Field(default_factory=dict, description="Partial HealthCheckConfig")


CheckerFactory = Callable[[HealthCheckConfig], AccessibilityHealthChecker]


def get_checker_factory() -> CheckerFactory:
    return AccessibilityHealthChecker


@router.get("/checkers")
async def list_checkers():
    """Every known check type with a short description."""
    return [
        {"type": check_type.value, "description": description}
        for check_type, description in CHECKER_DESCRIPTIONS.items()
    ]


@router.post("/audits")
async def run_audit(
    request: AuditRequest,
    checker_factory: CheckerFactory = Depends(get_checker_factory)
):
    """Audit the given URLs and return the aggregated report."""
    invalid = [url for url in request.urls if not is_valid_url(url)]
    if invalid:
        raise HTTPException(422, f"Invalid URL: {invalid[0]}")

    try:
        config = build_config(API_DEFAULTS, request.config)
    except ConfigurationError as e:
        raise HTTPException(422, str(e))

    logger.info(f"Audit requested for {len(request.urls)} URLs")
    checker = checker_factory(config)
    try:
        report = await checker.check_urls(request.urls)
    except PageCheckError as e:
        logger.error(f"Audit failed: {e}")
        raise HTTPException(502, str(e))

    return report.to_json_dict()
