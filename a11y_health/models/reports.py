"""Aggregate report for a multi-URL health check run."""

from datetime import datetime
from typing import List

from pydantic import Field

from a11y_health.models.config import HealthCheckConfig
from a11y_health.models.issues import PageHealthReport, ReportModel


class ReportSummary(ReportModel):
    """Run-level totals."""
    total_pages: int
    total_issues: int
    overall_score: int = Field(ge=0, le=100)
    timestamp: datetime
    duration_ms: int


class HealthCheckReport(ReportModel):
    """Complete health check report, handed to reporters read-only."""
    summary: ReportSummary
    pages: List[PageHealthReport] = Field(default_factory=list)
    configuration: HealthCheckConfig

    def to_json_dict(self) -> dict:
        """camelCase dictionary with ISO-8601 timestamps."""
        return self.model_dump(mode="json", by_alias=True)
