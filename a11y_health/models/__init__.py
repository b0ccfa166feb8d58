"""Data models for the accessibility health checker."""

from a11y_health.models.issues import (
    WcagLevel,
    Severity,
    CheckType,
    ElementInfo,
    IssueLocation,
    AccessibilityIssue,
    CheckerResult,
    PageHealthReport,
)
from a11y_health.models.config import (
    OutputFormat,
    ChecksConfig,
    ThresholdsConfig,
    OutputConfig,
    ViewportConfig,
    BrowserConfig,
    HealthCheckConfig,
    build_config,
    load_config_file,
)
from a11y_health.models.reports import (
    ReportSummary,
    HealthCheckReport,
)
from a11y_health.models.scoring import (
    create_accessibility_issue,
    calculate_score,
    is_wcag_compliant,
)

__all__ = [
    'WcagLevel',
    'Severity',
    'CheckType',
    'ElementInfo',
    'IssueLocation',
    'AccessibilityIssue',
    'CheckerResult',
    'PageHealthReport',
    'OutputFormat',
    'ChecksConfig',
    'ThresholdsConfig',
    'OutputConfig',
    'ViewportConfig',
    'BrowserConfig',
    'HealthCheckConfig',
    'build_config',
    'load_config_file',
    'ReportSummary',
    'HealthCheckReport',
    'create_accessibility_issue',
    'calculate_score',
    'is_wcag_compliant',
]
