"""Accessibility health checker: WCAG audits of rendered web pages."""

__version__ = "1.0.0"

from a11y_health.exceptions import (
    HealthCheckError,
    ConfigurationError,
    SessionError,
    NavigationError,
    StabilizationError,
)
from a11y_health.models import (
    WcagLevel,
    Severity,
    CheckType,
    AccessibilityIssue,
    PageHealthReport,
    HealthCheckReport,
    HealthCheckConfig,
    build_config,
    calculate_score,
    create_accessibility_issue,
)
from a11y_health.services import AccessibilityHealthChecker

__all__ = [
    "__version__",
    "HealthCheckError",
    "ConfigurationError",
    "SessionError",
    "NavigationError",
    "StabilizationError",
    "WcagLevel",
    "Severity",
    "CheckType",
    "AccessibilityIssue",
    "PageHealthReport",
    "HealthCheckReport",
    "HealthCheckConfig",
    "build_config",
    "calculate_score",
    "create_accessibility_issue",
    "AccessibilityHealthChecker",
]
