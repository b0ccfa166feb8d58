"""Services for the accessibility health checker."""

from a11y_health.services.browser_manager import BrowserManager, SessionState
from a11y_health.services.page_analyzer import PageAnalyzer
from a11y_health.services.page_auditor import PageAuditor
from a11y_health.services.health_checker import AccessibilityHealthChecker, chunk

__all__ = [
    "BrowserManager",
    "SessionState",
    "PageAnalyzer",
    "PageAuditor",
    "AccessibilityHealthChecker",
    "chunk",
]
