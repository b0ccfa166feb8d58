"""
Issue construction, scoring and compliance.

Every AccessibilityIssue is created here so ids and WCAG references are
assigned the same way for all checkers.
"""

import math
import time
import uuid
from typing import Dict, Iterable, List, Optional, Sequence

from a11y_health.constants import (
    NO_REFERENCE,
    SEVERITY_WEIGHTS,
    WCAG_REFERENCES,
    WCAG_UNDERSTANDING_URL,
)
from a11y_health.models.issues import (
    AccessibilityIssue,
    CheckType,
    ElementInfo,
    IssueLocation,
    Severity,
    WcagLevel,
)


def generate_issue_id() -> str:
    """Time-based prefix plus random suffix; unique within a run."""
    return f"issue-{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}"


def get_wcag_reference(check_type: CheckType, level: WcagLevel) -> Optional[str]:
    return WCAG_REFERENCES.get(check_type, {}).get(level)


def get_wcag_url(reference: str) -> str:
    return WCAG_UNDERSTANDING_URL.format(reference=reference)


def create_accessibility_issue(
    check_type: CheckType,
    severity: Severity,
    wcag_level: WcagLevel,
    message: str,
    description: str,
    element: Optional[ElementInfo] = None,
    location: Optional[IssueLocation] = None,
    suggested_fix: Optional[str] = None,
) -> AccessibilityIssue:
    """
    Create an immutable accessibility issue.

    The WCAG reference is looked up from (check_type, wcag_level). When no
    clause is registered the reference is "N/A" and no help URL is attached.
    """
    reference = get_wcag_reference(check_type, wcag_level)

    return AccessibilityIssue(
        id=generate_issue_id(),
        type=check_type,
        severity=severity,
        wcag_level=wcag_level,
        wcag_reference=reference or NO_REFERENCE,
        message=message,
        description=description,
        element=element,
        location=location or IssueLocation(),
        suggested_fix=suggested_fix or None,
        help_url=get_wcag_url(reference) if reference else None,
    )


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounded up (84.5 -> 85)."""
    return int(math.floor(value + 0.5))


def calculate_score(issues: Iterable[AccessibilityIssue]) -> int:
    """100 minus 10/5/1 per error/warning/info issue, floored at 0."""
    penalty = sum(SEVERITY_WEIGHTS[issue.severity] for issue in issues)
    return round_half_up(max(0, 100 - penalty))


def is_wcag_compliant(issues: Iterable[AccessibilityIssue], level: WcagLevel) -> bool:
    """False iff an error-severity issue is tagged with exactly this level."""
    return not any(
        issue.wcag_level == level and issue.severity == Severity.ERROR
        for issue in issues
    )


def wcag_compliance(issues: Sequence[AccessibilityIssue]) -> Dict[WcagLevel, bool]:
    return {level: is_wcag_compliant(issues, level) for level in WcagLevel}


def count_by_severity(issues: Sequence[AccessibilityIssue]) -> Dict[Severity, int]:
    counts = {severity: 0 for severity in Severity}
    for issue in issues:
        counts[issue.severity] += 1
    return counts


def count_by_type(issues: Sequence[AccessibilityIssue]) -> Dict[CheckType, int]:
    """Counts for every known check type, zero-filled."""
    counts = {check_type: 0 for check_type in CheckType}
    for issue in issues:
        counts[issue.type] += 1
    return counts


def severity_rank(issue: AccessibilityIssue) -> int:
    """Sort key: errors first."""
    order: List[Severity] = [Severity.ERROR, Severity.WARNING, Severity.INFO]
    return order.index(issue.severity)
