"""
Issue and report models.

Defines the shared vocabulary written by checkers and the page auditor and
read by the orchestrator and reporters:
- AccessibilityIssue: a single immutable finding
- CheckerResult: what one checker produced on one page
- PageHealthReport: one page's scored outcome
  (the multi-URL aggregate lives in a11y_health.models.reports)
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WcagLevel(str, Enum):
    """WCAG conformance levels."""
    A = "A"
    AA = "AA"
    AAA = "AAA"


class Severity(str, Enum):
    """Issue urgency."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class CheckType(str, Enum):
    """Types of accessibility checks."""
    ALT_TEXT = "alt-text"
    COLOR_CONTRAST = "color-contrast"
    HEADING_STRUCTURE = "heading-structure"
    ARIA_ATTRIBUTES = "aria-attributes"
    KEYBOARD_NAVIGATION = "keyboard-navigation"
    FORM_LABELS = "form-labels"
    FOCUS_INDICATORS = "focus-indicators"
    LANDMARK_REGIONS = "landmark-regions"


class ReportModel(BaseModel):
    """Base for serialized models: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ElementInfo(ReportModel):
    """Snapshot of the element an issue points at."""
    selector: str
    tag_name: str
    attributes: Dict[str, str] = Field(default_factory=dict)
    outer_html: str = Field(default="", alias="outerHTML")
    inner_text: Optional[str] = None


class IssueLocation(ReportModel):
    """Where an issue lives. Line/column are never known for rendered pages."""
    xpath: str = ""
    line: Optional[int] = None
    column: Optional[int] = None


class AccessibilityIssue(ReportModel):
    """A single finding. Build with create_accessibility_issue()."""
    id: str
    type: CheckType
    severity: Severity
    wcag_level: WcagLevel
    wcag_reference: str
    message: str
    description: str
    element: Optional[ElementInfo] = None
    location: IssueLocation = Field(default_factory=IssueLocation)
    suggested_fix: Optional[str] = None
    help_url: Optional[str] = None


class CheckerResult(ReportModel):
    """Issues produced by one checker on one page."""
    type: CheckType
    issues: List[AccessibilityIssue] = Field(default_factory=list)
    duration_ms: int = 0


class PageHealthReport(ReportModel):
    """Accessibility outcome for a single page."""
    url: str
    timestamp: datetime
    duration_ms: int
    total_issues: int
    issues_by_severity: Dict[Severity, int]
    issues_by_type: Dict[CheckType, int]
    wcag_compliance: Dict[WcagLevel, bool]
    issues: List[AccessibilityIssue] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)
