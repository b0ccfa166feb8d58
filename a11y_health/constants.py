"""WCAG clause lookup and other static tables."""

from typing import Dict, Optional

from a11y_health.models.issues import CheckType, Severity, WcagLevel

WCAG_UNDERSTANDING_URL = "https://www.w3.org/WAI/WCAG21/Understanding/{reference}.html"

# Sentinel for (check type, level) pairs with no registered success criterion
NO_REFERENCE = "N/A"

WCAG_REFERENCES: Dict[CheckType, Dict[WcagLevel, Optional[str]]] = {
    CheckType.ALT_TEXT: {
        WcagLevel.A: "1.1.1",
        WcagLevel.AA: "1.1.1",
        WcagLevel.AAA: "1.1.1",
    },
    CheckType.COLOR_CONTRAST: {
        WcagLevel.A: None,
        WcagLevel.AA: "1.4.3",
        WcagLevel.AAA: "1.4.6",
    },
    CheckType.HEADING_STRUCTURE: {
        WcagLevel.A: "1.3.1",
        WcagLevel.AA: "1.3.1",
        WcagLevel.AAA: "1.3.1",
    },
    CheckType.ARIA_ATTRIBUTES: {
        WcagLevel.A: "4.1.2",
        WcagLevel.AA: "4.1.2",
        WcagLevel.AAA: "4.1.2",
    },
    CheckType.KEYBOARD_NAVIGATION: {
        WcagLevel.A: "2.1.1",
        WcagLevel.AA: "2.1.1",
        WcagLevel.AAA: "2.1.3",
    },
    CheckType.FORM_LABELS: {
        WcagLevel.A: "1.3.1",
        WcagLevel.AA: "1.3.1",
        WcagLevel.AAA: "1.3.1",
    },
    CheckType.FOCUS_INDICATORS: {
        WcagLevel.A: "2.4.7",
        WcagLevel.AA: "2.4.7",
        WcagLevel.AAA: "2.4.7",
    },
    CheckType.LANDMARK_REGIONS: {
        WcagLevel.A: "1.3.1",
        WcagLevel.AA: "1.3.1",
        WcagLevel.AAA: "1.3.1",
    },
}

SEVERITY_WEIGHTS: Dict[Severity, int] = {
    Severity.ERROR: 10,
    Severity.WARNING: 5,
    Severity.INFO: 1,
}

CHECKER_DESCRIPTIONS: Dict[CheckType, str] = {
    CheckType.ALT_TEXT: "Checks for missing or inadequate alt text on images",
    CheckType.COLOR_CONTRAST: "Validates color contrast ratios for text elements",
    CheckType.HEADING_STRUCTURE: "Ensures proper heading hierarchy and structure",
    CheckType.ARIA_ATTRIBUTES: "Validates ARIA attributes and roles",
    CheckType.FORM_LABELS: "Checks for proper form labeling and associations",
    CheckType.FOCUS_INDICATORS: "Ensures visible focus indicators for interactive elements",
    CheckType.KEYBOARD_NAVIGATION: "Tests keyboard accessibility and navigation",
    CheckType.LANDMARK_REGIONS: "Validates proper use of landmark regions",
}
