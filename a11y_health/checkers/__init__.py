"""Rule-based accessibility checkers and their static registry."""

from typing import Tuple

from a11y_health.checkers.base import AccessibilityChecker, ScriptChecker
from a11y_health.checkers.alt_text import AltTextChecker
from a11y_health.checkers.color_contrast import ColorContrastChecker
from a11y_health.checkers.heading_structure import HeadingStructureChecker
from a11y_health.checkers.aria_attributes import AriaAttributesChecker
from a11y_health.checkers.form_labels import FormLabelsChecker

# Registry order fixes the order of issues in reports.
ALL_CHECKERS: Tuple[AccessibilityChecker, ...] = (
    AltTextChecker(),
    ColorContrastChecker(),
    HeadingStructureChecker(),
    AriaAttributesChecker(),
    FormLabelsChecker(),
)

__all__ = [
    'AccessibilityChecker',
    'ScriptChecker',
    'AltTextChecker',
    'ColorContrastChecker',
    'HeadingStructureChecker',
    'AriaAttributesChecker',
    'FormLabelsChecker',
    'ALL_CHECKERS',
]
