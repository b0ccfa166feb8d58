"""
Color contrast checker (WCAG 1.4.3 / 1.4.6).

Colors are collected in the page; ratios are computed here so the
configured threshold and the run's WCAG level apply. Issues carry the run's
target level because the threshold itself is configurable.
"""

import logging
import time
from typing import Any, Dict, List

from a11y_health.checkers.base import AccessibilityChecker, issues_from_findings, scan_script
from a11y_health.models.config import HealthCheckConfig
from a11y_health.models.issues import CheckerResult, CheckType
from a11y_health.utils.colors import flatten, get_contrast_ratio, is_transparent

logger = logging.getLogger(__name__)

# Below this ratio a failure is an error rather than a warning.
ERROR_RATIO = 3.0

TEXT_COLOR_SCAN = scan_script(r"""
  const selector = 'p, span, div, h1, h2, h3, h4, h5, h6, a, button, input, textarea, select, label, li, td, th';
  const candidates = [];
  for (const element of Array.from(document.querySelectorAll(selector))) {
    const text = (element.textContent || '').trim();
    if (!text) continue;

    const style = window.getComputedStyle(element);
    const background = style.backgroundColor;
    if (!background || background === 'transparent' || background === 'rgba(0, 0, 0, 0)') continue;

    const className = typeof element.className === 'string' ? element.className : '';
    candidates.push({
      ...describe(element, { class: className }, text),
      color: style.color,
      backgroundColor: background,
    });
  }
  return candidates;
""")


class ColorContrastChecker(AccessibilityChecker):
    """Text must meet the configured contrast ratio against its background."""

    type = CheckType.COLOR_CONTRAST

    async def check(self, page, config: HealthCheckConfig) -> CheckerResult:
        started = time.monotonic()
        candidates = await page.evaluate(TEXT_COLOR_SCAN, None) or []

        findings = self.evaluate_candidates(candidates, config.thresholds.color_contrast_ratio)
        issues = issues_from_findings(self.type, findings, config.wcag_level)

        return CheckerResult(
            type=self.type,
            issues=issues,
            duration_ms=int((time.monotonic() - started) * 1000)
        )

    def evaluate_candidates(
        self,
        candidates: List[Dict[str, Any]],
        threshold: float
    ) -> List[Dict[str, Any]]:
        """Keep the candidates whose contrast ratio is below the threshold."""
        findings = []
        for candidate in candidates:
            color = candidate.get("color", "")
            background = candidate.get("backgroundColor", "")
            if is_transparent(background):
                continue

            # Translucent backgrounds are composited over white, text over the result
            try:
                background_hex = flatten(background)
                color_hex = flatten(color, background_hex)
                ratio = get_contrast_ratio(color_hex, background_hex)
            except ValueError:
                logger.debug(f"Skipping unparseable colors {color!r} on {background!r}")
                continue

            if ratio >= threshold:
                continue

            findings.append({
                "element": candidate.get("element"),
                "xpath": candidate.get("xpath"),
                "severity": "error" if ratio < ERROR_RATIO else "warning",
                "message": f"Poor color contrast ratio: {ratio:.2f}:1",
                "description": (
                    f"Text has insufficient contrast ratio. The configured minimum is "
                    f"{threshold:g}:1 (WCAG AA requires 4.5:1 for normal text, 3:1 for large text)."
                ),
                "suggestedFix": (
                    f"Increase contrast between text ({color_hex}) and "
                    f"background ({background_hex}) colors"
                ),
            })
        return findings
