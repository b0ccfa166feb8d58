"""
Checker contract.

Every checker is a stateless scanner with a fixed ``type`` and one
``check(page, config)`` coroutine. It reads the DOM through a single
``page.evaluate`` scan and must not throw for predictable absence (no
images, no forms, ...); it returns an empty issue list instead.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

from a11y_health.models.config import HealthCheckConfig
from a11y_health.models.issues import (
    AccessibilityIssue,
    CheckerResult,
    CheckType,
    ElementInfo,
    IssueLocation,
    Severity,
    WcagLevel,
)
from a11y_health.models.scoring import create_accessibility_issue

# Shared in-page helpers prepended to every scan script.
DOM_HELPERS = r"""
  const selectorFor = (el) => {
    if (el.id) return `#${el.id}`;
    const classes = (typeof el.className === 'string' ? el.className : '')
      .split(' ').filter((c) => c.length > 0);
    if (classes.length > 0) return `${el.tagName.toLowerCase()}.${classes.join('.')}`;
    return el.tagName.toLowerCase();
  };
  const xpathFor = (el) => {
    if (el.id) return `//*[@id="${el.id}"]`;
    const parts = [];
    let current = el;
    while (current && current.nodeType === Node.ELEMENT_NODE) {
      let part = current.nodeName.toLowerCase();
      const parent = current.parentElement;
      if (parent) {
        const siblings = Array.from(parent.children).filter((s) => s.nodeName === current.nodeName);
        if (siblings.length > 1) part += `[${siblings.indexOf(current) + 1}]`;
      }
      parts.unshift(part);
      current = parent;
    }
    return '/' + parts.join('/');
  };
  const describe = (el, attributes, innerText) => ({
    element: {
      selector: selectorFor(el),
      tagName: el.tagName.toLowerCase(),
      attributes: attributes || {},
      outerHTML: el.outerHTML.substring(0, 500),
      ...(innerText !== undefined ? { innerText: innerText.substring(0, 100) } : {}),
    },
    xpath: xpathFor(el),
  });
"""


def scan_script(body: str, argument: str = "_arg") -> str:
    """Wrap a scan body into a page function with the DOM helpers in scope."""
    return f"({argument}) => {{\n{DOM_HELPERS}\n{body}\n}}"


def issues_from_findings(
    check_type: CheckType,
    findings: Iterable[Dict[str, Any]],
    wcag_level: WcagLevel
) -> List[AccessibilityIssue]:
    """Turn raw in-page findings into issues, preserving scan order."""
    issues = []
    for finding in findings:
        element = finding.get("element")
        issues.append(create_accessibility_issue(
            check_type,
            Severity(finding.get("severity", "error")),
            wcag_level,
            finding["message"],
            finding.get("description", ""),
            element=ElementInfo.model_validate(element) if element else None,
            location=IssueLocation(xpath=finding.get("xpath") or ""),
            suggested_fix=finding.get("suggestedFix"),
        ))
    return issues


class AccessibilityChecker(ABC):
    """Interface implemented by every rule scanner."""

    type: CheckType

    @abstractmethod
    async def check(self, page, config: HealthCheckConfig) -> CheckerResult:
        """Scan one page and report what was found."""
        pass


class ScriptChecker(AccessibilityChecker):
    """Checker backed by one in-page scan script."""

    script: str
    wcag_level: WcagLevel = WcagLevel.A

    def script_argument(self, config: HealthCheckConfig) -> Any:
        return None

    def issue_level(self, config: HealthCheckConfig) -> WcagLevel:
        return self.wcag_level

    async def check(self, page, config: HealthCheckConfig) -> CheckerResult:
        started = time.monotonic()
        findings = await page.evaluate(self.script, self.script_argument(config))
        issues = issues_from_findings(self.type, findings or [], self.issue_level(config))
        return CheckerResult(
            type=self.type,
            issues=issues,
            duration_ms=int((time.monotonic() - started) * 1000)
        )
