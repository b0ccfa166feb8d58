"""Console report: a human-readable summary on stdout."""

import sys
from collections import Counter
from typing import List, Optional, TextIO

from a11y_health.models.issues import PageHealthReport, Severity
from a11y_health.models.reports import HealthCheckReport
from a11y_health.models.scoring import severity_rank
from a11y_health.reporters.base import Reporter

RULE = "─" * 60
TOP_ISSUES = 3

SEVERITY_ICONS = {
    Severity.ERROR: "✗",
    Severity.WARNING: "⚠",
    Severity.INFO: "ℹ",
}


class ConsoleReporter(Reporter):
    """Prints summary, per-page results and an issue breakdown."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def _write(self, line: str = "") -> None:
        print(line, file=self.stream or sys.stdout)

    async def generate(self, report: HealthCheckReport) -> None:
        for line in self.render(report):
            self._write(line)

    def render(self, report: HealthCheckReport) -> List[str]:
        summary = report.summary
        level = report.configuration.wcag_level

        lines = [
            "",
            "Accessibility Health Check Report",
            RULE,
            "",
            "Summary:",
            f"  Pages checked: {summary.total_pages}",
            f"  Total issues: {summary.total_issues}",
            f"  Overall score: {summary.overall_score}/100",
            f"  Duration: {round(summary.duration_ms / 1000)}s",
        ]

        compliant = all(page.wcag_compliance.get(level, False) for page in report.pages)
        lines.append(f"  WCAG {level.value}: {'✓ Compliant' if compliant else '✗ Non-compliant'}")

        lines += ["", "Pages:"]
        for page in report.pages:
            lines += self._render_page(page)

        if summary.total_issues > 0:
            lines += ["", "Issues Breakdown:"]
            lines += self._render_breakdown(report)

        lines += ["", RULE]
        if summary.total_issues == 0:
            lines.append("No accessibility issues found! Great job!")
        else:
            lines.append("Fix the issues above to improve accessibility")
        return lines

    def _render_page(self, page: PageHealthReport) -> List[str]:
        lines = [
            "",
            f"  {page.url}",
            f"    Score: {page.score}/100",
            f"    Issues: {page.total_issues}",
        ]
        if page.total_issues == 0:
            return lines

        counts = page.issues_by_severity
        breakdown = []
        if counts.get(Severity.ERROR):
            breakdown.append(f"{counts[Severity.ERROR]} errors")
        if counts.get(Severity.WARNING):
            breakdown.append(f"{counts[Severity.WARNING]} warnings")
        if counts.get(Severity.INFO):
            breakdown.append(f"{counts[Severity.INFO]} info")
        lines.append(f"    {', '.join(breakdown)}")

        # sorted() copies, the report itself is never reordered
        for issue in sorted(page.issues, key=severity_rank)[:TOP_ISSUES]:
            lines.append(f"      {SEVERITY_ICONS[issue.severity]} {issue.message}")
            if issue.suggested_fix:
                lines.append(f"        Fix: {issue.suggested_fix}")

        if len(page.issues) > TOP_ISSUES:
            lines.append(f"      ... and {len(page.issues) - TOP_ISSUES} more issues")
        return lines

    def _render_breakdown(self, report: HealthCheckReport) -> List[str]:
        by_severity: Counter = Counter()
        by_type: Counter = Counter()
        for page in report.pages:
            for issue in page.issues:
                by_severity[issue.severity] += 1
                by_type[issue.type] += 1

        lines = ["", "  By Severity:"]
        for severity, count in by_severity.most_common():
            lines.append(f"    {SEVERITY_ICONS[severity]} {severity.value}: {count}")

        lines += ["", "  By Type:"]
        for check_type, count in by_type.most_common():
            lines.append(f"    • {check_type.value}: {count}")
        return lines
