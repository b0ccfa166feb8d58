"""
HTML Report Generator - a self-contained static page per run.

Renders:
- Run summary and WCAG compliance for the configured level
- Per-page score, severity counts and compliance badges
- Every issue with its element snapshot, fix and WCAG link
"""

import html
import logging
from typing import Iterable

from a11y_health.models.issues import AccessibilityIssue, PageHealthReport, Severity, WcagLevel
from a11y_health.models.reports import HealthCheckReport
from a11y_health.reporters.base import FileReporter

logger = logging.getLogger(__name__)


def _e(value) -> str:
    return html.escape(str(value), quote=True)


def score_class(score: int) -> str:
    if score >= 90:
        return "good"
    if score >= 70:
        return "fair"
    return "poor"


class HtmlReporter(FileReporter):
    """Writes a static HTML rendering of the report."""

    extension = "html"

    async def generate(self, report: HealthCheckReport) -> None:
        path = self.report_path()
        try:
            path.write_text(self.render(report), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write HTML report: {e}")
            raise

        self.last_path = path
        logger.info(f"HTML report saved to: {path}")

    def render(self, report: HealthCheckReport) -> str:
        generated = report.summary.timestamp.strftime("%Y-%m-%d %H:%M:%S %Z").strip()
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Accessibility Health Check Report</title>
    {self._styles()}
</head>
<body>
    <main class="container">
        <header class="header">
            <h1>Accessibility Health Check Report</h1>
            <p class="metadata">Generated on {_e(generated)}</p>
        </header>
        {self._summary_section(report)}
        {self._pages_section(report)}
    </main>
</body>
</html>
"""

    def _summary_section(self, report: HealthCheckReport) -> str:
        summary = report.summary
        level = report.configuration.wcag_level
        compliant = all(page.wcag_compliance.get(level, False) for page in report.pages)

        return f"""<section class="summary">
            <h2>Summary</h2>
            <div class="summary-grid">
                <div class="summary-item"><div class="summary-value">{summary.total_pages}</div><div class="summary-label">Pages Checked</div></div>
                <div class="summary-item"><div class="summary-value">{summary.total_issues}</div><div class="summary-label">Total Issues</div></div>
                <div class="summary-item"><div class="summary-value {score_class(summary.overall_score)}">{summary.overall_score}/100</div><div class="summary-label">Overall Score</div></div>
                <div class="summary-item"><div class="summary-value">{round(summary.duration_ms / 1000)}s</div><div class="summary-label">Duration</div></div>
            </div>
            <p class="compliance {'pass' if compliant else 'fail'}">WCAG {_e(level.value)}: {'Compliant' if compliant else 'Non-compliant'}</p>
        </section>"""

    def _pages_section(self, report: HealthCheckReport) -> str:
        pages = "\n".join(self._page_block(page) for page in report.pages)
        return f"""<section class="pages">
            <h2>Pages</h2>
            {pages}
        </section>"""

    def _page_block(self, page: PageHealthReport) -> str:
        badges = " ".join(
            f'<span class="badge {"pass" if page.wcag_compliance.get(level) else "fail"}">{level.value}</span>'
            for level in WcagLevel
        )
        counts = page.issues_by_severity
        issues = self._issue_list(page.issues) if page.issues else '<p class="clean">No issues found.</p>'

        return f"""<article class="page">
                <h3><a href="{_e(page.url)}">{_e(page.url)}</a></h3>
                <p>
                    Score: <strong class="{score_class(page.score)}">{page.score}/100</strong>
                    &middot; {counts.get(Severity.ERROR, 0)} errors
                    &middot; {counts.get(Severity.WARNING, 0)} warnings
                    &middot; {counts.get(Severity.INFO, 0)} info
                    &middot; {page.duration_ms}ms
                </p>
                <p>WCAG compliance: {badges}</p>
                {issues}
            </article>"""

    def _issue_list(self, issues: Iterable[AccessibilityIssue]) -> str:
        items = []
        for issue in issues:
            parts = [
                f'<span class="severity {issue.severity.value}">{issue.severity.value}</span>',
                f"<strong>{_e(issue.message)}</strong>",
                f'<span class="type">{_e(issue.type.value)} &middot; WCAG {_e(issue.wcag_reference)} ({issue.wcag_level.value})</span>',
                f"<p>{_e(issue.description)}</p>",
            ]
            if issue.element:
                parts.append(f"<code>{_e(issue.element.selector)}</code>")
                parts.append(f"<pre>{_e(issue.element.outer_html)}</pre>")
            if issue.suggested_fix:
                parts.append(f'<p class="fix">Fix: {_e(issue.suggested_fix)}</p>')
            if issue.help_url:
                parts.append(f'<a href="{_e(issue.help_url)}">Understanding WCAG {_e(issue.wcag_reference)}</a>')
            items.append(f'<li class="issue {issue.severity.value}">{"".join(parts)}</li>')
        return f'<ul class="issues">{"".join(items)}</ul>'

    def _styles(self) -> str:
        return """<style>
        * { box-sizing: border-box; }
        body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; margin: 0; background: #f5f5f5; color: #1f2937; }
        .container { max-width: 1100px; margin: 0 auto; padding: 24px; }
        .header { background: #1e3a8a; color: white; padding: 24px; border-radius: 8px; }
        .metadata { opacity: 0.85; }
        section, .page { background: white; border-radius: 8px; padding: 20px; margin-top: 20px; }
        .summary-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(180px, 1fr)); gap: 16px; }
        .summary-item { text-align: center; padding: 12px; background: #f9fafb; border-radius: 6px; }
        .summary-value { font-size: 2em; font-weight: 700; }
        .summary-label { color: #4b5563; }
        .good { color: #065f46; }
        .fair { color: #92400e; }
        .poor { color: #991b1b; }
        .badge { display: inline-block; padding: 2px 10px; border-radius: 12px; font-size: 0.85em; font-weight: 600; }
        .pass { background: #d1fae5; color: #065f46; }
        .fail { background: #fee2e2; color: #991b1b; }
        .compliance { padding: 8px 12px; border-radius: 6px; font-weight: 600; }
        .issues { list-style: none; padding: 0; }
        .issue { padding: 12px; margin: 8px 0; border-left: 4px solid #9ca3af; background: #f9fafb; border-radius: 4px; }
        .issue.error { border-left-color: #b91c1c; }
        .issue.warning { border-left-color: #b45309; }
        .issue.info { border-left-color: #1d4ed8; }
        .severity { text-transform: uppercase; font-size: 0.75em; font-weight: 700; margin-right: 8px; }
        .type { display: block; color: #4b5563; font-size: 0.85em; }
        pre { white-space: pre-wrap; word-break: break-all; background: #111827; color: #f9fafb; padding: 8px; border-radius: 4px; }
        .fix { color: #065f46; }
    </style>"""
