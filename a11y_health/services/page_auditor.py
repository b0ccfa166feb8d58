"""
Page Auditor.

Audits one open page:
- Navigates and waits for the page to stabilize
- Runs every enabled checker concurrently against the page
- Merges checker output into a scored PageHealthReport

A checker that raises or exceeds the page timeout is a soft failure: it is
logged and contributes no issues. Navigation and stabilization failures fail
the whole page.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from a11y_health.checkers import ALL_CHECKERS, AccessibilityChecker
from a11y_health.exceptions import NavigationError, StabilizationError
from a11y_health.models.config import HealthCheckConfig
from a11y_health.models.issues import CheckerResult, PageHealthReport
from a11y_health.models.scoring import (
    calculate_score,
    count_by_severity,
    count_by_type,
    wcag_compliance,
)
from a11y_health.services.page_analyzer import PageAnalyzer

logger = logging.getLogger(__name__)

BODY_HAS_CONTENT_EXPRESSION = (
    "() => !!(document.body && document.body.innerText && document.body.innerText.trim())"
)


class PageAuditor:
    """Runs the checker registry against one page at a time."""

    def __init__(
        self,
        config: HealthCheckConfig,
        checkers: Sequence[AccessibilityChecker] = ALL_CHECKERS,
        helper_timeout_ms: Optional[int] = None,
        settle_delay_ms: Optional[int] = None
    ):
        self.config = config
        self.checkers = tuple(checkers)
        self.helper_timeout_ms = helper_timeout_ms
        self.settle_delay_ms = settle_delay_ms

    def enabled_checkers(self) -> List[AccessibilityChecker]:
        """Registry filtered to enabled minus disabled, in registry order."""
        return [c for c in self.checkers if self.config.checks.is_enabled(c.type)]

    async def audit(self, page, url: str) -> PageHealthReport:
        """
        Audit a page. The page stays owned by the caller.

        Raises:
            NavigationError: If the page could not be loaded
            StabilizationError: If the inspection helper never initialized
        """
        started = time.monotonic()

        await self._navigate(page, url)
        await self._stabilize(page, url)

        checkers = self.enabled_checkers()
        logger.debug(f"Running {len(checkers)} checkers on {url}")

        results = await asyncio.gather(
            *[self._run_checker(checker, page, url) for checker in checkers]
        )

        issues = [issue for result in results for issue in result.issues]
        duration_ms = int((time.monotonic() - started) * 1000)

        report = PageHealthReport(
            url=url,
            timestamp=datetime.now(timezone.utc),
            duration_ms=duration_ms,
            total_issues=len(issues),
            issues_by_severity=count_by_severity(issues),
            issues_by_type=count_by_type(issues),
            wcag_compliance=wcag_compliance(issues),
            issues=issues,
            score=calculate_score(issues),
        )

        logger.info(
            f"Checked {url}: {report.total_issues} issues, score {report.score} "
            f"({duration_ms}ms)"
        )
        return report

    async def _navigate(self, page, url: str) -> None:
        try:
            response = await page.goto(url, wait_until="networkidle")
        except Exception as e:
            raise NavigationError(url, e) from e

        if response is not None and not response.ok:
            has_body = await page.evaluate(BODY_HAS_CONTENT_EXPRESSION)
            if not has_body:
                raise NavigationError(url, f"HTTP {response.status} with no renderable body")
            logger.warning(f"{url} returned HTTP {response.status}, auditing the rendered error page")

    async def _stabilize(self, page, url: str) -> None:
        analyzer = PageAnalyzer(
            page,
            helper_timeout_ms=self.helper_timeout_ms,
            settle_delay_ms=self.settle_delay_ms
        )
        try:
            await analyzer.wait_for_accessibility_tree()
        except Exception as e:
            raise StabilizationError(url, e) from e

    async def _run_checker(
        self,
        checker: AccessibilityChecker,
        page,
        url: str
    ) -> CheckerResult:
        started = time.monotonic()
        try:
            return await asyncio.wait_for(
                checker.check(page, self.config),
                timeout=self.config.timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"Checker {checker.type.value} timed out after {self.config.timeout}ms on {url}"
            )
        except Exception as e:
            logger.warning(f"Checker {checker.type.value} failed on {url}: {e}")

        return CheckerResult(
            type=checker.type,
            issues=[],
            duration_ms=int((time.monotonic() - started) * 1000)
        )
