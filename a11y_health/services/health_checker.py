"""
Accessibility Health Checker - orchestrates multi-URL audits.

Features:
- One shared browser session, launched lazily
- Fixed-size batches: URLs within a batch are audited concurrently, batches
  run strictly one after another
- Results joined back in input order
- Aggregate summary and dispatch to every configured reporter

A failing URL aborts the whole multi-URL run; results of earlier batches
are discarded with it.
"""

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, List, Mapping, Optional, Sequence, TypeVar, Union

from a11y_health.models.config import HealthCheckConfig, build_config
from a11y_health.models.issues import PageHealthReport
from a11y_health.models.reports import HealthCheckReport, ReportSummary
from a11y_health.models.scoring import round_half_up
from a11y_health.reporters import FileReporter, Reporter, build_reporters
from a11y_health.services.browser_manager import BrowserManager
from a11y_health.services.page_auditor import PageAuditor

logger = logging.getLogger(__name__)

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split items into consecutive groups of at most size elements."""
    if size < 1:
        raise ValueError("Chunk size must be at least 1")
    return [list(items[i:i + size]) for i in range(0, len(items), size)]


class AccessibilityHealthChecker:
    """Audit one or many URLs with bounded concurrency."""

    def __init__(
        self,
        config: Union[HealthCheckConfig, Mapping[str, Any], None] = None,
        browser_manager: Optional[BrowserManager] = None,
        auditor: Optional[PageAuditor] = None,
        reporters: Optional[List[Reporter]] = None
    ):
        """
        Initialize the health checker.

        Args:
            config: Full config, or a partial mapping merged over the defaults
            browser_manager: Session manager (a new one by default)
            auditor: Page auditor (built from config by default)
            reporters: Reporters to use instead of the ones config.output asks for
        """
        if isinstance(config, HealthCheckConfig):
            self.config = config
        else:
            self.config = build_config(config)

        self.browser_manager = browser_manager or BrowserManager()
        self._auditor = auditor
        self._reporters = reporters
        self._session_stale = False

    @property
    def auditor(self) -> PageAuditor:
        if self._auditor is None:
            self._auditor = PageAuditor(self.config)
        return self._auditor

    def configure(self, overrides: Mapping[str, Any]) -> None:
        """
        Merge a partial configuration into the current one.

        Browser options and the timeout are applied at launch. When either
        changes while a session is open, the session is restarted before the
        next check.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        previous = self.config
        self.config = build_config(previous.to_dict(), overrides)
        if self._auditor is not None:
            self._auditor.config = self.config

        if self.config.browser != previous.browser or self.config.timeout != previous.timeout:
            self._session_stale = self.browser_manager.is_launched()

    async def _ensure_launched(self) -> None:
        if self._session_stale:
            self._session_stale = False
            if self.browser_manager.is_launched():
                logger.info("Browser options changed, restarting session")
                await self.browser_manager.close()

        if not self.browser_manager.is_launched():
            await self.browser_manager.launch(self.config)

    async def _check_in_new_page(self, url: str) -> PageHealthReport:
        page = await self.browser_manager.create_page()
        try:
            return await self.auditor.audit(page, url)
        finally:
            await page.close()

    async def check_url(self, url: str) -> PageHealthReport:
        """
        Audit a single URL.

        The browser session is left open so further checks reuse it; call
        close() when done.
        """
        await self._ensure_launched()
        return await self._check_in_new_page(url)

    async def check_urls(self, urls: Sequence[str]) -> HealthCheckReport:
        """
        Audit many URLs in batches of config.concurrent and report on them.

        The browser session is always closed before this returns or raises.
        """
        started_at = datetime.now(timezone.utc)
        started = time.monotonic()

        try:
            await self._ensure_launched()

            batches = chunk(list(urls), self.config.concurrent)
            pages: List[PageHealthReport] = []
            for index, batch in enumerate(batches, start=1):
                logger.info(f"Batch {index}/{len(batches)}: checking {len(batch)} URLs")
                pages.extend(await self._run_batch(batch))

            report = self._build_report(pages, started_at, started)
            await self.generate_reports(report)
            return report
        finally:
            await self.browser_manager.close()

    async def _run_batch(self, batch: Sequence[str]) -> List[PageHealthReport]:
        """Audit every URL of a batch concurrently; results in batch order."""
        tasks = [asyncio.ensure_future(self._check_in_new_page(url)) for url in batch]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    def _build_report(
        self,
        pages: List[PageHealthReport],
        started_at: datetime,
        started: float
    ) -> HealthCheckReport:
        total_issues = sum(page.total_issues for page in pages)
        overall_score = (
            round_half_up(sum(page.score for page in pages) / len(pages)) if pages else 100
        )

        summary = ReportSummary(
            total_pages=len(pages),
            total_issues=total_issues,
            overall_score=overall_score,
            timestamp=started_at,
            duration_ms=int((time.monotonic() - started) * 1000),
        )
        logger.info(
            f"Checked {summary.total_pages} pages: {summary.total_issues} issues, "
            f"overall score {summary.overall_score}"
        )
        return HealthCheckReport(
            summary=summary,
            pages=pages,
            configuration=self.config.model_copy(deep=True),
        )

    async def generate_reports(self, report: HealthCheckReport) -> None:
        """Run every configured reporter; the first failure propagates."""
        reporters = self._reporters if self._reporters is not None else build_reporters(self.config.output)

        for reporter in reporters:
            if isinstance(reporter, FileReporter):
                reporter.output_dir.mkdir(parents=True, exist_ok=True)

        await asyncio.gather(*[reporter.generate(report) for reporter in reporters])

    async def close(self) -> None:
        await self.browser_manager.close()

    async def __aenter__(self) -> "AccessibilityHealthChecker":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
