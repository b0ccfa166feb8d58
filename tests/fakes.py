"""In-memory stand-ins for Playwright pages and the browser session."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from a11y_health.exceptions import NavigationError, SessionError
from a11y_health.models.issues import AccessibilityIssue, CheckerResult, CheckType, PageHealthReport
from a11y_health.models.scoring import (
    calculate_score,
    count_by_severity,
    count_by_type,
    wcag_compliance,
)


class FakeResponse:
    def __init__(self, status: int = 200):
        self.status = status

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class FakePage:
    """
    Records calls and answers page.evaluate() from a script -> result table.

    Unknown scripts evaluate to an empty list, which every scan treats as
    "nothing found".
    """

    def __init__(
        self,
        scan_results: Optional[Dict[str, Any]] = None,
        response: Optional[FakeResponse] = None,
        goto_error: Optional[Exception] = None,
        helper_error: Optional[Exception] = None,
        body_has_content: bool = True
    ):
        self.scan_results = scan_results or {}
        self.response = response or FakeResponse()
        self.goto_error = goto_error
        self.helper_error = helper_error
        self.body_has_content = body_has_content
        self.visited: List[str] = []
        self.evaluated: List[Any] = []
        self.init_scripts: List[str] = []
        self.screenshots: List[Dict[str, Any]] = []
        self.closed = False

    async def goto(self, url: str, wait_until: str = "load"):
        self.visited.append(url)
        if self.goto_error:
            raise self.goto_error
        return self.response

    async def wait_for_function(self, expression: str, timeout: Optional[int] = None):
        if self.helper_error:
            raise self.helper_error
        return True

    async def wait_for_load_state(self, state: str = "load"):
        return None

    async def wait_for_timeout(self, timeout: int):
        return None

    async def add_init_script(self, script: Optional[str] = None):
        self.init_scripts.append(script)

    async def evaluate(self, expression: str, arg: Any = None):
        self.evaluated.append(arg)
        if expression.startswith("() => !!(document.body"):
            return self.body_has_content
        return self.scan_results.get(expression, [])

    async def screenshot(self, full_page: bool = False, type: str = "png") -> bytes:
        self.screenshots.append({"full_page": full_page, "type": type})
        return b"\x89PNG"

    async def close(self):
        self.closed = True


class FakeBrowserManager:
    """Session manager that hands out FakePages."""

    def __init__(self, page_factory: Callable[[], FakePage] = FakePage):
        self.page_factory = page_factory
        self.launched = False
        self.launch_count = 0
        self.close_count = 0
        self.pages: List[FakePage] = []

    def is_launched(self) -> bool:
        return self.launched

    async def launch(self, config) -> None:
        self.launched = True
        self.launch_count += 1

    async def create_page(self) -> FakePage:
        if not self.launched:
            raise SessionError("Browser context not initialized. Call launch() first.")
        page = self.page_factory()
        self.pages.append(page)
        return page

    async def close(self) -> None:
        if self.launched:
            self.close_count += 1
        self.launched = False


def make_page_report(url: str, issues: Sequence[AccessibilityIssue] = ()) -> PageHealthReport:
    issues = list(issues)
    return PageHealthReport(
        url=url,
        timestamp=datetime.now(timezone.utc),
        duration_ms=5,
        total_issues=len(issues),
        issues_by_severity=count_by_severity(issues),
        issues_by_type=count_by_type(issues),
        wcag_compliance=wcag_compliance(issues),
        issues=issues,
        score=calculate_score(issues),
    )


class RecordingAuditor:
    """
    Auditor double that logs start/end events per URL.

    URLs listed in failing raise NavigationError after the delay.
    """

    def __init__(
        self,
        delay: float = 0.01,
        failing: Sequence[str] = (),
        issues: Optional[Dict[str, List[AccessibilityIssue]]] = None
    ):
        self.delay = delay
        self.failing = set(failing)
        self.issues = issues or {}
        self.events: List[tuple] = []
        self.cancelled: List[str] = []

    async def audit(self, page, url: str) -> PageHealthReport:
        self.events.append(("start", url))
        try:
            await asyncio.sleep(self.delay if url not in self.failing else self.delay / 2)
        except asyncio.CancelledError:
            self.cancelled.append(url)
            raise
        if url in self.failing:
            raise NavigationError(url, "net::ERR_NAME_NOT_RESOLVED")
        self.events.append(("end", url))
        return make_page_report(url, self.issues.get(url, []))


class StaticChecker:
    """Checker double returning a fixed issue list, or raising, or stalling."""

    def __init__(
        self,
        check_type: CheckType,
        issues: Sequence[AccessibilityIssue] = (),
        error: Optional[Exception] = None,
        delay: float = 0
    ):
        self.type = check_type
        self.issues = list(issues)
        self.error = error
        self.delay = delay
        self.calls = 0

    async def check(self, page, config) -> CheckerResult:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return CheckerResult(type=self.type, issues=self.issues, duration_ms=1)


class RecordingReporter:
    """Reporter double that keeps every report it receives."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.reports: List[Any] = []

    async def generate(self, report) -> None:
        self.reports.append(report)
        if self.error:
            raise self.error
