"""Tests for page stabilization and inspection helpers."""

import asyncio

import pytest

from a11y_health.services.page_analyzer import (
    ALL_ELEMENTS_SCRIPT,
    COMPUTED_STYLES_SCRIPT,
    PAGE_INFO_SCRIPT,
    PageAnalyzer,
)
from tests.fakes import FakePage


class RecordingWaits(FakePage):
    """FakePage that logs the order of stabilization waits."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.waits = []

    async def wait_for_function(self, expression, timeout=None):
        self.waits.append(("helper", timeout))
        return await super().wait_for_function(expression, timeout=timeout)

    async def wait_for_load_state(self, state="load"):
        self.waits.append(("load", state))

    async def wait_for_timeout(self, timeout):
        self.waits.append(("settle", timeout))


class TestStabilization:
    """Tests for wait_for_accessibility_tree."""

    def test_waits_in_order(self):
        page = RecordingWaits()
        asyncio.run(PageAnalyzer(page, helper_timeout_ms=500, settle_delay_ms=250).wait_for_accessibility_tree())

        assert page.waits == [("helper", 500), ("load", "networkidle"), ("settle", 250)]

    def test_zero_settle_delay_skips_wait(self):
        page = RecordingWaits()
        asyncio.run(PageAnalyzer(page, helper_timeout_ms=500, settle_delay_ms=0).wait_for_accessibility_tree())

        assert [kind for kind, _ in page.waits] == ["helper", "load"]

    def test_helper_failure_propagates(self):
        page = RecordingWaits(helper_error=TimeoutError("window.axe never appeared"))

        with pytest.raises(TimeoutError):
            asyncio.run(PageAnalyzer(page, helper_timeout_ms=10).wait_for_accessibility_tree())

        assert [kind for kind, _ in page.waits] == ["helper"]


class TestInspection:
    """Tests for page info, element and style queries."""

    def test_get_page_info(self):
        info = {
            "title": "Home", "url": "https://example.com/", "lang": "en",
            "hasHeadings": True, "hasImages": False, "hasForm": True,
        }
        page = FakePage(scan_results={PAGE_INFO_SCRIPT: info})

        assert asyncio.run(PageAnalyzer(page).get_page_info()) == info

    def test_get_all_elements(self):
        elements = {"images": [], "headings": [{"level": 1, "text": "Home"}], "links": [], "formElements": []}
        page = FakePage(scan_results={ALL_ELEMENTS_SCRIPT: elements})

        assert asyncio.run(PageAnalyzer(page).get_all_elements()) == elements

    def test_get_computed_styles_passes_selector(self):
        page = FakePage(scan_results={COMPUTED_STYLES_SCRIPT: None})

        assert asyncio.run(PageAnalyzer(page).get_computed_styles("h1.title")) is None
        assert page.evaluated == ["h1.title"]

    def test_screenshot(self):
        page = FakePage()
        data = asyncio.run(PageAnalyzer(page).screenshot(full_page=True))

        assert data.startswith(b"\x89PNG")
        assert page.screenshots == [{"full_page": True, "type": "png"}]

    def test_scripts_query_expected_content(self):
        assert "document.documentElement.lang" in PAGE_INFO_SCRIPT
        assert "formElements" in ALL_ELEMENTS_SCRIPT
        assert "getComputedStyle" in COMPUTED_STYLES_SCRIPT
