"""Tests for the browser session manager."""

import asyncio

import pytest

from a11y_health.exceptions import SessionError
from a11y_health.models.config import build_config
from a11y_health.services import browser_manager as browser_module
from a11y_health.services.browser_manager import BrowserManager, SessionState
from tests.fakes import FakePage


class FakeContext:
    def __init__(self, log, **kwargs):
        self.log = log
        self.kwargs = kwargs
        self.default_timeout = None
        self.navigation_timeout = None
        self.pages = []

    def set_default_timeout(self, timeout):
        self.default_timeout = timeout

    def set_default_navigation_timeout(self, timeout):
        self.navigation_timeout = timeout

    async def new_page(self):
        page = FakePage()
        self.pages.append(page)
        return page

    async def close(self):
        self.log.append("context.close")


class FakeBrowser:
    def __init__(self, log, context_error=None):
        self.log = log
        self.context_error = context_error
        self.context = None

    async def new_context(self, **kwargs):
        if self.context_error:
            raise self.context_error
        self.context = FakeContext(self.log, **kwargs)
        return self.context

    async def close(self):
        self.log.append("browser.close")


class FakeChromium:
    def __init__(self, browser):
        self.browser = browser
        self.launch_kwargs = None

    async def launch(self, **kwargs):
        self.launch_kwargs = kwargs
        return self.browser


class FakePlaywright:
    def __init__(self, log, browser):
        self.log = log
        self.chromium = FakeChromium(browser)

    async def stop(self):
        self.log.append("playwright.stop")


@pytest.fixture
def fake_playwright(monkeypatch):
    log = []
    state = {"browser": FakeBrowser(log), "starts": 0}

    class Starter:
        async def start(self):
            state["starts"] += 1
            state["playwright"] = FakePlaywright(log, state["browser"])
            return state["playwright"]

    monkeypatch.setattr(browser_module, "async_playwright", lambda: Starter())
    state["log"] = log
    return state


class TestBrowserManager:
    """Tests for BrowserManager."""

    def test_starts_unlaunched(self):
        manager = BrowserManager()
        assert manager.state == SessionState.UNLAUNCHED
        assert not manager.is_launched()

    def test_create_page_before_launch_fails(self):
        """Should refuse to open pages without a session."""
        manager = BrowserManager()
        with pytest.raises(SessionError):
            asyncio.run(manager.create_page())

    def test_launch_applies_config(self, fake_playwright):
        """Viewport, user agent, headless flag and timeout come from config."""
        config = build_config({
            "timeout": 5000,
            "browser": {"headless": False, "viewport": {"width": 800, "height": 600}, "userAgent": "TestBot"},
        })
        manager = BrowserManager()
        asyncio.run(manager.launch(config))

        assert manager.state == SessionState.LAUNCHED
        launch_kwargs = fake_playwright["playwright"].chromium.launch_kwargs
        assert launch_kwargs["headless"] is False

        context = fake_playwright["browser"].context
        assert context.kwargs["viewport"] == {"width": 800, "height": 600}
        assert context.kwargs["user_agent"] == "TestBot"
        assert "Accept-Language" in context.kwargs["extra_http_headers"]
        assert context.default_timeout == 5000
        assert context.navigation_timeout == 5000

    def test_launch_twice_is_noop(self, fake_playwright):
        manager = BrowserManager()
        config = build_config()

        async def scenario():
            await manager.launch(config)
            await manager.launch(config)

        asyncio.run(scenario())
        assert fake_playwright["starts"] == 1

    def test_create_page_injects_helper(self, fake_playwright):
        """New pages load the DOM inspection helper before page scripts."""
        manager = BrowserManager(helper_script_url="https://cdn.example.com/axe.min.js")

        async def scenario():
            await manager.launch(build_config())
            return await manager.create_page()

        page = asyncio.run(scenario())
        assert len(page.init_scripts) == 1
        assert '"https://cdn.example.com/axe.min.js"' in page.init_scripts[0]

    def test_close_tears_down_in_order(self, fake_playwright):
        """Context closes before browser, then playwright stops."""
        manager = BrowserManager()

        async def scenario():
            await manager.launch(build_config())
            await manager.close()

        asyncio.run(scenario())
        assert fake_playwright["log"] == ["context.close", "browser.close", "playwright.stop"]
        assert manager.state == SessionState.UNLAUNCHED

    def test_close_when_unlaunched_is_noop(self, fake_playwright):
        manager = BrowserManager()
        asyncio.run(manager.close())
        assert fake_playwright["log"] == []

    def test_relaunch_after_close(self, fake_playwright):
        manager = BrowserManager()

        async def scenario():
            await manager.launch(build_config())
            await manager.close()
            await manager.launch(build_config())

        asyncio.run(scenario())
        assert fake_playwright["starts"] == 2
        assert manager.is_launched()

    def test_failed_launch_cleans_up(self, fake_playwright):
        """A failing context creation stops playwright and stays unlaunched."""
        fake_playwright["browser"].context_error = RuntimeError("context failed")
        manager = BrowserManager()

        with pytest.raises(RuntimeError):
            asyncio.run(manager.launch(build_config()))

        assert manager.state == SessionState.UNLAUNCHED
        assert "browser.close" in fake_playwright["log"]
        assert fake_playwright["log"][-1] == "playwright.stop"
