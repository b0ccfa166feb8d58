"""Browser session manager: one Chromium instance and one isolated context."""

import json
import logging
import subprocess
import sys
from enum import Enum
from typing import Any, Dict, Optional

from playwright.async_api import async_playwright, Browser, BrowserContext, Page, Playwright

from a11y_health.exceptions import SessionError
from a11y_health.models.config import HealthCheckConfig
from a11y_health.utils.config import settings

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--disable-web-security",
    "--disable-features=VizServiceDisplayCompositor",
    "--force-prefers-reduced-motion",
]

# Runs before any page script; loads the DOM inspection helper the
# page analyzer waits for.
HELPER_INIT_SCRIPT = """
(scriptUrl) => {
  const inject = () => {
    const script = document.createElement('script');
    script.src = scriptUrl;
    (document.head || document.documentElement).appendChild(script);
  };
  if (document.readyState === 'loading') {
    document.addEventListener('DOMContentLoaded', inject);
  } else {
    inject();
  }
}
"""


class SessionState(str, Enum):
    """Browser session lifecycle."""
    UNLAUNCHED = "unlaunched"
    LAUNCHED = "launched"


class BrowserManager:
    """
    Owns the browser engine and its browsing context.

    Pages are created on demand and owned by the caller; the manager does not
    limit how many are open at once.
    """

    def __init__(self, helper_script_url: Optional[str] = None):
        self.helper_script_url = helper_script_url or settings.AXE_SCRIPT_URL
        self.state = SessionState.UNLAUNCHED
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    def is_launched(self) -> bool:
        return self.state == SessionState.LAUNCHED

    async def launch(self, config: HealthCheckConfig) -> None:
        """
        Start the browser and create the browsing context.

        Args:
            config: Run configuration (headless flag, viewport, user agent, timeout)
        """
        if self.is_launched():
            logger.debug("Browser already launched, reusing session")
            return

        self._playwright = await async_playwright().start()
        logger.info("Playwright initialized")

        try:
            logger.info(f"Launching browser (headless={config.browser.headless})")
            self._browser = await self._launch_browser(config.browser.headless)

            context_kwargs: Dict[str, Any] = {
                "viewport": {
                    "width": config.browser.viewport.width,
                    "height": config.browser.viewport.height,
                },
                "extra_http_headers": {"Accept-Language": settings.ACCEPT_LANGUAGE},
            }
            if config.browser.user_agent:
                context_kwargs["user_agent"] = config.browser.user_agent

            self._context = await self._browser.new_context(**context_kwargs)
            self._context.set_default_timeout(config.timeout)
            self._context.set_default_navigation_timeout(config.timeout)
        except Exception:
            await self._teardown()
            raise

        self.state = SessionState.LAUNCHED
        logger.info(
            f"Created browser context (viewport={config.browser.viewport.width}x"
            f"{config.browser.viewport.height}, timeout={config.timeout}ms)"
        )

    async def _launch_browser(self, headless: bool) -> Browser:
        """Launch Chromium, installing it first if the executable is missing."""
        try:
            return await self._playwright.chromium.launch(headless=headless, args=LAUNCH_ARGS)
        except Exception as e:
            if "Executable doesn't exist" not in str(e):
                raise

        logger.warning("Playwright browsers not found, installing automatically...")
        if not install_browsers():
            raise RuntimeError(
                "Failed to install Playwright browsers automatically. "
                "Please run manually: python -m playwright install --with-deps chromium"
            )
        return await self._playwright.chromium.launch(headless=headless, args=LAUNCH_ARGS)

    async def create_page(self) -> Page:
        """
        Open a new page in the shared context.

        Raises:
            SessionError: If called before launch()
        """
        if not self.is_launched() or self._context is None:
            raise SessionError("Browser context not initialized. Call launch() first.")

        page = await self._context.new_page()
        await page.add_init_script(script=f"({HELPER_INIT_SCRIPT})({json.dumps(self.helper_script_url)})")
        return page

    async def close(self) -> None:
        """Tear down context, then browser. No-op when not launched."""
        if not self.is_launched():
            return

        await self._teardown()
        logger.info("Browser session closed")

    async def _teardown(self) -> None:
        self.state = SessionState.UNLAUNCHED
        try:
            if self._context is not None:
                await self._context.close()
            if self._browser is not None:
                await self._browser.close()
        finally:
            self._context = None
            self._browser = None
            if self._playwright is not None:
                await self._playwright.stop()
                self._playwright = None
                logger.info("Playwright stopped")


def install_browsers() -> bool:
    """
    Install the Chromium build Playwright expects.

    Returns:
        bool: True if installation succeeded
    """
    cmd = [sys.executable, "-m", "playwright", "install", "--with-deps", "chromium"]
    logger.info(f"Running: {' '.join(cmd)}")

    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=300)
    except subprocess.TimeoutExpired:
        logger.error("Playwright installation timed out after 5 minutes")
        return False

    if result.returncode != 0:
        logger.error(f"Playwright installation failed: {result.stderr}")
        return False

    logger.info("Playwright browsers installed successfully")
    return True
