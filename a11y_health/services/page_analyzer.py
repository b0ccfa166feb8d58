"""Waits for a loaded page to reach a stable, inspectable state."""

import logging
from typing import Any, Dict, List, Optional

from a11y_health.utils.config import settings

logger = logging.getLogger(__name__)

HELPER_READY_EXPRESSION = "() => typeof window.axe !== 'undefined'"

PAGE_INFO_SCRIPT = """() => ({
  title: document.title,
  url: window.location.href,
  lang: document.documentElement.lang || null,
  hasHeadings: document.querySelectorAll('h1, h2, h3, h4, h5, h6').length > 0,
  hasImages: document.querySelectorAll('img').length > 0,
  hasForm: document.querySelectorAll('form, input, textarea, select').length > 0,
})"""

ALL_ELEMENTS_SCRIPT = """() => {
  const selectorFor = (el) => {
    if (el.id) return `#${el.id}`;
    const classes = typeof el.className === 'string' ? el.className.split(' ').filter(Boolean) : [];
    return classes.length ? `${el.tagName.toLowerCase()}.${classes.join('.')}` : el.tagName.toLowerCase();
  };
  const labelFor = (el) => {
    const explicit = el.id ? document.querySelector(`label[for="${CSS.escape(el.id)}"]`) : null;
    return explicit || el.closest('label');
  };
  return {
    images: Array.from(document.querySelectorAll('img')).map((img) => ({
      src: img.src,
      alt: img.getAttribute('alt'),
      hasAlt: Boolean(img.alt && img.alt.trim()),
      selector: selectorFor(img),
      outerHTML: img.outerHTML,
    })),
    headings: Array.from(document.querySelectorAll('h1, h2, h3, h4, h5, h6')).map((h) => ({
      level: parseInt(h.tagName.charAt(1), 10),
      text: (h.textContent || '').trim(),
      selector: selectorFor(h),
      outerHTML: h.outerHTML,
    })),
    links: Array.from(document.querySelectorAll('a[href]')).map((a) => ({
      href: a.href,
      text: (a.textContent || '').trim(),
      hasText: Boolean((a.textContent || '').trim()),
      selector: selectorFor(a),
      outerHTML: a.outerHTML,
    })),
    formElements: Array.from(document.querySelectorAll('input, textarea, select')).map((el) => {
      const label = labelFor(el);
      return {
        type: el.type || el.tagName.toLowerCase(),
        hasLabel: Boolean(label),
        labelText: label ? ((label.textContent || '').trim() || null) : null,
        selector: selectorFor(el),
        outerHTML: el.outerHTML,
      };
    }),
  };
}"""

COMPUTED_STYLES_SCRIPT = """(selector) => {
  const element = document.querySelector(selector);
  if (!element) return null;
  const style = window.getComputedStyle(element);
  return {
    color: style.color,
    backgroundColor: style.backgroundColor,
    fontSize: style.fontSize,
    fontWeight: style.fontWeight,
  };
}"""


class PageAnalyzer:
    """Stabilization and inspection helpers for one open page."""

    def __init__(
        self,
        page,
        helper_timeout_ms: Optional[int] = None,
        settle_delay_ms: Optional[int] = None
    ):
        self.page = page
        self.helper_timeout_ms = (
            settings.HELPER_TIMEOUT_MS if helper_timeout_ms is None else helper_timeout_ms
        )
        self.settle_delay_ms = (
            settings.SETTLE_DELAY_MS if settle_delay_ms is None else settle_delay_ms
        )

    async def wait_for_helper(self) -> None:
        """Wait for the DOM inspection helper to initialize."""
        await self.page.wait_for_function(
            HELPER_READY_EXPRESSION,
            timeout=self.helper_timeout_ms
        )

    async def wait_for_accessibility_tree(self) -> None:
        """
        Wait for the helper, network quiescence, then late-rendering content.

        Only the helper wait can fail; callers turn that into a
        StabilizationError.
        """
        await self.wait_for_helper()
        await self.page.wait_for_load_state("networkidle")

        if self.settle_delay_ms > 0:
            await self.page.wait_for_timeout(self.settle_delay_ms)

    async def get_page_info(self) -> Dict[str, Any]:
        """Title, final URL, document language and which content kinds exist."""
        return await self.page.evaluate(PAGE_INFO_SCRIPT)

    async def get_all_elements(self) -> Dict[str, List[Dict[str, Any]]]:
        """Images, headings, links and form controls with their snapshots."""
        return await self.page.evaluate(ALL_ELEMENTS_SCRIPT)

    async def get_computed_styles(self, selector: str) -> Optional[Dict[str, str]]:
        """Text-related computed styles of the first match, or None."""
        return await self.page.evaluate(COMPUTED_STYLES_SCRIPT, selector)

    async def screenshot(self, full_page: bool = False) -> bytes:
        return await self.page.screenshot(full_page=full_page, type="png")
