"""Errors raised by the accessibility health checker."""

from typing import Optional


class HealthCheckError(Exception):
    """Base class for all health check errors."""
    pass


class ConfigurationError(HealthCheckError):
    """Invalid run configuration, detected before any browser work starts."""
    pass


class SessionError(HealthCheckError):
    """Browser session used in the wrong state (e.g. page requested before launch)."""
    pass


class PageCheckError(HealthCheckError):
    """A single page could not be audited."""

    def __init__(self, url: str, cause: Optional[BaseException] = None):
        self.url = url
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"Failed to check {self.url}: {self.cause}"


class NavigationError(PageCheckError):
    """The page could not be loaded (DNS failure, timeout, unreachable host, empty error page)."""

    def _describe(self) -> str:
        return f"Failed to load {self.url}: {self.cause}"


class StabilizationError(PageCheckError):
    """The DOM inspection helper never initialized on the page."""

    def _describe(self) -> str:
        return f"Page {self.url} did not stabilize: {self.cause}"
