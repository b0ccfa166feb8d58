"""
Process settings for the accessibility health checker.

All settings can be overridden via environment variables or a .env file.
Per-run options (WCAG level, checkers, thresholds, ...) live in
HealthCheckConfig, not here.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Log level")
    LOG_FORMAT: str = Field(default="text", description="Log format: json or text")

    # Page stabilization
    AXE_SCRIPT_URL: str = Field(
        default="https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.9.1/axe.min.js",
        description="DOM inspection helper injected into every page"
    )
    HELPER_TIMEOUT_MS: int = Field(
        default=10000,
        description="How long to wait for the inspection helper to initialize"
    )
    SETTLE_DELAY_MS: int = Field(
        default=1000,
        description="Extra delay for late-rendering content"
    )

    # Browser
    ACCEPT_LANGUAGE: str = Field(default="en-US,en;q=0.9", description="Accept-Language header")

    # API Configuration
    API_HOST: str = Field(default="0.0.0.0", description="API host")
    API_PORT: int = Field(default=8080, description="API port")
    ENABLE_DOCS: bool = Field(default=True, description="Enable OpenAPI docs")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()


# Query parameters whose values are masked in logs
SECRET_PATTERNS = [
    r"password",
    r"passwd",
    r"secret",
    r"token",
    r"api[_-]?key",
    r"auth",
    r"session",
    r"signature",
]
