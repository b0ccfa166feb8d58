"""
Run configuration.

HealthCheckConfig is validated eagerly: an invalid WCAG level, output format
or numeric range is rejected with ConfigurationError before the browser is
ever launched. Config files use the same camelCase keys as the JSON report
(snake_case is accepted too).
"""

import copy
import json
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from a11y_health.exceptions import ConfigurationError
from a11y_health.models.issues import CheckType, WcagLevel


class OutputFormat(str, Enum):
    """Report formats."""
    CONSOLE = "console"
    JSON = "json"
    HTML = "html"


class ConfigModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class ChecksConfig(ConfigModel):
    """Which checkers run. A type listed in both sets never runs."""
    enabled: List[CheckType] = Field(default_factory=lambda: list(CheckType))
    disabled: List[CheckType] = Field(default_factory=list)

    def is_enabled(self, check_type: CheckType) -> bool:
        return check_type in self.enabled and check_type not in self.disabled


class ThresholdsConfig(ConfigModel):
    color_contrast_ratio: float = Field(default=4.5, ge=1, le=21)
    max_heading_jump: int = Field(default=1, ge=1, le=6)


class OutputConfig(ConfigModel):
    format: List[OutputFormat] = Field(default_factory=lambda: [OutputFormat.CONSOLE])
    output_dir: str = "./reports"
    verbose: bool = False


class ViewportConfig(ConfigModel):
    width: int = Field(default=1920, gt=0)
    height: int = Field(default=1080, gt=0)


class BrowserConfig(ConfigModel):
    headless: bool = True
    viewport: ViewportConfig = Field(default_factory=ViewportConfig)
    user_agent: Optional[str] = None


class HealthCheckConfig(ConfigModel):
    """Configuration for one health check run."""
    wcag_level: WcagLevel = WcagLevel.AA
    checks: ChecksConfig = Field(default_factory=ChecksConfig)
    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)
    timeout: int = Field(default=30000, ge=1000, description="Per-page timeout in milliseconds")
    concurrent: int = Field(default=3, ge=1, le=10, description="Pages checked at the same time")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout / 1000

    def to_dict(self) -> Dict[str, Any]:
        """camelCase JSON-ready dictionary, the inverse of build_config()."""
        return self.model_dump(mode="json", by_alias=True)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert snake_case keys to the camelCase aliases so both merge cleanly."""
    normalized = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            value = _normalize_keys(value)
        normalized[to_camel(key) if "_" in key else key] = value
    return normalized


def build_config(*sources: Optional[Mapping[str, Any]]) -> HealthCheckConfig:
    """
    Build a validated config from defaults plus partial overrides.

    Later sources win. Each source may be a partial mapping with camelCase or
    snake_case keys.

    Raises:
        ConfigurationError: If the merged configuration is invalid
    """
    merged = HealthCheckConfig().to_dict()
    for source in sources:
        if source:
            merged = deep_merge(merged, _normalize_keys(source))

    try:
        return HealthCheckConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e


def load_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a partial JSON config file.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to load config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a JSON object")
    return data


def _format_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        problems.append(f"{location}: {item['msg']}")
    return "Invalid configuration: " + "; ".join(problems)
