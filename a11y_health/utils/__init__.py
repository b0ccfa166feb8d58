"""Utility modules for the accessibility health checker."""

from a11y_health.utils.config import settings
from a11y_health.utils.logging import setup_logging
from a11y_health.utils.colors import get_contrast_ratio
from a11y_health.utils.urls import is_valid_url, normalize_url

__all__ = [
    'settings',
    'setup_logging',
    'get_contrast_ratio',
    'is_valid_url',
    'normalize_url',
]
