"""Report renderers (console, JSON, HTML)."""

from typing import List

from a11y_health.models.config import OutputConfig, OutputFormat
from a11y_health.reporters.base import Reporter, FileReporter
from a11y_health.reporters.console import ConsoleReporter
from a11y_health.reporters.json_reporter import JsonReporter
from a11y_health.reporters.html_reporter import HtmlReporter


def build_reporters(output: OutputConfig) -> List[Reporter]:
    """One reporter per configured format, in configuration order."""
    reporters: List[Reporter] = []
    for fmt in dict.fromkeys(output.format):
        if fmt == OutputFormat.CONSOLE:
            reporters.append(ConsoleReporter())
        elif fmt == OutputFormat.JSON:
            reporters.append(JsonReporter(output.output_dir))
        elif fmt == OutputFormat.HTML:
            reporters.append(HtmlReporter(output.output_dir))
    return reporters


__all__ = [
    'Reporter',
    'FileReporter',
    'ConsoleReporter',
    'JsonReporter',
    'HtmlReporter',
    'build_reporters',
]
