"""Reporter contract: render a finished report without modifying it."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from a11y_health.models.reports import HealthCheckReport


class Reporter(ABC):
    """Consumes a HealthCheckReport. Failures propagate to the caller."""

    @abstractmethod
    async def generate(self, report: HealthCheckReport) -> None:
        pass


class FileReporter(Reporter):
    """Reporter that writes one timestamped file into an output directory."""

    extension: str = "txt"

    def __init__(self, output_dir: str = "./reports"):
        self.output_dir = Path(output_dir)
        self.last_path: Optional[Path] = None

    def report_path(self) -> Path:
        timestamp = datetime.now(timezone.utc).isoformat().replace(":", "-").replace(".", "-")
        return self.output_dir / f"accessibility-report-{timestamp}.{self.extension}"
