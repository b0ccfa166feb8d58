"""JSON report writer."""

import json
import logging

from a11y_health.models.reports import HealthCheckReport
from a11y_health.reporters.base import FileReporter

logger = logging.getLogger(__name__)


class JsonReporter(FileReporter):
    """Writes the report with camelCase keys and ISO-8601 timestamps."""

    extension = "json"

    def render(self, report: HealthCheckReport) -> str:
        return json.dumps(report.to_json_dict(), indent=2)

    async def generate(self, report: HealthCheckReport) -> None:
        path = self.report_path()
        try:
            path.write_text(self.render(report), encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write JSON report: {e}")
            raise

        self.last_path = path
        logger.info(f"JSON report saved to: {path}")
