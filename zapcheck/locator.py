"""Locate the ZAP report on disk."""

import logging
from pathlib import Path
from typing import BinaryIO

from zapcheck.errors import ResourceUnavailableError

logger = logging.getLogger(__name__)


class ReportFile:
    """A report path, resolved against the project root when relative."""

    def __init__(self, report_path: str, project_root: str = "."):
        path = Path(report_path)
        if not path.is_absolute():
            path = Path(project_root) / path
        self.path = path

    def open(self) -> BinaryIO | None:
        """Open the report for reading, or return ``None`` if it does not exist."""
        if not self.path.exists():
            logger.info("ZAP report not found: %s", self.path)
            return None
        if not self.path.is_file():
            raise ResourceUnavailableError(f"ZAP report is not a file: {self.path}")
        try:
            return self.path.open("rb")
        except OSError as exc:
            raise ResourceUnavailableError(f"Cannot open ZAP report {self.path}: {exc}") from exc

    def __str__(self) -> str:
        return str(self.path)
