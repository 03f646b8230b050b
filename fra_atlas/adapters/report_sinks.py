"""Report export sinks."""

from __future__ import annotations

import logging
from pathlib import Path

from fra_atlas.domain import ReportDocument

from .interfaces import ReportSinkPort

logger = logging.getLogger(__name__)


class DirectoryReportSink(ReportSinkPort):
    """Write report documents as UTF-8 text files into one directory."""

    def __init__(self, directory: str | Path):
        """Initialize directory sink.

        Args:
            directory: Target directory; created on first write when missing.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when directory is blank.
        """

        if not str(directory).strip():
            raise ValueError("directory must not be blank")
        self._directory = Path(directory)

    def adapter_sink_name(self) -> str:
        """Return stable sink label."""

        return "directory"

    def adapter_write_report(self, document: ReportDocument) -> str:
        """Write one report document to `<directory>/<file_name>`.

        Args:
            document: Finished report document.

        Returns:
            str: Written file path.

        Raises:
            OSError: Raised when the directory or file cannot be written.
        """

        self._directory.mkdir(parents=True, exist_ok=True)
        target_path = self._directory / document.file_name
        target_path.write_text(document.text, encoding="utf-8")
        logger.info("Report written to %s", target_path)
        return str(target_path)
