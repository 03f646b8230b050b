"""Report export workflow from the latest statistics snapshot."""
# pylint: disable=too-few-public-methods

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Final

from fra_atlas.adapters import AlertFigureSourcePort, ReportSinkPort
from fra_atlas.domain import ReportDocument

from .interfaces import StatisticsSnapshotReaderPort
from .report_builder import ReportContext, report_build_document

logger = logging.getLogger(__name__)

REPORT_EXPORT_SUCCESS_MESSAGE: Final[str] = (
    "Report Generated Successfully!\n\n"
    "Comprehensive FRA Atlas report has been downloaded.\n\n"
    "Includes:\n"
    "• Claim status analysis\n"
    "• Environmental alerts\n"
    "• NDVI trends\n"
    "• Community impact metrics\n"
    "• Technical specifications"
)


@dataclass(frozen=True)
class ReportExportResult:
    """Result payload for one report export.

    Attributes:
        document: Finished report document.
        sink_location: Destination label returned by the sink, or None without a sink.
        message: Operator-facing success message.
    """

    document: ReportDocument
    sink_location: str | None
    message: str


class ReportExportService:
    """Build reports from the latest rendered statistics and hand them to a sink."""

    def __init__(
        self,
        statistics_reader: StatisticsSnapshotReaderPort,
        alert_source: AlertFigureSourcePort,
        report_context: ReportContext | None = None,
        sink: ReportSinkPort | None = None,
        export_delay_seconds: float = 0.0,
        sleep: Callable[[float], None] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize report export dependencies.

        Args:
            statistics_reader: Reader of the last rendered statistics snapshot.
            alert_source: Provider of environmental alert figures.
            report_context: Constant programme figures for report sections.
            sink: Optional export destination.
            export_delay_seconds: Progress delay applied before the report is built.
            sleep: Optional sleep function, defaults to `time.sleep`.
            clock: Optional UTC clock used for report timestamps.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if statistics_reader is None:
            raise ValueError("statistics_reader must not be None")
        if alert_source is None:
            raise ValueError("alert_source must not be None")
        if export_delay_seconds < 0:
            raise ValueError("export_delay_seconds must be >= 0")

        self._statistics_reader = statistics_reader
        self._alert_source = alert_source
        self._report_context = report_context or ReportContext()
        self._sink = sink
        self._export_delay_seconds = export_delay_seconds
        self._sleep = sleep or time.sleep
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def report_build_latest(self) -> ReportDocument:
        """Build one report document from the latest statistics without exporting it.

        Returns:
            ReportDocument: Report built from the current snapshot.

        Raises:
            RuntimeError: Raised when alert figures cannot be produced.
        """

        statistics = self._statistics_reader.dashboard_current_statistics()
        alert_figures = self._alert_source.adapter_fetch_alert_figures()
        return report_build_document(
            statistics=statistics,
            alert_figures=alert_figures,
            context=self._report_context,
            generated_at_utc=self._clock(),
        )

    def report_export(self, apply_delay: bool = True) -> ReportExportResult:
        """Build the latest report and hand it to the configured sink.

        Args:
            apply_delay: Whether to wait the configured progress delay first.

        Returns:
            ReportExportResult: Exported document, sink location and success message.

        Raises:
            OSError: Raised when the sink cannot write the document.
            RuntimeError: Raised when alert figures cannot be produced.
        """

        if apply_delay and self._export_delay_seconds > 0:
            self._sleep(self._export_delay_seconds)

        document = self.report_build_latest()
        sink_location = None
        if self._sink is not None:
            sink_location = self._sink.adapter_write_report(document)
        logger.info("Report %s exported with %d total claims", document.file_name, document.total_claims)
        return ReportExportResult(
            document=document,
            sink_location=sink_location,
            message=REPORT_EXPORT_SUCCESS_MESSAGE,
        )
