"""Reporting layer package for report synthesis and export."""

from .export_service import REPORT_EXPORT_SUCCESS_MESSAGE, ReportExportResult, ReportExportService
from .interfaces import StatisticsSnapshotReaderPort
from .report_builder import (
	AVERAGE_CLAIM_SIZE_UNAVAILABLE,
	REPORT_TITLE,
	ReportContext,
	report_average_claim_size_label,
	report_build_document,
	report_build_file_name,
	report_serialize_document,
)

__all__ = [
	"AVERAGE_CLAIM_SIZE_UNAVAILABLE",
	"REPORT_EXPORT_SUCCESS_MESSAGE",
	"REPORT_TITLE",
	"ReportContext",
	"ReportExportResult",
	"ReportExportService",
	"StatisticsSnapshotReaderPort",
	"report_average_claim_size_label",
	"report_build_document",
	"report_build_file_name",
	"report_serialize_document",
]
