"""Adapter layer package for claim sources, alert figures and report sinks."""

from .alert_sources import (
	DEFAULT_ALERT_FIGURE_RANGES,
	AlertFigureRange,
	AlertFigureRanges,
	RandomAlertFigureSource,
	StaticAlertFigureSource,
)
from .batch_loader import ClaimBatchLoader
from .geojson_source import GeoJsonClaimSource
from .interfaces import (
	AlertFigureSourcePort,
	ClaimBatchLoaderPort,
	ClaimBatchLoadResult,
	ClaimSourcePort,
	ReportSinkPort,
)
from .report_sinks import DirectoryReportSink
from .source_errors import (
	ClaimSourceConnectionError,
	ClaimSourceError,
	ClaimSourceFormatError,
	ClaimSourceNotFoundError,
	ClaimSourceTimeoutError,
)

__all__ = [
	"AlertFigureRange",
	"AlertFigureRanges",
	"AlertFigureSourcePort",
	"ClaimBatchLoadResult",
	"ClaimBatchLoader",
	"ClaimBatchLoaderPort",
	"ClaimSourceConnectionError",
	"ClaimSourceError",
	"ClaimSourceFormatError",
	"ClaimSourceNotFoundError",
	"ClaimSourcePort",
	"ClaimSourceTimeoutError",
	"DEFAULT_ALERT_FIGURE_RANGES",
	"DirectoryReportSink",
	"GeoJsonClaimSource",
	"RandomAlertFigureSource",
	"ReportSinkPort",
	"StaticAlertFigureSource",
]
