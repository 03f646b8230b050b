"""Typed interfaces for adapter-layer responsibilities."""

from dataclasses import dataclass
from typing import Any, Protocol

from fra_atlas.domain import AlertFigures, ClaimRecord, ReportDocument


@dataclass(frozen=True)
class ClaimBatchLoadResult:
    """Result contract for one multi-source batch load.

    Attributes:
        records: Claim records from every source that loaded.
        loaded_sources: Per-source feature counts, in load order.
        failed_sources: Per-source failure descriptions, in load order.
        stage_timeline: Structured stage timeline entries captured by the loader.
    """

    records: tuple[ClaimRecord, ...]
    loaded_sources: tuple[dict[str, Any], ...]
    failed_sources: tuple[dict[str, Any], ...]
    stage_timeline: list[dict[str, Any]]

    def batch_has_records(self) -> bool:
        """Return whether at least one claim record was loaded."""

        return len(self.records) > 0


class ClaimSourcePort(Protocol):
    """Port definition for one named geospatial claim source."""

    def adapter_source_name(self) -> str:
        """Return source name used in diagnostics and on claim records.

        Returns:
            str: Human-readable source name such as a state name.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def adapter_source_location(self) -> str:
        """Return the file path or URL the source reads from.

        Returns:
            str: Source location used in load diagnostics.

        Raises:
            RuntimeError: Raised when source metadata is unavailable.
        """

    def adapter_fetch_features(self) -> list[dict[str, Any]]:
        """Fetch raw GeoJSON features from the source.

        Returns:
            list[dict[str, Any]]: Feature mappings in source order.

        Raises:
            ClaimSourceError: Raised when the source cannot be read or parsed.
        """


class ClaimBatchLoaderPort(Protocol):
    """Port definition for loading one claim batch across all sources."""

    def loader_load_batch(self) -> ClaimBatchLoadResult:
        """Load claim records from every configured source.

        Returns:
            ClaimBatchLoadResult: Records from sources that loaded plus failure diagnostics.

        Raises:
            RuntimeError: Raised only for failures outside individual sources.
        """


class AlertFigureSourcePort(Protocol):
    """Port definition for environmental alert figure providers."""

    def adapter_source_name(self) -> str:
        """Return provider identifier for diagnostics."""

    def adapter_fetch_alert_figures(self) -> AlertFigures:
        """Return the current alert figures.

        Returns:
            AlertFigures: Deforestation, high-risk and NDVI violation figures.

        Raises:
            RuntimeError: Raised when figures cannot be produced.
        """


class ReportSinkPort(Protocol):
    """Port definition for report export destinations."""

    def adapter_sink_name(self) -> str:
        """Return sink identifier for diagnostics."""

    def adapter_write_report(self, document: ReportDocument) -> str:
        """Hand one finished report document to the destination.

        Args:
            document: Finished report document.

        Returns:
            str: Destination label such as the written file path.

        Raises:
            OSError: Raised when the destination cannot be written.
        """
