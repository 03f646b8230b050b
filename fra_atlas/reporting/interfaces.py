"""Typed interfaces for reporting-layer dependencies."""

from typing import Protocol

from fra_atlas.domain import ClaimStatistics


class StatisticsSnapshotReaderPort(Protocol):
    """Port for reading the most recently rendered statistics snapshot."""

    def dashboard_current_statistics(self) -> ClaimStatistics:
        """Return the latest rendered statistics, or the default snapshot.

        Returns:
            ClaimStatistics: Latest snapshot visible to report builds.

        Raises:
            RuntimeError: Raised when no snapshot can be provided.
        """
