"""Typed interfaces for aggregation-layer responsibilities."""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

from fra_atlas.domain import ClaimRecord, ClaimStatistics


class ClaimAggregatorPort(Protocol):
    """Port definition for claim batch aggregation."""

    def aggregator_aggregate(self, records: Iterable[ClaimRecord | Mapping[str, Any]]) -> ClaimStatistics:
        """Aggregate one claim batch into a statistics snapshot.

        Args:
            records: Finite batch of claim records; may be empty.

        Returns:
            ClaimStatistics: Fresh statistics snapshot.

        Raises:
            RuntimeError: Implementations must not raise for malformed records.
        """
