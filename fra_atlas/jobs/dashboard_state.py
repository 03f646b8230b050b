"""Dashboard state context holding the last rendered statistics snapshot.

The context is owned by the orchestrating layer and passed explicitly to the
refresh job and to report export. Rendering swaps the whole snapshot in one
assignment; readers always see either the previous or the new snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Final

from fra_atlas.domain import (
    VISIBLE_CLAIM_STATUS_CATEGORIES,
    ClaimStatistics,
    HealthStatus,
    domain_build_default_statistics,
)

STATISTICS_SOURCE_DEFAULT: Final[str] = "default"
STATISTICS_SOURCE_AGGREGATION: Final[str] = "aggregation"
SYSTEM_STATUS_ONLINE: Final[str] = "online"
SYSTEM_STATUS_OFFLINE: Final[str] = "offline"


@dataclass(frozen=True)
class DashboardView:
    """Presentation payload derived from the current statistics snapshot.

    Attributes:
        counts: Visible category counters keyed by category value.
        total_features: Claim features behind the counters.
        total_families: Claimant family total.
        total_area_hectares: Claimed area rounded to one decimal for display.
        coverage_label: Coverage line, e.g. `Coverage: 4 States | 120 Active Claims`.
        last_updated_label: Last render label, e.g. `Updated 14:05:09`, or None before any render.
        statistics_source: `aggregation` or `default`.
        system_status: `online` or `offline`.
        system_message: Human-readable system status message.
    """

    counts: dict[str, int]
    total_features: int
    total_families: int
    total_area_hectares: float
    coverage_label: str
    last_updated_label: str | None
    statistics_source: str
    system_status: str
    system_message: str


class DashboardStateContext:
    """Explicit holder of the most recently rendered dashboard statistics."""

    def __init__(
        self,
        default_statistics: ClaimStatistics | None = None,
        region_count: int = 4,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize context with the documented default snapshot.

        Args:
            default_statistics: Fallback snapshot shown before any batch renders.
            region_count: Number of covered regions shown in the coverage label.
            clock: Optional UTC clock for render timestamps.

        Returns:
            None: Initializer does not return values.

        Raises:
            ValueError: Raised when region_count is negative.
        """

        if region_count < 0:
            raise ValueError("region_count must be >= 0")
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._default_statistics = default_statistics or domain_build_default_statistics(self._clock())
        self._region_count = region_count
        self._current_statistics = self._default_statistics
        self._statistics_source = STATISTICS_SOURCE_DEFAULT
        self._last_rendered_at_utc: datetime | None = None
        self._system_status = HealthStatus(status=SYSTEM_STATUS_ONLINE, detail="Online")

    def dashboard_render(self, statistics: ClaimStatistics) -> None:
        """Replace the current snapshot with freshly aggregated statistics.

        Args:
            statistics: Complete statistics snapshot.

        Returns:
            None: Context state is updated as side effect.

        Raises:
            ValueError: Raised when statistics is None or internally inconsistent.
        """

        if statistics is None:
            raise ValueError("statistics must not be None")
        if not statistics.statistics_is_consistent():
            raise ValueError("statistics counters do not add up to total_features")
        self._current_statistics = statistics
        self._statistics_source = STATISTICS_SOURCE_AGGREGATION
        self._last_rendered_at_utc = self._clock()

    def dashboard_reset_to_defaults(self) -> None:
        """Show the default snapshot again."""

        self._current_statistics = self._default_statistics
        self._statistics_source = STATISTICS_SOURCE_DEFAULT
        self._last_rendered_at_utc = self._clock()

    def dashboard_current_statistics(self) -> ClaimStatistics:
        """Return the last rendered snapshot, or the default when none rendered."""

        return self._current_statistics

    def dashboard_statistics_source(self) -> str:
        """Return whether the current snapshot is `aggregation` or `default`."""

        return self._statistics_source

    def dashboard_has_rendered_batch(self) -> bool:
        """Return whether an aggregated batch has been rendered."""

        return self._statistics_source == STATISTICS_SOURCE_AGGREGATION

    def dashboard_mark_system_status(self, status: str, message: str) -> None:
        """Record system status shown next to the dashboard.

        Args:
            status: `online` or `offline`.
            message: Human-readable status message.

        Returns:
            None: Context state is updated as side effect.

        Raises:
            ValueError: Raised when status is unsupported.
        """

        if status not in {SYSTEM_STATUS_ONLINE, SYSTEM_STATUS_OFFLINE}:
            raise ValueError(f"unsupported system status={status}")
        self._system_status = HealthStatus(status=status, detail=message)

    def dashboard_system_status(self) -> HealthStatus:
        """Return current system status."""

        return self._system_status

    def dashboard_view(self) -> DashboardView:
        """Project the current snapshot onto the dashboard presentation payload.

        Returns:
            DashboardView: Counters, totals and labels for display.

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        statistics = self._current_statistics
        last_updated_label = None
        if self._last_rendered_at_utc is not None:
            last_updated_label = f"Updated {self._last_rendered_at_utc.strftime('%H:%M:%S')}"
        return DashboardView(
            counts={category.value: statistics.statistics_count(category) for category in VISIBLE_CLAIM_STATUS_CATEGORIES},
            total_features=statistics.total_features,
            total_families=statistics.total_families,
            total_area_hectares=round(statistics.total_area_hectares, 1),
            coverage_label=f"Coverage: {self._region_count} States | {statistics.total_features} Active Claims",
            last_updated_label=last_updated_label,
            statistics_source=self._statistics_source,
            system_status=self._system_status.status,
            system_message=self._system_status.detail,
        )
