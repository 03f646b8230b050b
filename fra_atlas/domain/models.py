"""Typed domain models shared across runtime layers.

This module provides the immutable data contracts exchanged between the
loader, aggregation, reporting and presentation layers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Final

from .claim_parsing import domain_parse_non_negative_float, domain_parse_non_negative_int
from .claim_status import VISIBLE_CLAIM_STATUS_CATEGORIES, ClaimStatusCategory


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall status text for service health.
        detail: Additional message suitable for operational diagnostics.
    """

    status: str
    detail: str


@dataclass(frozen=True)
class ClaimRecord:
    """One forest-rights claim as read from a geospatial feature.

    Attributes:
        status: Free-text status label.
        claimant_families: Number of claimant families, 0 when absent or invalid.
        area_hectares: Claimed area in hectares, 0.0 when absent or invalid.
        source_name: Name of the claim source that supplied the record.
    """

    status: str
    claimant_families: int = 0
    area_hectares: float = 0.0
    source_name: str | None = None

    def __post_init__(self) -> None:
        """Coerce malformed status, family and area values to their defaults."""

        if not isinstance(self.status, str):
            object.__setattr__(self, "status", "")
        object.__setattr__(self, "claimant_families", domain_parse_non_negative_int(self.claimant_families))
        object.__setattr__(self, "area_hectares", domain_parse_non_negative_float(self.area_hectares))

    @classmethod
    def from_properties(cls, properties: Mapping[str, Any] | None, source_name: str | None = None) -> "ClaimRecord":
        """Build one record from GeoJSON feature properties.

        Args:
            properties: Feature properties mapping; non-mappings are treated as empty.
            source_name: Optional originating source name.

        Returns:
            ClaimRecord: Record with malformed fields coerced to defaults.

        Raises:
            RuntimeError: This constructor does not raise runtime errors.
        """

        if not isinstance(properties, Mapping):
            properties = {}
        raw_status = properties.get("status")
        return cls(
            status=raw_status if isinstance(raw_status, str) else "",
            claimant_families=domain_parse_non_negative_int(properties.get("claimant_families")),
            area_hectares=domain_parse_non_negative_float(properties.get("area_hectares")),
            source_name=source_name,
        )

    @classmethod
    def from_feature(cls, feature: Mapping[str, Any], source_name: str | None = None) -> "ClaimRecord":
        """Build one record from a GeoJSON feature mapping.

        Args:
            feature: GeoJSON feature with a `properties` member.
            source_name: Optional originating source name.

        Returns:
            ClaimRecord: Record with malformed fields coerced to defaults.

        Raises:
            RuntimeError: This constructor does not raise runtime errors.
        """

        properties = feature.get("properties") if isinstance(feature, Mapping) else None
        return cls.from_properties(properties, source_name=source_name)


@dataclass(frozen=True)
class ClaimStatistics:
    """Aggregated claim statistics for one batch.

    Instances are replaced wholesale on every aggregation run and never
    mutated. `counts` always holds exactly the four visible categories.

    Attributes:
        counts: Read-only visible category counters.
        unclassified_count: Records matching no status rule.
        total_features: Number of records in the batch.
        total_families: Sum of claimant families.
        total_area_hectares: Sum of claimed area, unrounded.
        generated_at_utc: Computation timestamp.
    """

    counts: Mapping[ClaimStatusCategory, int]
    unclassified_count: int
    total_features: int
    total_families: int
    total_area_hectares: float
    generated_at_utc: datetime

    def __post_init__(self) -> None:
        normalized_counts = {category: int(self.counts.get(category, 0)) for category in VISIBLE_CLAIM_STATUS_CATEGORIES}
        if any(count < 0 for count in normalized_counts.values()):
            raise ValueError("category counts must be non-negative")
        if self.unclassified_count < 0 or self.total_features < 0:
            raise ValueError("feature counts must be non-negative")
        if self.total_families < 0 or self.total_area_hectares < 0:
            raise ValueError("family and area totals must be non-negative")
        object.__setattr__(self, "counts", MappingProxyType(normalized_counts))

    def statistics_count(self, category: ClaimStatusCategory) -> int:
        """Return one visible category counter.

        Args:
            category: Visible claim status category.

        Returns:
            int: Counter value; 0 for `UNCLASSIFIED` (use `unclassified_count`).

        Raises:
            RuntimeError: This helper does not raise runtime errors.
        """

        return self.counts.get(category, 0)

    def statistics_total_claims(self) -> int:
        """Return the sum of the four visible counters."""

        return sum(self.counts.values())

    def statistics_is_consistent(self) -> bool:
        """Check that visible and unclassified counters add up to the batch size."""

        return self.statistics_total_claims() + self.unclassified_count == self.total_features


DEFAULT_DASHBOARD_COUNTS: Final[Mapping[ClaimStatusCategory, int]] = MappingProxyType(
    {
        ClaimStatusCategory.APPROVED: 234,
        ClaimStatusCategory.PENDING: 156,
        ClaimStatusCategory.UNDER_REVIEW: 43,
        ClaimStatusCategory.REJECTED: 12,
    }
)


def domain_build_empty_statistics(generated_at_utc: datetime) -> ClaimStatistics:
    """Build zero-valued statistics for an empty batch."""

    return ClaimStatistics(
        counts={},
        unclassified_count=0,
        total_features=0,
        total_families=0,
        total_area_hectares=0.0,
        generated_at_utc=generated_at_utc,
    )


def domain_build_default_statistics(generated_at_utc: datetime) -> ClaimStatistics:
    """Build the documented fallback statistics shown before any batch loads.

    Args:
        generated_at_utc: Timestamp recorded on the fallback snapshot.

    Returns:
        ClaimStatistics: Default dashboard counters with zero family and area totals.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return ClaimStatistics(
        counts=DEFAULT_DASHBOARD_COUNTS,
        unclassified_count=0,
        total_features=sum(DEFAULT_DASHBOARD_COUNTS.values()),
        total_families=0,
        total_area_hectares=0.0,
        generated_at_utc=generated_at_utc,
    )


@dataclass(frozen=True)
class AlertFigures:
    """Environmental alert figures supplied alongside statistics for reports.

    Attributes:
        deforestation_alerts: Locations with detected deforestation.
        high_risk_areas: Areas flagged as high risk.
        ndvi_violations: NDVI threshold violations.
    """

    deforestation_alerts: int
    high_risk_areas: int
    ndvi_violations: int

    def __post_init__(self) -> None:
        for field_name in ("deforestation_alerts", "high_risk_areas", "ndvi_violations"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{field_name} must be a non-negative integer")


@dataclass(frozen=True)
class ReportSection:
    """One titled block of report lines."""

    title: str
    lines: tuple[str, ...]


@dataclass(frozen=True)
class ReportDocument:
    """Write-once report artifact built from one statistics snapshot.

    Attributes:
        title: Report heading.
        generated_at_utc: Build timestamp.
        generated_label: Human-readable build timestamp.
        file_name: Export file name.
        sections: Ordered report sections.
        footer_lines: Trailing attribution lines.
        total_claims: Sum of the four category counters used below.
        approved: Approved counter read from the snapshot.
        pending: Pending counter read from the snapshot.
        under_review: Under-review counter read from the snapshot.
        rejected: Rejected counter read from the snapshot.
        alert_figures: Alert figures used by the report.
        average_claim_size_label: Rendered average claim size or `N/A`.
    """

    title: str
    generated_at_utc: datetime
    generated_label: str
    file_name: str
    sections: tuple[ReportSection, ...]
    footer_lines: tuple[str, ...]
    total_claims: int
    approved: int
    pending: int
    under_review: int
    rejected: int
    alert_figures: AlertFigures
    average_claim_size_label: str

    def __post_init__(self) -> None:
        if self.total_claims != self.approved + self.pending + self.under_review + self.rejected:
            raise ValueError("total_claims must equal the sum of the four category counters")

    @property
    def text(self) -> str:
        """Render the plain-text report artifact."""

        rendered_lines = [self.title, f"Generated on: {self.generated_label}", ""]
        for section in self.sections:
            rendered_lines.append(f"=== {section.title} ===")
            rendered_lines.extend(section.lines)
            rendered_lines.append("")
        rendered_lines.extend(self.footer_lines)
        return "\n".join(rendered_lines) + "\n"
