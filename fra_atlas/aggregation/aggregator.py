"""Claim batch aggregation into dashboard statistics.

Aggregation is a pure reduction: every record is classified with the ordered
status rules, visible categories are counted, and family and area totals are
accumulated without rounding. Malformed numeric fields count as zero, so a
batch never fails to aggregate.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any, Callable

from fra_atlas.domain import (
    CLAIM_STATUS_CLASSIFICATION_RULES,
    VISIBLE_CLAIM_STATUS_CATEGORIES,
    ClaimRecord,
    ClaimStatistics,
    ClaimStatusCategory,
    ClaimStatusRule,
    domain_classify_claim_status,
)

from .interfaces import ClaimAggregatorPort

logger = logging.getLogger(__name__)


def aggregation_coerce_record(record: ClaimRecord | Mapping[str, Any]) -> ClaimRecord:
    """Coerce one batch entry into a `ClaimRecord`.

    Args:
        record: A `ClaimRecord`, a GeoJSON feature mapping, or a feature-properties mapping.

    Returns:
        ClaimRecord: Record with malformed fields coerced to defaults.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(record, ClaimRecord):
        return record
    if isinstance(record, Mapping) and isinstance(record.get("properties"), Mapping):
        return ClaimRecord.from_feature(record)
    return ClaimRecord.from_properties(record if isinstance(record, Mapping) else None)


def aggregation_aggregate_claims(
    records: Iterable[ClaimRecord | Mapping[str, Any]],
    generated_at_utc: datetime | None = None,
    rules: tuple[ClaimStatusRule, ...] = CLAIM_STATUS_CLASSIFICATION_RULES,
) -> ClaimStatistics:
    """Aggregate one claim batch into a fresh statistics snapshot.

    Args:
        records: Finite batch of claim records; may be empty.
        generated_at_utc: Optional computation timestamp, defaults to now in UTC.
        rules: Ordered classification rules.

    Returns:
        ClaimStatistics: New snapshot; zero-valued for an empty batch.

    Raises:
        RuntimeError: This function does not raise for malformed records.
    """

    counts = {category: 0 for category in VISIBLE_CLAIM_STATUS_CATEGORIES}
    unclassified_count = 0
    total_features = 0
    total_families = 0
    total_area_hectares = 0.0

    for entry in records:
        record = aggregation_coerce_record(entry)
        total_features += 1
        total_families += record.claimant_families
        total_area_hectares += record.area_hectares

        category = domain_classify_claim_status(record.status, rules=rules)
        if category is ClaimStatusCategory.UNCLASSIFIED:
            unclassified_count += 1
        else:
            counts[category] += 1

    statistics = ClaimStatistics(
        counts=counts,
        unclassified_count=unclassified_count,
        total_features=total_features,
        total_families=total_families,
        total_area_hectares=total_area_hectares,
        generated_at_utc=generated_at_utc or datetime.now(timezone.utc),
    )
    logger.info(
        "Dashboard statistics computed: %d claims, %d families, %.1f hectares",
        statistics.total_features,
        statistics.total_families,
        statistics.total_area_hectares,
    )
    return statistics


class ClaimAggregator(ClaimAggregatorPort):
    """Injectable aggregator with a replaceable clock."""

    def __init__(self, clock: Callable[[], datetime] | None = None):
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def aggregator_aggregate(self, records: Iterable[ClaimRecord | Mapping[str, Any]]) -> ClaimStatistics:
        """Aggregate one batch using the configured clock for `generated_at_utc`."""

        return aggregation_aggregate_claims(records, generated_at_utc=self._clock())
