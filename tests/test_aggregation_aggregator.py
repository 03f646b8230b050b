"""Regression tests for claim batch aggregation."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from fra_atlas.aggregation import ClaimAggregator, aggregation_aggregate_claims
from fra_atlas.domain import ClaimRecord, ClaimStatusCategory

_GENERATED_AT = datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)


def test_aggregation_counts_four_status_scenario() -> None:
    """Aggregate the reference four-record batch into one claim per category.

    Returns:
        None: Assertions validate counters and totals.

    Raises:
        AssertionError: Raised when aggregation output is unexpected.
    """

    records = [
        ClaimRecord(status="Approved", claimant_families=10, area_hectares=1.5),
        ClaimRecord(status="Pending Review", claimant_families=5, area_hectares=2.25),
        ClaimRecord(status="Under Review", claimant_families=0, area_hectares=0),
        ClaimRecord(status="Rejected", claimant_families=2, area_hectares=0.75),
    ]

    statistics = aggregation_aggregate_claims(records, generated_at_utc=_GENERATED_AT)

    assert dict(statistics.counts) == {
        ClaimStatusCategory.APPROVED: 1,
        ClaimStatusCategory.PENDING: 1,
        ClaimStatusCategory.UNDER_REVIEW: 1,
        ClaimStatusCategory.REJECTED: 1,
    }
    assert statistics.total_features == 4
    assert statistics.total_families == 17
    assert statistics.total_area_hectares == 4.5
    assert statistics.unclassified_count == 0
    assert statistics.generated_at_utc == _GENERATED_AT


def test_aggregation_empty_batch_yields_zero_statistics() -> None:
    """Return all-zero statistics for an empty batch without raising.

    Returns:
        None: Assertions validate zero values.

    Raises:
        AssertionError: Raised when empty batch handling is unexpected.
    """

    statistics = aggregation_aggregate_claims([], generated_at_utc=_GENERATED_AT)

    assert statistics.total_features == 0
    assert statistics.total_families == 0
    assert statistics.total_area_hectares == 0.0
    assert statistics.unclassified_count == 0
    assert all(count == 0 for count in statistics.counts.values())


def test_aggregation_unclassified_record_counts_only_in_total_features() -> None:
    """Keep unknown statuses out of visible counters but inside the feature total."""

    records = [
        ClaimRecord(status="Approved"),
        ClaimRecord(status="Unknown", claimant_families=3, area_hectares=1.0),
        ClaimRecord(status="Rejected"),
    ]

    statistics = aggregation_aggregate_claims(records, generated_at_utc=_GENERATED_AT)

    assert statistics.total_features == 3
    assert statistics.unclassified_count == 1
    assert statistics.statistics_total_claims() == statistics.total_features - 1
    assert statistics.total_families == 3
    assert statistics.statistics_is_consistent()


def test_aggregation_tolerates_malformed_feature_mappings() -> None:
    """Coerce malformed raw features and properties to zero-valued fields."""

    records = [
        {"properties": {"status": "approved", "claimant_families": "lots", "area_hectares": None}},
        {"status": "PENDING", "claimant_families": "4", "area_hectares": "2.5"},
        {"properties": None},
        {"type": "Feature"},
        "not a mapping",
    ]

    statistics = aggregation_aggregate_claims(records, generated_at_utc=_GENERATED_AT)

    assert statistics.total_features == 5
    assert statistics.statistics_count(ClaimStatusCategory.APPROVED) == 1
    assert statistics.statistics_count(ClaimStatusCategory.PENDING) == 1
    assert statistics.unclassified_count == 3
    assert statistics.total_families == 4
    assert statistics.total_area_hectares == 2.5


def test_aggregation_counter_invariant_holds_for_mixed_batches() -> None:
    """Visible counters plus unclassified always equal the batch size."""

    labels = ["Approved", "pending review", "review", "rejected", "", "closed", "APPROVED", "Re-review"]
    for batch_size in range(len(labels) + 1):
        batch = [ClaimRecord(status=label) for label in labels[:batch_size]]
        statistics = aggregation_aggregate_claims(batch, generated_at_utc=_GENERATED_AT)
        assert sum(statistics.counts.values()) + statistics.unclassified_count == len(batch)


def test_aggregation_accepts_single_pass_iterables() -> None:
    """Aggregate generators without requiring a sequence."""

    statistics = aggregation_aggregate_claims(
        (ClaimRecord(status="Approved", area_hectares=0.1) for _ in range(3)),
        generated_at_utc=_GENERATED_AT,
    )

    assert statistics.total_features == 3
    assert abs(statistics.total_area_hectares - 0.3) < 1e-9


def test_aggregation_claim_aggregator_uses_injected_clock() -> None:
    """Stamp statistics with the injected clock value."""

    aggregator = ClaimAggregator(clock=lambda: _GENERATED_AT)

    statistics = aggregator.aggregator_aggregate([ClaimRecord(status="Approved")])

    assert statistics.generated_at_utc == _GENERATED_AT
    assert statistics.statistics_count(ClaimStatusCategory.APPROVED) == 1


@pytest.mark.parametrize(
    ("claimant_families", "area_hectares"),
    [
        (None, None),
        ("lots", "wide"),
        (-3, -2.5),
        (float("nan"), float("nan")),
        (float("inf"), float("-inf")),
        (True, [1.0]),
    ],
)
def test_aggregation_coerces_malformed_claim_record_fields(claimant_families, area_hectares) -> None:
    """Count directly built records with malformed numeric fields as zero.

    Args:
        claimant_families: Malformed family value.
        area_hectares: Malformed area value.

    Returns:
        None: Assertions validate zero-valued totals.

    Raises:
        AssertionError: Raised when malformed values leak into totals.
    """

    records = [
        ClaimRecord(status="Approved", claimant_families=claimant_families, area_hectares=area_hectares),
        ClaimRecord(status="Pending", claimant_families=4, area_hectares=1.25),
    ]

    statistics = aggregation_aggregate_claims(records, generated_at_utc=_GENERATED_AT)

    assert statistics.total_features == 2
    assert statistics.total_families == 4
    assert statistics.total_area_hectares == 1.25
    assert statistics.statistics_count(ClaimStatusCategory.APPROVED) == 1


def test_aggregation_treats_non_text_record_status_as_unclassified() -> None:
    """Classify a record whose status is not text as unclassified."""

    statistics = aggregation_aggregate_claims([ClaimRecord(status=None)], generated_at_utc=_GENERATED_AT)

    assert statistics.unclassified_count == 1
    assert statistics.total_features == 1
