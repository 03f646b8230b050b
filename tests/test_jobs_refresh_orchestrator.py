"""Regression tests for dashboard refresh orchestration."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from fra_atlas.adapters import ClaimBatchLoadResult
from fra_atlas.aggregation import ClaimAggregator
from fra_atlas.domain import ClaimRecord, ClaimStatusCategory
from fra_atlas.jobs import (
    STATISTICS_SOURCE_AGGREGATION,
    STATISTICS_SOURCE_DEFAULT,
    SYSTEM_STATUS_OFFLINE,
    DashboardInitializationError,
    DashboardRefreshOrchestrator,
    DashboardStateContext,
)

_NOW = datetime(2025, 9, 30, 8, 0, tzinfo=timezone.utc)


class _LoaderStub:
    """Batch loader stub returning queued records or raising."""

    def __init__(self, batches: list[tuple[ClaimRecord, ...]] | None = None, error: Exception | None = None):
        self._batches = list(batches or [])
        self._error = error
        self.load_calls = 0

    def loader_load_batch(self) -> ClaimBatchLoadResult:
        """Return next queued batch or raise configured error."""

        self.load_calls += 1
        if self._error is not None:
            raise self._error
        records = self._batches.pop(0) if self._batches else ()
        return ClaimBatchLoadResult(
            records=records,
            loaded_sources=({"source_name": "stub", "feature_count": len(records)},),
            failed_sources=(),
            stage_timeline=[{"stage": "load", "status": "completed"}],
        )


class _AggregatorSpy(ClaimAggregator):
    """Aggregator counting invocations."""

    def __init__(self):
        super().__init__(clock=lambda: _NOW)
        self.calls = 0

    def aggregator_aggregate(self, records):
        """Count call and delegate."""

        self.calls += 1
        return super().aggregator_aggregate(records)


def _build_orchestrator(loader: _LoaderStub) -> tuple[DashboardRefreshOrchestrator, DashboardStateContext, _AggregatorSpy]:
    """Create orchestrator with fresh state context and aggregator spy.

    Returns:
        tuple: Orchestrator, state context and aggregator spy.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    state_context = DashboardStateContext(clock=lambda: _NOW)
    aggregator = _AggregatorSpy()
    orchestrator = DashboardRefreshOrchestrator(loader=loader, aggregator=aggregator, state_context=state_context)
    return orchestrator, state_context, aggregator


def test_jobs_refresh_renders_aggregated_batch() -> None:
    """Aggregate a loaded batch and render it into the context.

    Returns:
        None: Assertions validate rendered statistics and timeline.

    Raises:
        AssertionError: Raised when refresh behavior is unexpected.
    """

    orchestrator, state_context, aggregator = _build_orchestrator(
        _LoaderStub(batches=[(ClaimRecord(status="Approved"), ClaimRecord(status="pending review"))])
    )

    execution_result = orchestrator.job_execute("dashboard_refresh")

    assert execution_result.status == "success"
    assert aggregator.calls == 1
    assert state_context.dashboard_statistics_source() == STATISTICS_SOURCE_AGGREGATION
    current = state_context.dashboard_current_statistics()
    assert current.statistics_count(ClaimStatusCategory.PENDING) == 1
    assert [event["stage"] for event in execution_result.timeline] == [
        "run",
        "load",
        "aggregate",
        "aggregate",
        "render",
        "run",
    ]
    assert orchestrator.job_last_timeline() == execution_result.timeline


def test_jobs_refresh_skips_aggregation_for_empty_batch_and_keeps_defaults() -> None:
    """Keep the default snapshot when no claim records were loaded."""

    orchestrator, state_context, aggregator = _build_orchestrator(_LoaderStub(batches=[()]))

    execution_result = orchestrator.job_execute("dashboard_refresh")

    assert execution_result.status == "skipped"
    assert aggregator.calls == 0
    assert state_context.dashboard_statistics_source() == STATISTICS_SOURCE_DEFAULT
    assert state_context.dashboard_current_statistics().total_features == 445


def test_jobs_refresh_keeps_last_rendered_snapshot_after_empty_batch() -> None:
    """Leave the previous aggregation in place when a later batch is empty."""

    orchestrator, state_context, _ = _build_orchestrator(
        _LoaderStub(batches=[(ClaimRecord(status="Rejected"),), ()])
    )

    orchestrator.job_execute("dashboard_refresh")
    first_statistics = state_context.dashboard_current_statistics()
    orchestrator.job_execute("dashboard_refresh")

    assert state_context.dashboard_current_statistics() is first_statistics


def test_jobs_refresh_failure_marks_system_offline_and_keeps_snapshot() -> None:
    """Return failed status, mark offline, and avoid partial statistics."""

    orchestrator, state_context, _ = _build_orchestrator(_LoaderStub(error=RuntimeError("loader crashed")))

    execution_result = orchestrator.job_execute("dashboard_refresh")

    assert execution_result.status == "failed"
    assert execution_result.timeline[-1]["error_message"] == "loader crashed"
    assert state_context.dashboard_system_status().status == SYSTEM_STATUS_OFFLINE
    assert state_context.dashboard_statistics_source() == STATISTICS_SOURCE_DEFAULT


def test_jobs_refresh_initialize_raises_on_failure() -> None:
    """Surface initialization failure as a single typed error."""

    orchestrator, _, _ = _build_orchestrator(_LoaderStub(error=RuntimeError("config unreadable")))

    with pytest.raises(DashboardInitializationError, match="Failed to initialize application: config unreadable"):
        orchestrator.job_initialize()


def test_jobs_refresh_initialize_accepts_empty_first_batch() -> None:
    """Treat an empty first batch as a non-fatal skipped refresh."""

    orchestrator, _, _ = _build_orchestrator(_LoaderStub(batches=[()]))

    assert orchestrator.job_initialize().status == "skipped"


def test_jobs_refresh_rejects_unsupported_job_name() -> None:
    """Reject job names other than the refresh job."""

    orchestrator, _, _ = _build_orchestrator(_LoaderStub())

    assert orchestrator.job_supported_names() == ("dashboard_refresh",)
    with pytest.raises(ValueError, match="unsupported job_name"):
        orchestrator.job_execute("ingestion_run")
