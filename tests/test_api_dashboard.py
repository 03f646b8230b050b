"""Regression tests for dashboard, health and report API endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi.testclient import TestClient

from fra_atlas.adapters import ClaimBatchLoadResult, StaticAlertFigureSource
from fra_atlas.aggregation import ClaimAggregator
from fra_atlas.api.application import create_api_application
from fra_atlas.config import AtlasSettings
from fra_atlas.domain import AlertFigures, ClaimRecord
from fra_atlas.jobs import DashboardRefreshOrchestrator, DashboardStateContext
from fra_atlas.reporting import ReportExportService

_NOW = datetime(2025, 9, 30, 8, 0, tzinfo=timezone.utc)


class _LoaderStub:
    """Batch loader stub returning one fixed batch or raising."""

    def __init__(self, records: tuple[ClaimRecord, ...] = (), error: Exception | None = None):
        self._records = records
        self._error = error

    def loader_load_batch(self) -> ClaimBatchLoadResult:
        """Return fixed batch or raise configured error."""

        if self._error is not None:
            raise self._error
        return ClaimBatchLoadResult(records=self._records, loaded_sources=(), failed_sources=(), stage_timeline=[])


def _build_client(loader: _LoaderStub, sleep_calls: list[float] | None = None) -> TestClient:
    """Create API test client around stubbed loader and deterministic services.

    Returns:
        TestClient: Client for the assembled application.

    Raises:
        ValueError: Raised by factories when dependencies are invalid.
    """

    state_context = DashboardStateContext(clock=lambda: _NOW)
    refresh_orchestrator = DashboardRefreshOrchestrator(
        loader=loader,
        aggregator=ClaimAggregator(clock=lambda: _NOW),
        state_context=state_context,
    )
    export_service = ReportExportService(
        statistics_reader=state_context,
        alert_source=StaticAlertFigureSource(
            AlertFigures(deforestation_alerts=6, high_risk_areas=3, ndvi_violations=8)
        ),
        export_delay_seconds=2.0,
        sleep=(sleep_calls if sleep_calls is not None else []).append,
        clock=lambda: _NOW,
    )
    application = create_api_application(
        settings=AtlasSettings(environment_name="test"),
        state_context=state_context,
        refresh_orchestrator=refresh_orchestrator,
        export_service=export_service,
    )
    return TestClient(application)


def test_api_foundation_index_reports_environment() -> None:
    """Return service identification with the configured environment."""

    response = _build_client(_LoaderStub()).get("/")

    assert response.status_code == 200
    assert response.json() == {"service": "fra-atlas", "status": "ready", "environment": "test"}


def test_api_dashboard_statistics_returns_defaults_before_refresh() -> None:
    """Return default counters before any refresh ran.

    Returns:
        None: Assertions validate response payload.

    Raises:
        AssertionError: Raised when payload does not match defaults.
    """

    response = _build_client(_LoaderStub()).get("/dashboard/statistics")

    assert response.status_code == 200
    payload = response.json()
    assert payload["counts"] == {"approved": 234, "pending": 156, "under_review": 43, "rejected": 12}
    assert payload["statistics_source"] == "default"
    assert payload["total_features"] == 445


def test_api_dashboard_refresh_renders_loaded_batch() -> None:
    """Refresh statistics from the loaded batch and expose them in the view."""

    client = _build_client(
        _LoaderStub(
            records=(
                ClaimRecord(status="Approved", claimant_families=10, area_hectares=1.5),
                ClaimRecord(status="Pending Review", claimant_families=5, area_hectares=2.25),
                ClaimRecord(status="Under Review"),
                ClaimRecord(status="Rejected", claimant_families=2, area_hectares=0.75),
                ClaimRecord(status="Unknown"),
            )
        )
    )

    refresh_response = client.post("/dashboard/refresh")
    view_response = client.get("/dashboard/view")

    assert refresh_response.status_code == 200
    assert refresh_response.json()["status"] == "success"
    statistics_payload = refresh_response.json()["statistics"]
    assert statistics_payload["counts"] == {"approved": 1, "pending": 1, "under_review": 1, "rejected": 1}
    assert statistics_payload["unclassified_count"] == 1
    assert statistics_payload["total_families"] == 17
    assert statistics_payload["total_area_hectares"] == 4.5
    assert view_response.json()["coverage_label"] == "Coverage: 4 States | 5 Active Claims"
    assert view_response.json()["last_updated_label"] == "Updated 08:00:00"


def test_api_dashboard_refresh_failure_returns_500_and_degrades_health() -> None:
    """Return 500 for failed refresh and report degraded health."""

    client = _build_client(_LoaderStub(error=RuntimeError("loader crashed")))

    refresh_response = client.post("/dashboard/refresh")
    health_response = client.get("/health")

    assert refresh_response.status_code == 500
    assert refresh_response.json()["code"] == "DASHBOARD_REFRESH_FAILED"
    assert health_response.status_code == 503
    assert health_response.json()["status"] == "degraded"
    assert health_response.json()["dashboard"] == "offline"


def test_api_health_returns_success_when_online() -> None:
    """Return HTTP 200 while the dashboard pipeline is online."""

    response = _build_client(_LoaderStub()).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["app"] == "up"


def test_api_report_export_returns_dated_text_attachment() -> None:
    """Download the report as text with the dated attachment file name."""

    sleep_calls: list[float] = []
    client = _build_client(_LoaderStub(records=(ClaimRecord(status="Approved"),)), sleep_calls=sleep_calls)
    client.post("/dashboard/refresh")

    response = client.get("/reports/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.headers["content-disposition"] == 'attachment; filename="FRA_Atlas_Report_2025-09-30.txt"'
    assert "Approved Claims: 1" in response.text
    assert "Total FRA Claims Monitored: 1" in response.text
    assert sleep_calls == [2.0]


def test_api_report_export_can_skip_delay() -> None:
    """Skip the progress delay when requested."""

    sleep_calls: list[float] = []
    client = _build_client(_LoaderStub(), sleep_calls=sleep_calls)

    response = client.get("/reports/export", params={"delay": "false"})

    assert response.status_code == 200
    assert sleep_calls == []


def test_api_report_preview_returns_structured_report() -> None:
    """Return the structured report payload for the current snapshot."""

    response = _build_client(_LoaderStub()).get("/reports/preview")

    assert response.status_code == 200
    payload = response.json()
    assert payload["summary"]["total_claims"] == 445
    assert payload["summary"]["approved"] == 234
    assert payload["alert_figures"]["deforestation_alerts"] == 6
    assert payload["sections"][-1]["lines"][0] == "1. Prioritize review of 156 pending claims"
