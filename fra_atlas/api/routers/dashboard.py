"""Dashboard API router composition for statistics reads and refresh triggers."""
# pylint: disable=duplicate-code

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fra_atlas.domain import VISIBLE_CLAIM_STATUS_CATEGORIES, ClaimStatistics
from fra_atlas.jobs import DashboardStateContext, JobOrchestratorPort


def api_create_dashboard_router(
    state_context: DashboardStateContext,
    refresh_orchestrator: JobOrchestratorPort,
) -> APIRouter:
    """Create dashboard router exposing statistics, view and refresh endpoints.

    Args:
        state_context: Dashboard state context.
        refresh_orchestrator: Job orchestrator for dashboard refresh.

    Returns:
        APIRouter: Router exposing `/dashboard` endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if state_context is None:
        raise ValueError("state_context must not be None")
    if refresh_orchestrator is None:
        raise ValueError("refresh_orchestrator must not be None")

    router = APIRouter(prefix="/dashboard", tags=["dashboard"])

    @router.get("/statistics")
    def api_dashboard_statistics() -> JSONResponse:
        """Return the current statistics snapshot."""

        payload = api_serialize_statistics(state_context.dashboard_current_statistics())
        payload["statistics_source"] = state_context.dashboard_statistics_source()
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    @router.get("/view")
    def api_dashboard_view() -> JSONResponse:
        """Return the dashboard presentation payload."""

        return JSONResponse(content=asdict(state_context.dashboard_view()), status_code=status.HTTP_200_OK)

    @router.post("/refresh")
    def api_dashboard_refresh() -> JSONResponse:
        """Trigger one dashboard refresh run.

        Returns:
            JSONResponse: Run result with timeline; 500 when the run failed.

        Raises:
            ValueError: Raised when the orchestrator rejects the job name.
        """

        execution_result = refresh_orchestrator.job_execute(job_name="dashboard_refresh")
        payload = {
            "job_name": execution_result.job_name,
            "status": execution_result.status,
            "timeline": list(execution_result.timeline),
            "statistics": api_serialize_statistics(state_context.dashboard_current_statistics()),
        }
        if execution_result.status == "failed":
            payload["code"] = "DASHBOARD_REFRESH_FAILED"
            return JSONResponse(content=payload, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router


def api_serialize_statistics(statistics: ClaimStatistics) -> dict[str, object]:
    """Serialize one statistics snapshot to JSON payload.

    Args:
        statistics: Statistics snapshot.

    Returns:
        dict[str, object]: JSON-serializable statistics with display-rounded area.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return {
        "counts": {
            category.value: statistics.statistics_count(category) for category in VISIBLE_CLAIM_STATUS_CATEGORIES
        },
        "unclassified_count": statistics.unclassified_count,
        "total_claims": statistics.statistics_total_claims(),
        "total_features": statistics.total_features,
        "total_families": statistics.total_families,
        "total_area_hectares": round(statistics.total_area_hectares, 1),
        "generated_at_utc": statistics.generated_at_utc.isoformat(),
    }


__all__ = ["api_create_dashboard_router", "api_serialize_statistics"]
