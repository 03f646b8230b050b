"""Health endpoint router composition for dashboard pipeline status."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fra_atlas.jobs import SYSTEM_STATUS_ONLINE, DashboardStateContext


def api_create_health_router(state_context: DashboardStateContext) -> APIRouter:
    """Create health-check router reporting dashboard pipeline status.

    Args:
        state_context: Dashboard state context holding system status.

    Returns:
        APIRouter: Router exposing `/health` endpoint.

    Raises:
        ValueError: Raised when state_context is invalid.
    """

    if state_context is None:
        raise ValueError("state_context must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return application and dashboard pipeline health state.

        Returns:
            JSONResponse: 200 when the pipeline is online, 503 when offline.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        system_status = state_context.dashboard_system_status()
        payload = {
            "status": "ok" if system_status.status == SYSTEM_STATUS_ONLINE else "degraded",
            "app": "up",
            "dashboard": system_status.status,
            "detail": system_status.detail,
            "statistics_source": state_context.dashboard_statistics_source(),
        }
        status_code = (
            status.HTTP_200_OK if system_status.status == SYSTEM_STATUS_ONLINE else status.HTTP_503_SERVICE_UNAVAILABLE
        )
        return JSONResponse(content=payload, status_code=status_code)

    return router
