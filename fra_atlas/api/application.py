"""FastAPI application factory for the claims dashboard service."""

from fastapi import FastAPI

from fra_atlas.config import AtlasSettings
from fra_atlas.jobs import DashboardStateContext, JobOrchestratorPort
from fra_atlas.reporting import ReportExportService

from .routers import api_create_dashboard_router, api_create_health_router, api_create_reports_router


def create_api_application(
    settings: AtlasSettings,
    state_context: DashboardStateContext,
    refresh_orchestrator: JobOrchestratorPort,
    export_service: ReportExportService,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        state_context: Dashboard state context shared by routers.
        refresh_orchestrator: Job orchestrator for dashboard refresh.
        export_service: Report export workflow service.

    Returns:
        FastAPI: Framework application instance with all routers.

    Raises:
        ValueError: Raised when router dependencies are invalid.
    """
    application = FastAPI(title="FRA Atlas Claims Dashboard")

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, str]:
        """Return service identification for bootstrap verification."""

        return {
            "service": "fra-atlas",
            "status": "ready",
            "environment": settings.environment_name,
        }

    application.include_router(api_create_health_router(state_context=state_context))
    application.include_router(
        api_create_dashboard_router(
            state_context=state_context,
            refresh_orchestrator=refresh_orchestrator,
        )
    )
    application.include_router(api_create_reports_router(export_service=export_service))

    return application
