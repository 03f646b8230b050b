"""Application bootstrap wiring for startup validation and dependency assembly."""

from __future__ import annotations

from dataclasses import dataclass

from fastapi import FastAPI

from fra_atlas.adapters import (
    AlertFigureRange,
    AlertFigureRanges,
    ClaimBatchLoader,
    DirectoryReportSink,
    GeoJsonClaimSource,
    RandomAlertFigureSource,
)
from fra_atlas.aggregation import ClaimAggregator
from fra_atlas.api import create_api_application
from fra_atlas.config import AtlasSettings, config_load_settings
from fra_atlas.jobs import DashboardRefreshOrchestrator, DashboardStateContext
from fra_atlas.reporting import ReportContext, ReportExportService


@dataclass(frozen=True)
class DashboardRuntime:
    """Wired runtime components shared by all trigger surfaces.

    Attributes:
        settings: Validated runtime settings.
        state_context: Dashboard state context.
        refresh_orchestrator: Dashboard refresh job orchestrator.
        export_service: Report export workflow service.
    """

    settings: AtlasSettings
    state_context: DashboardStateContext
    refresh_orchestrator: DashboardRefreshOrchestrator
    export_service: ReportExportService


def bootstrap_create_runtime(
    settings: AtlasSettings | None = None,
    export_to_directory: bool = False,
) -> DashboardRuntime:
    """Assemble loader, aggregator, state context and report export service.

    Args:
        settings: Optional pre-validated settings; loaded from environment when None.
        export_to_directory: Whether exported reports are written to the export directory.

    Returns:
        DashboardRuntime: Fully wired runtime components.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    claim_sources = [
        GeoJsonClaimSource(
            source_name=source_name,
            location=location,
            request_timeout_seconds=resolved_settings.source_request_timeout_seconds,
        )
        for source_name, location in resolved_settings.settings_claim_source_entries()
    ]
    state_context = DashboardStateContext(region_count=len(resolved_settings.report_regions_covered))
    refresh_orchestrator = DashboardRefreshOrchestrator(
        loader=ClaimBatchLoader(sources=claim_sources),
        aggregator=ClaimAggregator(),
        state_context=state_context,
    )
    alert_source = RandomAlertFigureSource(
        ranges=AlertFigureRanges(
            deforestation_alerts=AlertFigureRange(
                minimum=resolved_settings.alert_deforestation_min,
                maximum=resolved_settings.alert_deforestation_max,
            ),
            high_risk_areas=AlertFigureRange(
                minimum=resolved_settings.alert_high_risk_min,
                maximum=resolved_settings.alert_high_risk_max,
            ),
            ndvi_violations=AlertFigureRange(
                minimum=resolved_settings.alert_ndvi_violation_min,
                maximum=resolved_settings.alert_ndvi_violation_max,
            ),
        )
    )
    export_service = ReportExportService(
        statistics_reader=state_context,
        alert_source=alert_source,
        report_context=ReportContext(
            regions_covered=tuple(resolved_settings.report_regions_covered),
            monitoring_period=resolved_settings.report_monitoring_period,
            total_families_protected=resolved_settings.report_total_families_protected,
            forest_area_secured_hectares=resolved_settings.report_forest_area_secured_hectares,
        ),
        sink=DirectoryReportSink(resolved_settings.report_export_directory) if export_to_directory else None,
        export_delay_seconds=resolved_settings.report_export_delay_seconds,
    )
    return DashboardRuntime(
        settings=resolved_settings,
        state_context=state_context,
        refresh_orchestrator=refresh_orchestrator,
        export_service=export_service,
    )


def bootstrap_create_application(settings: AtlasSettings | None = None) -> FastAPI:
    """Assemble the API application after validating configuration and the first refresh.

    Args:
        settings: Optional pre-validated settings; loaded from environment when None.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        DashboardInitializationError: Raised when the first dashboard refresh fails.
    """

    runtime = bootstrap_create_runtime(settings=settings)
    runtime.refresh_orchestrator.job_initialize()
    return create_api_application(
        settings=runtime.settings,
        state_context=runtime.state_context,
        refresh_orchestrator=runtime.refresh_orchestrator,
        export_service=runtime.export_service,
    )
