"""Report API router composition for report preview and text export."""

from __future__ import annotations

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse, PlainTextResponse

from fra_atlas.reporting import ReportExportService, report_serialize_document


def api_create_reports_router(export_service: ReportExportService) -> APIRouter:
    """Create reports router exposing preview and export endpoints.

    Args:
        export_service: Report export workflow service.

    Returns:
        APIRouter: Router exposing `/reports` endpoints.

    Raises:
        ValueError: Raised when export_service is invalid.
    """

    if export_service is None:
        raise ValueError("export_service must not be None")

    router = APIRouter(prefix="/reports", tags=["reports"])

    @router.get("/preview")
    def api_report_preview() -> JSONResponse:
        """Return the structured report built from the latest statistics.

        Returns:
            JSONResponse: Structured report payload.

        Raises:
            RuntimeError: Raised when alert figures cannot be produced.
        """

        document = export_service.report_build_latest()
        return JSONResponse(content=report_serialize_document(document), status_code=status.HTTP_200_OK)

    @router.get("/export")
    def api_report_export(delay: bool = Query(default=True)) -> PlainTextResponse:
        """Export the latest report as a plain-text attachment.

        Args:
            delay: Whether to apply the configured progress delay.

        Returns:
            PlainTextResponse: Report text with a dated attachment file name.

        Raises:
            OSError: Raised when a configured sink cannot write the report.
        """

        export_result = export_service.report_export(apply_delay=delay)
        return PlainTextResponse(
            content=export_result.document.text,
            status_code=status.HTTP_200_OK,
            headers={"Content-Disposition": f'attachment; filename="{export_result.document.file_name}"'},
        )

    return router


__all__ = ["api_create_reports_router"]
