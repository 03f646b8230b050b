"""Main module entrypoint for local runtime execution.

This module validates startup configuration, runs the first dashboard refresh
and then either serves the API or performs one command-line workflow.
"""

import argparse
import logging

import uvicorn

from fra_atlas.bootstrap import bootstrap_create_runtime
from fra_atlas.api import create_api_application
from fra_atlas.config import SettingsLoadError, config_load_settings
from fra_atlas.jobs import DashboardInitializationError, DashboardStateContext

logger = logging.getLogger("fra_atlas.main")


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with code 1 when initialization fails.
    """

    argument_parser = argparse.ArgumentParser(description="FRA Atlas claims dashboard runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "refresh-run", "report-export"),
        help="Runtime command: `api` starts server, `refresh-run` loads and summarizes claims once, "
        "`report-export` refreshes then writes one report to the export directory",
        type=str,
    )
    argument_parser.add_argument(
        "--no-delay",
        dest="no_delay",
        action="store_true",
        help="Skip the progress delay before `report-export` writes the report",
    )
    parsed_arguments = argument_parser.parse_args()

    try:
        settings = config_load_settings()
        logging.basicConfig(
            level=settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        runtime = bootstrap_create_runtime(
            settings=settings,
            export_to_directory=parsed_arguments.command == "report-export",
        )
        runtime.refresh_orchestrator.job_initialize()
    except (SettingsLoadError, DashboardInitializationError) as error:
        logger.error("Error initializing FRA Atlas dashboard: %s", error)
        print("Error: Failed to initialize application")
        raise SystemExit(1) from error

    if parsed_arguments.command == "refresh-run":
        main_print_dashboard_summary(runtime.state_context)
        return

    if parsed_arguments.command == "report-export":
        try:
            export_result = runtime.export_service.report_export(apply_delay=not parsed_arguments.no_delay)
        except OSError as error:
            logger.error("Error writing FRA Atlas report: %s", error)
            print("Error: Failed to export report")
            raise SystemExit(1) from error
        print(export_result.message)
        if export_result.sink_location is not None:
            print(f"Report written to {export_result.sink_location}")
        return

    application = create_api_application(
        settings=runtime.settings,
        state_context=runtime.state_context,
        refresh_orchestrator=runtime.refresh_orchestrator,
        export_service=runtime.export_service,
    )
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_print_dashboard_summary(state_context: DashboardStateContext) -> None:
    """Print the current dashboard counters and totals.

    Args:
        state_context: Dashboard state context.

    Returns:
        None: Prints summary to stdout as side effect.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    view = state_context.dashboard_view()
    print(view.coverage_label)
    for category_name, count in view.counts.items():
        print(f"{category_name}: {count}")
    print(f"families: {view.total_families}")
    print(f"area_hectares: {view.total_area_hectares:.1f}")
    print(f"source: {view.statistics_source}")


if __name__ == "__main__":
    main()
