"""Job-layer dashboard refresh orchestrator with stage timeline diagnostics."""

from __future__ import annotations

import logging
import traceback

from fra_atlas.adapters import ClaimBatchLoaderPort
from fra_atlas.aggregation import ClaimAggregatorPort
from fra_atlas.domain import domain_build_stage_event

from .dashboard_state import SYSTEM_STATUS_OFFLINE, SYSTEM_STATUS_ONLINE, DashboardStateContext
from .interfaces import DashboardInitializationError, JobExecutionResult, JobOrchestratorPort

logger = logging.getLogger(__name__)


class DashboardRefreshOrchestrator(JobOrchestratorPort):
    """Load one claim batch, aggregate it and render it into the state context."""

    _REFRESH_JOB_NAME = "dashboard_refresh"

    def __init__(
        self,
        loader: ClaimBatchLoaderPort,
        aggregator: ClaimAggregatorPort,
        state_context: DashboardStateContext,
    ):
        """Initialize refresh orchestrator dependencies.

        Args:
            loader: Multi-source claim batch loader.
            aggregator: Claim batch aggregator.
            state_context: Dashboard state context receiving rendered statistics.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when dependencies are invalid.
        """

        if loader is None:
            raise ValueError("loader must not be None")
        if aggregator is None:
            raise ValueError("aggregator must not be None")
        if state_context is None:
            raise ValueError("state_context must not be None")

        self._loader = loader
        self._aggregator = aggregator
        self._state_context = state_context
        self._last_timeline: tuple[dict[str, object], ...] = ()

    def job_supported_names(self) -> tuple[str, ...]:
        """Return supported job names."""

        return (self._REFRESH_JOB_NAME,)

    def job_last_timeline(self) -> tuple[dict[str, object], ...]:
        """Return the stage timeline of the most recent run."""

        return self._last_timeline

    def job_execute(self, job_name: str) -> JobExecutionResult:
        """Execute one dashboard refresh.

        An empty batch (every source failed or had no features) skips
        aggregation and keeps the current snapshot. Unexpected failures mark
        the system offline and leave the previous snapshot in place.

        Args:
            job_name: Name of job to execute.

        Returns:
            JobExecutionResult: `success`, `skipped` or `failed` with the stage timeline.

        Raises:
            ValueError: Raised when job name is unsupported.
        """

        normalized_job_name = job_name.strip()
        if normalized_job_name != self._REFRESH_JOB_NAME:
            raise ValueError(f"unsupported job_name={normalized_job_name}")

        timeline: list[dict[str, object]] = [domain_build_stage_event(stage="run", status="started")]
        try:
            load_result = self._loader.loader_load_batch()
            timeline.extend(load_result.stage_timeline)

            if not load_result.batch_has_records():
                timeline.append(
                    domain_build_stage_event(
                        stage="aggregate",
                        status="skipped",
                        details={
                            "skip_reason": "no_claim_records_loaded",
                            "statistics_source": self._state_context.dashboard_statistics_source(),
                        },
                    )
                )
                timeline.append(domain_build_stage_event(stage="run", status="skipped"))
                logger.warning(
                    "No claim records loaded from %d source(s); keeping %s statistics",
                    len(load_result.failed_sources) + len(load_result.loaded_sources),
                    self._state_context.dashboard_statistics_source(),
                )
                return self._job_finish(normalized_job_name, "skipped", timeline)

            timeline.append(domain_build_stage_event(stage="aggregate", status="started"))
            statistics = self._aggregator.aggregator_aggregate(load_result.records)
            timeline.append(
                domain_build_stage_event(
                    stage="aggregate",
                    status="completed",
                    details={
                        "total_features": statistics.total_features,
                        "unclassified_count": statistics.unclassified_count,
                        "total_families": statistics.total_families,
                        "total_area_hectares": statistics.total_area_hectares,
                    },
                )
            )

            self._state_context.dashboard_render(statistics)
            self._state_context.dashboard_mark_system_status(SYSTEM_STATUS_ONLINE, "Online")
            timeline.append(domain_build_stage_event(stage="render", status="completed"))
            timeline.append(domain_build_stage_event(stage="run", status="success"))
            return self._job_finish(normalized_job_name, "success", timeline)
        except (ValueError, TypeError, RuntimeError, OSError) as error:
            logger.error("Dashboard refresh failed: %s", error)
            self._state_context.dashboard_mark_system_status(SYSTEM_STATUS_OFFLINE, "Refresh failed")
            timeline.append(
                domain_build_stage_event(
                    stage="run",
                    status="failed",
                    details={"traceback": traceback.format_exc()},
                    error=error,
                )
            )
            return self._job_finish(normalized_job_name, "failed", timeline)

    def job_initialize(self) -> JobExecutionResult:
        """Run the first refresh of a session.

        Returns:
            JobExecutionResult: Successful or skipped first refresh.

        Raises:
            DashboardInitializationError: Raised when the first refresh failed.
        """

        execution_result = self.job_execute(self._REFRESH_JOB_NAME)
        if execution_result.status == "failed":
            failure_event = execution_result.timeline[-1]
            raise DashboardInitializationError(
                f"Failed to initialize application: {failure_event.get('error_message', 'unknown error')}"
            )
        return execution_result

    def _job_finish(
        self,
        job_name: str,
        status: str,
        timeline: list[dict[str, object]],
    ) -> JobExecutionResult:
        self._last_timeline = tuple(timeline)
        return JobExecutionResult(job_name=job_name, status=status, timeline=self._last_timeline)
