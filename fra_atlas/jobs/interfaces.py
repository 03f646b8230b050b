"""Typed interfaces for job-layer orchestration responsibilities."""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True)
class JobExecutionResult:
    """Result contract for one dashboard workflow execution.

    Attributes:
        job_name: Job identifier.
        status: Final execution state (`success`, `skipped` or `failed`).
        timeline: Stage timeline captured during the run.
    """

    job_name: str
    status: str
    timeline: tuple[dict[str, Any], ...] = field(default_factory=tuple)


class JobOrchestratorPort(Protocol):
    """Port definition for orchestrating dashboard refresh jobs."""

    def job_supported_names(self) -> tuple[str, ...]:
        """Return the set of workflow names this orchestrator can execute.

        Returns:
            tuple[str, ...]: Deterministic list of supported job names.

        Raises:
            RuntimeError: Raised when supported job metadata is unavailable.
        """

    def job_execute(self, job_name: str) -> JobExecutionResult:
        """Execute one named workflow in the job layer.

        Args:
            job_name: Workflow name.

        Returns:
            JobExecutionResult: Final execution status payload.

        Raises:
            ValueError: Raised when the job name is unsupported.
        """


class DashboardInitializationError(RuntimeError):
    """Raised when the dashboard pipeline cannot produce a trustworthy first view."""
