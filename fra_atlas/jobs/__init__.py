"""Job layer package for dashboard state and refresh orchestration."""

from .dashboard_state import (
	STATISTICS_SOURCE_AGGREGATION,
	STATISTICS_SOURCE_DEFAULT,
	SYSTEM_STATUS_OFFLINE,
	SYSTEM_STATUS_ONLINE,
	DashboardStateContext,
	DashboardView,
)
from .interfaces import DashboardInitializationError, JobExecutionResult, JobOrchestratorPort
from .refresh_orchestrator import DashboardRefreshOrchestrator

__all__ = [
	"DashboardInitializationError",
	"DashboardRefreshOrchestrator",
	"DashboardStateContext",
	"DashboardView",
	"JobExecutionResult",
	"JobOrchestratorPort",
	"STATISTICS_SOURCE_AGGREGATION",
	"STATISTICS_SOURCE_DEFAULT",
	"SYSTEM_STATUS_OFFLINE",
	"SYSTEM_STATUS_ONLINE",
]
