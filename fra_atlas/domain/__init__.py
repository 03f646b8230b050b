"""Domain models used across application layer boundaries."""

from .claim_parsing import domain_parse_non_negative_float, domain_parse_non_negative_int
from .claim_status import (
	CLAIM_STATUS_CLASSIFICATION_RULES,
	VISIBLE_CLAIM_STATUS_CATEGORIES,
	ClaimStatusCategory,
	ClaimStatusRule,
	domain_classify_claim_status,
)
from .models import (
	DEFAULT_DASHBOARD_COUNTS,
	AlertFigures,
	ClaimRecord,
	ClaimStatistics,
	HealthStatus,
	ReportDocument,
	ReportSection,
	domain_build_default_statistics,
	domain_build_empty_statistics,
)
from .timeline import domain_build_stage_event

__all__ = [
	"AlertFigures",
	"CLAIM_STATUS_CLASSIFICATION_RULES",
	"ClaimRecord",
	"ClaimStatistics",
	"ClaimStatusCategory",
	"ClaimStatusRule",
	"DEFAULT_DASHBOARD_COUNTS",
	"HealthStatus",
	"ReportDocument",
	"ReportSection",
	"VISIBLE_CLAIM_STATUS_CATEGORIES",
	"domain_build_default_statistics",
	"domain_build_empty_statistics",
	"domain_build_stage_event",
	"domain_classify_claim_status",
	"domain_parse_non_negative_float",
	"domain_parse_non_negative_int",
]
