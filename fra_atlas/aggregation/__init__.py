"""Aggregation layer package for claim batch statistics."""

from .aggregator import ClaimAggregator, aggregation_aggregate_claims, aggregation_coerce_record
from .interfaces import ClaimAggregatorPort

__all__ = [
	"ClaimAggregator",
	"ClaimAggregatorPort",
	"aggregation_aggregate_claims",
	"aggregation_coerce_record",
]
