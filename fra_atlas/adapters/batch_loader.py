"""Multi-source claim batch loader with per-source failure isolation."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from fra_atlas.domain import ClaimRecord, domain_build_stage_event

from .interfaces import ClaimBatchLoaderPort, ClaimBatchLoadResult, ClaimSourcePort

logger = logging.getLogger(__name__)


class ClaimBatchLoader(ClaimBatchLoaderPort):
    """Load claim records from every configured source into one batch.

    A source that fails to load is omitted from the batch and reported in
    `failed_sources`; the remaining sources still load.
    """

    def __init__(self, sources: Sequence[ClaimSourcePort]):
        """Initialize loader with ordered claim sources.

        Args:
            sources: Claim sources, loaded in the given order.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when sources is None.
        """

        if sources is None:
            raise ValueError("sources must not be None")
        self._sources = tuple(sources)

    def loader_source_names(self) -> tuple[str, ...]:
        """Return configured source names in load order."""

        return tuple(source.adapter_source_name() for source in self._sources)

    def loader_load_batch(self) -> ClaimBatchLoadResult:
        """Load every source and combine the records that arrived.

        Returns:
            ClaimBatchLoadResult: Partial or complete batch with per-source diagnostics.

        Raises:
            RuntimeError: This loader does not raise for individual source failures.
        """

        records: list[ClaimRecord] = []
        loaded_sources: list[dict[str, Any]] = []
        failed_sources: list[dict[str, Any]] = []
        stage_timeline: list[dict[str, Any]] = [
            domain_build_stage_event(stage="load", status="started", details={"source_count": len(self._sources)})
        ]

        for source in self._sources:
            source_name = source.adapter_source_name()
            source_location = source.adapter_source_location()
            try:
                features = source.adapter_fetch_features()
                source_records = [ClaimRecord.from_feature(feature, source_name=source_name) for feature in features]
            except Exception as error:
                logger.warning("Claim source %s (%s) could not be loaded: %s", source_name, source_location, error)
                failed_sources.append(
                    {
                        "source_name": source_name,
                        "source_location": source_location,
                        "error_type": type(error).__name__,
                        "error_message": str(error),
                    }
                )
                stage_timeline.append(
                    domain_build_stage_event(
                        stage="load_source",
                        status="failed",
                        details={"source_name": source_name, "source_location": source_location},
                        error=error,
                    )
                )
                continue

            records.extend(source_records)
            loaded_sources.append({"source_name": source_name, "feature_count": len(source_records)})
            stage_timeline.append(
                domain_build_stage_event(
                    stage="load_source",
                    status="completed",
                    details={"source_name": source_name, "feature_count": len(source_records)},
                )
            )
            logger.debug("Loaded %d claims from %s", len(source_records), source_name)

        stage_timeline.append(
            domain_build_stage_event(
                stage="load",
                status="completed",
                details={
                    "record_count": len(records),
                    "loaded_source_count": len(loaded_sources),
                    "failed_source_count": len(failed_sources),
                },
            )
        )
        return ClaimBatchLoadResult(
            records=tuple(records),
            loaded_sources=tuple(loaded_sources),
            failed_sources=tuple(failed_sources),
            stage_timeline=stage_timeline,
        )
