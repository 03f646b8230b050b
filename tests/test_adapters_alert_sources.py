"""Regression tests for alert figure providers."""

from __future__ import annotations

import pytest

from fra_atlas.adapters import (
    DEFAULT_ALERT_FIGURE_RANGES,
    AlertFigureRange,
    RandomAlertFigureSource,
    StaticAlertFigureSource,
)
from fra_atlas.domain import AlertFigures


def test_adapters_random_alert_source_requests_documented_ranges() -> None:
    """Draw each figure from its documented inclusive range.

    Returns:
        None: Assertions validate requested bounds.

    Raises:
        AssertionError: Raised when bounds differ from the contract.
    """

    requested_bounds: list[tuple[int, int]] = []

    def _lower_bound(minimum: int, maximum: int) -> int:
        requested_bounds.append((minimum, maximum))
        return minimum

    figures = RandomAlertFigureSource(random_integer_provider=_lower_bound).adapter_fetch_alert_figures()

    assert requested_bounds == [(3, 10), (2, 6), (5, 16)]
    assert figures == AlertFigures(deforestation_alerts=3, high_risk_areas=2, ndvi_violations=5)


def test_adapters_random_alert_source_stays_within_default_ranges() -> None:
    """Keep figures from the real random provider inside the ranges."""

    source = RandomAlertFigureSource()

    for _ in range(50):
        figures = source.adapter_fetch_alert_figures()
        assert DEFAULT_ALERT_FIGURE_RANGES.deforestation_alerts.range_contains(figures.deforestation_alerts)
        assert DEFAULT_ALERT_FIGURE_RANGES.high_risk_areas.range_contains(figures.high_risk_areas)
        assert DEFAULT_ALERT_FIGURE_RANGES.ndvi_violations.range_contains(figures.ndvi_violations)


def test_adapters_random_alert_source_rejects_out_of_range_provider() -> None:
    """Raise when the injected provider escapes the configured range."""

    source = RandomAlertFigureSource(random_integer_provider=lambda minimum, maximum: maximum + 1)

    with pytest.raises(RuntimeError, match="deforestation_alerts"):
        source.adapter_fetch_alert_figures()


def test_adapters_alert_figure_range_validates_bounds() -> None:
    """Reject inverted or negative bounds."""

    with pytest.raises(ValueError, match="maximum"):
        AlertFigureRange(minimum=5, maximum=4)
    with pytest.raises(ValueError, match="minimum"):
        AlertFigureRange(minimum=-1, maximum=4)


def test_adapters_static_alert_source_returns_configured_figures() -> None:
    """Return the configured figures unchanged."""

    figures = AlertFigures(deforestation_alerts=1, high_risk_areas=0, ndvi_violations=2)

    assert StaticAlertFigureSource(figures).adapter_fetch_alert_figures() is figures
