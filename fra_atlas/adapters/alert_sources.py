"""Environmental alert figure providers.

Real analytics for deforestation, high-risk areas and NDVI violations are not
wired yet; `RandomAlertFigureSource` produces placeholder figures inside fixed
inclusive ranges. Any provider implementing `AlertFigureSourcePort` can
replace it without touching report building.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Final

from fra_atlas.domain import AlertFigures

from .interfaces import AlertFigureSourcePort


@dataclass(frozen=True)
class AlertFigureRange:
    """Inclusive integer bounds for one placeholder alert figure.

    Attributes:
        minimum: Smallest allowed value.
        maximum: Largest allowed value.
    """

    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError("minimum must be >= 0")
        if self.maximum < self.minimum:
            raise ValueError("maximum must be >= minimum")

    def range_contains(self, value: int) -> bool:
        """Return whether value lies within the inclusive bounds."""

        return self.minimum <= value <= self.maximum


@dataclass(frozen=True)
class AlertFigureRanges:
    """Bounds for the three placeholder alert figures."""

    deforestation_alerts: AlertFigureRange
    high_risk_areas: AlertFigureRange
    ndvi_violations: AlertFigureRange


DEFAULT_ALERT_FIGURE_RANGES: Final[AlertFigureRanges] = AlertFigureRanges(
    deforestation_alerts=AlertFigureRange(minimum=3, maximum=10),
    high_risk_areas=AlertFigureRange(minimum=2, maximum=6),
    ndvi_violations=AlertFigureRange(minimum=5, maximum=16),
)


class RandomAlertFigureSource(AlertFigureSourcePort):
    """Placeholder alert figures drawn uniformly from configured ranges."""

    def __init__(
        self,
        ranges: AlertFigureRanges = DEFAULT_ALERT_FIGURE_RANGES,
        random_integer_provider: Callable[[int, int], int] | None = None,
    ):
        """Initialize random alert figure source.

        Args:
            ranges: Inclusive bounds per alert figure.
            random_integer_provider: Optional provider with `random.randint` semantics.

        Returns:
            None: Initializer does not return a value.

        Raises:
            ValueError: Raised when ranges is None.
        """

        if ranges is None:
            raise ValueError("ranges must not be None")
        self._ranges = ranges
        self._random_integer_provider = random_integer_provider or random.randint

    def adapter_source_name(self) -> str:
        """Return stable provider label."""

        return "placeholder_random"

    def adapter_fetch_alert_figures(self) -> AlertFigures:
        """Draw one set of alert figures.

        Returns:
            AlertFigures: Figures inside the configured ranges.

        Raises:
            RuntimeError: Raised when the random provider returns an out-of-range value.
        """

        return AlertFigures(
            deforestation_alerts=self._draw("deforestation_alerts", self._ranges.deforestation_alerts),
            high_risk_areas=self._draw("high_risk_areas", self._ranges.high_risk_areas),
            ndvi_violations=self._draw("ndvi_violations", self._ranges.ndvi_violations),
        )

    def _draw(self, figure_name: str, figure_range: AlertFigureRange) -> int:
        value = int(self._random_integer_provider(figure_range.minimum, figure_range.maximum))
        if not figure_range.range_contains(value):
            raise RuntimeError(
                f"random_integer_provider returned {value} for {figure_name}, "
                f"expected [{figure_range.minimum}, {figure_range.maximum}]"
            )
        return value


class StaticAlertFigureSource(AlertFigureSourcePort):
    """Alert figure source returning one fixed set of figures."""

    def __init__(self, figures: AlertFigures):
        if figures is None:
            raise ValueError("figures must not be None")
        self._figures = figures

    def adapter_source_name(self) -> str:
        """Return stable provider label."""

        return "static"

    def adapter_fetch_alert_figures(self) -> AlertFigures:
        """Return the configured figures."""

        return self._figures
