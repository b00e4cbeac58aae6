"""Previous-period baselines for the revenue change figure.

Provides get_baseline() / set_baseline() to swap strategies:
- SyntheticBaseline: fixed ratio of current revenue per window kind (default)
- PreviousPeriodBaseline: recognized revenue over the preceding window

``SALES_REVENUE_BASELINE`` (``synthetic`` | ``previous_period``) picks the
default strategy.
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Callable

from sales.reconciliation.window import TimeWindow, WindowKind

# Ratio of the previous period to the current one
SYNTHETIC_FACTORS = {
    WindowKind.DAY: 0.80,
    WindowKind.WEEK: 0.85,
    WindowKind.MONTH: 0.90,
}

# Signature: (window) -> recognized revenue over that window
RecognizedFor = Callable[[TimeWindow], float]


class RevenueBaseline(ABC):
    name: str

    @abstractmethod
    def previous(self, recognized: float, window: TimeWindow, recognized_for: RecognizedFor) -> float:
        """Return the baseline revenue the current period is compared against."""
        ...


class PreviousPeriodBaseline(RevenueBaseline):
    name = "previous_period"

    def previous(self, recognized, window, recognized_for):
        return recognized_for(window.preceding())


class SyntheticBaseline(RevenueBaseline):
    """Fixed factors per rolling kind. Custom windows have no factor and use
    the preceding period instead."""

    name = "synthetic"

    def __init__(self, factors=None):
        self.factors = dict(SYNTHETIC_FACTORS if factors is None else factors)

    def previous(self, recognized, window, recognized_for):
        factor = self.factors.get(window.kind)
        if factor is None:
            return PreviousPeriodBaseline().previous(recognized, window, recognized_for)
        return recognized * factor


_STRATEGIES = {
    SyntheticBaseline.name: SyntheticBaseline,
    PreviousPeriodBaseline.name: PreviousPeriodBaseline,
}

_current_baseline: RevenueBaseline | None = None


def get_baseline() -> RevenueBaseline:
    """Return the active baseline strategy, building it from the environment on first use."""
    global _current_baseline
    if _current_baseline is None:
        name = os.environ.get("SALES_REVENUE_BASELINE", SyntheticBaseline.name)
        strategy_cls = _STRATEGIES.get(name)
        if strategy_cls is None:
            raise ValueError(f"Unknown revenue baseline: {name}")
        _current_baseline = strategy_cls()
    return _current_baseline


def set_baseline(baseline: RevenueBaseline) -> None:
    """Override the active baseline (useful for tests)."""
    global _current_baseline
    _current_baseline = baseline


def reset_baseline() -> None:
    """Reset to the environment-configured baseline."""
    global _current_baseline
    _current_baseline = None
