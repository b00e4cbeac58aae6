"""Reporting windows for revenue snapshots.

A ``WindowSpec`` is what the caller asks for (a kind plus optional bounds).
Resolving it against a calendar day produces a ``TimeWindow`` with concrete,
inclusive bounds:

    day    → today only
    week   → [today - 7 days, today]
    month  → [today - 30 days, today]
    custom → [start, end], end inclusive to 23:59:59.999999
"""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from enum import Enum

from sales.exceptions import InvalidWindow
from sales.reconciliation.dates import coerce_date, coerce_datetime


class WindowKind(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


# Days looked back from today for the rolling windows
_LOOKBACK_DAYS = {
    WindowKind.DAY: 0,
    WindowKind.WEEK: 7,
    WindowKind.MONTH: 30,
}


def today_utc() -> date:
    return datetime.now(UTC).date()


@dataclass(frozen=True)
class TimeWindow:
    """A resolved window with inclusive calendar-day bounds."""

    kind: WindowKind
    start: date
    end: date

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.start, time.min)

    @property
    def ends_at(self) -> datetime:
        return datetime.combine(self.end, time.max)

    @property
    def length_days(self) -> int:
        return (self.end - self.start).days + 1

    def contains(self, value) -> bool:
        """True when ``value`` falls inside the window. Unreadable dates never match."""
        moment = coerce_datetime(value)
        if moment is None:
            return False
        return self.starts_at <= moment <= self.ends_at

    def preceding(self) -> "TimeWindow":
        """The window of equal length that ends the day before this one starts."""
        end = self.start - timedelta(days=1)
        start = end - timedelta(days=self.length_days - 1)
        return TimeWindow(kind=self.kind, start=start, end=end)


@dataclass(frozen=True)
class WindowSpec:
    """A requested window: ``kind`` plus ``start``/``end`` for custom ranges."""

    kind: WindowKind = WindowKind.WEEK
    start: date | None = None
    end: date | None = None

    @classmethod
    def build(cls, kind, start=None, end=None) -> "WindowSpec":
        """Validate raw input (strings or dates) and return a spec.

        Raises ``InvalidWindow`` for an unknown kind, or for a custom range
        with a missing/unreadable bound or ``start > end``. Bounds passed with
        a rolling kind are ignored.
        """
        try:
            window_kind = kind if isinstance(kind, WindowKind) else WindowKind(str(kind).lower())
        except ValueError:
            raise InvalidWindow({"kind": [f"Unknown window kind: {kind}"]}) from None

        if window_kind != WindowKind.CUSTOM:
            return cls(kind=window_kind)

        errors = {}
        start_date = coerce_date(start)
        end_date = coerce_date(end)
        if start_date is None:
            errors["start"] = ["A valid start date is required for a custom window"]
        if end_date is None:
            errors["end"] = ["A valid end date is required for a custom window"]
        if errors:
            raise InvalidWindow(errors)

        if start_date > end_date:
            raise InvalidWindow({"start": ["Start date must be on or before end date"]})

        return cls(kind=window_kind, start=start_date, end=end_date)

    def resolve(self, today: date | None = None) -> TimeWindow:
        if self.kind == WindowKind.CUSTOM:
            if self.start is None or self.end is None or self.start > self.end:
                raise InvalidWindow({"window": ["Custom window needs start <= end"]})
            return TimeWindow(kind=self.kind, start=self.start, end=self.end)

        today = today or today_utc()
        start = today - timedelta(days=_LOOKBACK_DAYS[self.kind])
        return TimeWindow(kind=self.kind, start=start, end=today)
