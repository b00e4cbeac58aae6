"""Calendar date coercion for window filtering.

Order and invoice dates reach the engine as ``date``/``datetime`` values from
the aggregates, but imported records may still carry the dashboard's display
format ("June 15, 2023") or ISO strings. Values that cannot be read return
``None`` and are excluded from every window.
"""

from datetime import UTC, date, datetime

_DISPLAY_FORMATS = (
    "%B %d, %Y",  # June 15, 2023
    "%b %d, %Y",  # Jun 15, 2023
)


def coerce_datetime(value) -> datetime | None:
    """Return a naive UTC ``datetime`` for ``value``, or ``None`` if unreadable."""
    if value is None:
        return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(UTC).replace(tzinfo=None)
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return coerce_datetime(datetime.fromisoformat(text))
    except ValueError:
        pass

    for fmt in _DISPLAY_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def coerce_date(value) -> date | None:
    """Return the calendar day of ``value``, or ``None`` if unreadable."""
    moment = coerce_datetime(value)
    return moment.date() if moment is not None else None
