"""Day-granularity helpers shared by the calendar core.

Every comparison in this package happens on calendar days.  Callers may pass
``datetime`` objects (e.g. timestamps straight from a prediction payload);
they are reduced to their ``date`` before use, which is the Python
equivalent of comparing "start of day" values.
"""

from __future__ import annotations

from datetime import date, datetime


def as_day(value: date | datetime) -> date:
    """Return the calendar day of a ``date`` or ``datetime``.

    Timezone-aware datetimes keep the day as written; no conversion to the
    local zone is attempted.
    """
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_day(value: str | date | datetime) -> date:
    """Parse an ISO-8601 date or datetime string into a calendar day.

    Accepts ``2024-09-10``, ``2024-09-10T00:00:00`` and
    ``2024-09-10T00:00:00Z`` style values.

    Raises:
        ValueError: If the string is not ISO-8601.
    """
    if isinstance(value, (date, datetime)):
        return as_day(value)
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text).date()
