"""Month grid construction, independent of any rendering technology.

A month is laid out as whole weeks: the grid starts on the first day of the
week containing the 1st and ends on the last day of the week containing the
month's final day.  Padding days outside the month are still emitted, flagged
with ``is_in_current_month=False``, so the caller decides whether to draw
them.

Usage::

    from syncn.cycle_calendar.grid import build_month_grid

    cells = build_month_grid(2024, 2)
    rows = [cells[i:i + 7] for i in range(0, len(cells), 7)]
"""

from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date, timedelta

logger = logging.getLogger("syncn.cycle_calendar.grid")

DAYS_PER_WEEK = 7

# Python weekday numbers (Monday == 0)
MONDAY = 0
SUNDAY = 6

DEFAULT_FIRST_WEEKDAY = SUNDAY
DEFAULT_MIN_WEEK_ROWS = 5


class InvalidMonthError(ValueError):
    """Raised when a (year, month) pair cannot be laid out as a grid."""


@dataclass(frozen=True)
class CalendarCell:
    """One day slot of a month grid.

    Attributes:
        date:                The calendar day shown in this slot.
        is_in_current_month: False for leading/trailing padding days.
        week_index:          Row number, starting at 0.
        weekday_index:       Column number 0-6, relative to the grid's first weekday.
    """

    date: date
    is_in_current_month: bool
    week_index: int
    weekday_index: int


def _validate(year: int, month: int) -> None:
    # bool is an int subclass; True would otherwise lay out January
    if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
        raise InvalidMonthError(f"month must be between 1 and 12, got {month!r}")
    if isinstance(year, bool) or not isinstance(year, int) or not MINYEAR <= year <= MAXYEAR:
        raise InvalidMonthError(
            f"year must be between {MINYEAR} and {MAXYEAR}, got {year!r}"
        )


def _shift(year: int, month: int, day: date, days: int) -> date:
    try:
        return day + timedelta(days=days)
    except OverflowError as exc:
        raise InvalidMonthError(
            f"grid for {year}-{month:02d} extends past the supported date range"
        ) from exc


def month_bounds(
    year: int, month: int, first_weekday: int = DEFAULT_FIRST_WEEKDAY
) -> tuple[date, date]:
    """Return the inclusive (first, last) days of the natural week-aligned span.

    Args:
        year:          Calendar year.
        month:         Month number 1-12.
        first_weekday: Python weekday that starts each row (6 = Sunday).

    Returns:
        Tuple of (grid start, grid end), both inclusive.

    Raises:
        InvalidMonthError: If year or month is out of range, or the padded
            span falls outside the supported date range.
    """
    _validate(year, month)
    first = date(year, month, 1)
    last = date(year, month, calendar.monthrange(year, month)[1])
    lead = (first.weekday() - first_weekday) % DAYS_PER_WEEK
    trail = (first_weekday + DAYS_PER_WEEK - 1 - last.weekday()) % DAYS_PER_WEEK
    return _shift(year, month, first, -lead), _shift(year, month, last, trail)


def build_month_grid(
    year: int,
    month: int,
    *,
    first_weekday: int = DEFAULT_FIRST_WEEKDAY,
    min_week_rows: int = DEFAULT_MIN_WEEK_ROWS,
) -> list[CalendarCell]:
    """Lay out one month as a list of cells in row-major order.

    The natural span is padded with trailing weeks until it has at least
    ``min_week_rows`` rows.

    Args:
        year:          Calendar year.
        month:         Month number 1-12.
        first_weekday: Python weekday that starts each row (6 = Sunday).
        min_week_rows: Minimum number of week rows to emit.

    Returns:
        Cells for every day of the grid; length is a multiple of 7.

    Raises:
        InvalidMonthError: If year or month is out of range, or the padded
            grid falls outside the supported date range.
    """
    start, end = month_bounds(year, month, first_weekday)
    natural_weeks = ((end - start).days + 1) // DAYS_PER_WEEK
    weeks = max(natural_weeks, min_week_rows)
    _shift(year, month, start, weeks * DAYS_PER_WEEK - 1)

    cells: list[CalendarCell] = []
    for offset in range(weeks * DAYS_PER_WEEK):
        day = start + timedelta(days=offset)
        cells.append(
            CalendarCell(
                date=day,
                is_in_current_month=(day.year == year and day.month == month),
                week_index=offset // DAYS_PER_WEEK,
                weekday_index=offset % DAYS_PER_WEEK,
            )
        )

    logger.debug(
        "Built %d-%02d grid: %d weeks (%d natural) from %s",
        year, month, weeks, natural_weeks, start,
    )
    return cells


def upcoming_months(today: date, count: int = 3) -> list[tuple[int, int]]:
    """Return ``count`` consecutive (year, month) pairs starting at ``today``'s month.

    The year rolls over after December, so a December ``today`` yields
    December, then January and February of the following year.
    """
    if count < 1:
        return []
    months: list[tuple[int, int]] = []
    year, month = today.year, today.month
    for _ in range(count):
        months.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return months
