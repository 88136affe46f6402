"""Combine grid, phase resolution and widening-window flags for one month.

This is the hand-off point to the rendering layer: it walks the month grid,
resolves every in-month day and returns plain, immutable records.  Nothing is
cached between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType

from syncn.cycle_calendar.config_loader import CalendarConfig, get_calendar_config
from syncn.cycle_calendar.dates import as_day
from syncn.cycle_calendar.grid import (
    DAYS_PER_WEEK,
    DEFAULT_FIRST_WEEKDAY,
    DEFAULT_MIN_WEEK_ROWS,
    CalendarCell,
    build_month_grid,
    upcoming_months,
)
from syncn.cycle_calendar.phase_resolver import (
    DEFAULT_FALLBACK_PHASE,
    PhaseLookup,
    PhaseResolver,
)
from syncn.cycle_calendar.phases import NEUTRAL_WEEK_TINT, Phase
from syncn.cycle_calendar.profile import CycleConfig
from syncn.cycle_calendar.providers import (
    DailyCycleData,
    PhaseLookupProvider,
    WideningWindowProvider,
)
from syncn.cycle_calendar.widening_window import WideningWindowClassifier

logger = logging.getLogger("syncn.cycle_calendar.annotator")


@dataclass(frozen=True)
class DayAnnotation:
    """Everything the renderer needs to color one day."""

    date: date
    phase: Phase | None
    is_widening_window: bool


@dataclass(frozen=True)
class MonthAnnotation:
    """A month grid together with its per-day annotations.

    Attributes:
        year:        Calendar year.
        month:       Month number 1-12.
        cells:       Grid cells in row-major order.
        annotations: Day → annotation.  Padding days are present only when
                     the month was annotated with ``include_padding=True``.
                     Read-only; a mutable mapping passed in is copied.
    """

    year: int
    month: int
    cells: tuple[CalendarCell, ...]
    annotations: Mapping[date, DayAnnotation] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "annotations", MappingProxyType(dict(self.annotations)))

    @property
    def weeks(self) -> int:
        return len(self.cells) // DAYS_PER_WEEK

    def week(self, index: int) -> tuple[CalendarCell, ...]:
        start = index * DAYS_PER_WEEK
        return self.cells[start:start + DAYS_PER_WEEK]

    def annotation_for(self, day: date | datetime) -> DayAnnotation | None:
        return self.annotations.get(as_day(day))

    def days(self) -> list[DayAnnotation]:
        """Annotations in grid order."""
        return [self.annotations[c.date] for c in self.cells if c.date in self.annotations]

    def week_tints(self) -> list[str]:
        """Row tint for each week, taken from its first annotated day."""
        tints = []
        for index in range(self.weeks):
            phases = [
                self.annotations[c.date].phase
                for c in self.week(index)
                if c.date in self.annotations
            ]
            tints.append(week_tint(phases[:1]))
        return tints


def week_tint(phases: Iterable[Phase | None]) -> str:
    """Return the tint of the first non-null phase, or the neutral grey."""
    for phase in phases:
        if phase is not None:
            return phase.week_tint
    return NEUTRAL_WEEK_TINT


def annotate_month(
    year: int,
    month: int,
    config: CycleConfig,
    phase_lookup: PhaseLookup | PhaseLookupProvider | None = None,
    candidate_days: Iterable[date | datetime] = (),
    data_loaded: bool = False,
    *,
    include_padding: bool = False,
    first_weekday: int = DEFAULT_FIRST_WEEKDAY,
    min_week_rows: int = DEFAULT_MIN_WEEK_ROWS,
    fallback: Phase = DEFAULT_FALLBACK_PHASE,
) -> MonthAnnotation:
    """Build the month grid and annotate its days.

    Args:
        year:            Calendar year.
        month:           Month number 1-12.
        config:          The user's cycle configuration.
        phase_lookup:    Per-date predicted phases.
        candidate_days:  Widening-window days from the prediction service.
        data_loaded:     Whether the candidate set has been fetched.
        include_padding: Also annotate the leading/trailing padding days.
        first_weekday:   Python weekday that starts each row (6 = Sunday).
        min_week_rows:   Minimum number of week rows.
        fallback:        Phase used when nothing else applies.

    Returns:
        MonthAnnotation for the requested month.

    Raises:
        InvalidMonthError: If year or month is out of range.
    """
    cells = build_month_grid(
        year, month, first_weekday=first_weekday, min_week_rows=min_week_rows
    )
    resolver = PhaseResolver(phase_lookup, fallback=fallback)
    classifier = WideningWindowClassifier(candidate_days, data_loaded=data_loaded)

    annotations: dict[date, DayAnnotation] = {}
    for cell in cells:
        if not cell.is_in_current_month and not include_padding:
            continue
        annotations[cell.date] = DayAnnotation(
            date=cell.date,
            phase=resolver.resolve(cell.date, config),
            is_widening_window=classifier.classify(cell.date, config),
        )

    flagged = sum(1 for a in annotations.values() if a.is_widening_window)
    logger.debug(
        "Annotated %d-%02d: %d days, %d widening-window days "
        "(data_loaded=%s, cycle_kind=%s, widening_window_enabled=%s)",
        year, month, len(annotations), flagged, data_loaded,
        config.cycle_kind.value, config.widening_window_enabled,
    )
    return MonthAnnotation(year=year, month=month, cells=tuple(cells), annotations=annotations)


class MonthAnnotator:
    """Annotate months from injected providers and the calendar config.

    Usage::

        data = DailyCycleData.from_records(payload)
        annotator = MonthAnnotator(data, data)
        months = annotator.annotate_upcoming(profile, today=date(2024, 12, 5))
    """

    def __init__(
        self,
        phase_provider: PhaseLookupProvider | None = None,
        window_provider: WideningWindowProvider | None = None,
        calendar_config: CalendarConfig | None = None,
    ) -> None:
        self._phases = phase_provider
        self._window = window_provider or DailyCycleData.empty()
        self._config = calendar_config or get_calendar_config()

    def annotate(
        self, year: int, month: int, profile: CycleConfig, *, include_padding: bool = False
    ) -> MonthAnnotation:
        loaded = self._window.is_loaded
        candidates = self._window.widening_window_days() if loaded else frozenset()
        return annotate_month(
            year,
            month,
            profile,
            self._phases,
            candidates,
            loaded,
            include_padding=include_padding,
            first_weekday=self._config.grid.first_weekday,
            min_week_rows=self._config.grid.min_week_rows,
            fallback=self._config.phases.fallback_phase,
        )

    def annotate_upcoming(
        self, profile: CycleConfig, today: date | None = None
    ) -> list[MonthAnnotation]:
        """Annotate the current month and the configured number of following months."""
        today = today or date.today()
        return [
            self.annotate(year, month, profile)
            for year, month in upcoming_months(today, self._config.grid.months_to_show)
        ]
