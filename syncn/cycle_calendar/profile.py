"""User cycle configuration consumed by the calendar core."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from syncn.cycle_calendar.dates import as_day
from syncn.cycle_calendar.phases import Phase


class CycleKind(str, Enum):
    regular = "regular"
    irregular = "irregular"
    no_period = "no_period"


@dataclass(frozen=True)
class CycleConfig:
    """Read-only snapshot of the cycle fields of a user profile.

    Attributes:
        last_period_start:       First day of the most recent bleed, if known.
        cycle_length_days:       Average cycle length, if known.
        period_length_days:      Average number of bleeding days, if known.
        cycle_kind:              Regular, irregular or no-period.
        has_recurring_symptoms:  Only meaningful for no-period users; True for
                                 symptom-tracked cycles, False for moon cycles.
        uses_moon_cycle:         Timing comes from lunar phase.
        widening_window_enabled: Per-user display preference.
        current_phase:           Profile-level "current phase", used when no
                                 per-date phase is available.
    """

    last_period_start: date | None = None
    cycle_length_days: int | None = None
    period_length_days: int | None = None
    cycle_kind: CycleKind = CycleKind.regular
    has_recurring_symptoms: bool | None = None
    uses_moon_cycle: bool = False
    widening_window_enabled: bool = False
    current_phase: Phase | None = None

    def __post_init__(self) -> None:
        if isinstance(self.last_period_start, datetime):
            object.__setattr__(self, "last_period_start", as_day(self.last_period_start))
        if not isinstance(self.cycle_kind, CycleKind):
            object.__setattr__(self, "cycle_kind", CycleKind(self.cycle_kind))

    @property
    def is_irregular(self) -> bool:
        return self.cycle_kind is CycleKind.irregular

    @property
    def is_symptomatic(self) -> bool:
        return self.cycle_kind is CycleKind.no_period and self.has_recurring_symptoms is True

    @property
    def is_moon_cycle(self) -> bool:
        return (
            self.cycle_kind is CycleKind.no_period
            and self.has_recurring_symptoms is not True
            and self.uses_moon_cycle
        )
