"""Pydantic models for the calendar endpoints."""

from __future__ import annotations

import datetime as dt

from pydantic import Field

from syncn.cycle_calendar.phases import Phase
from syncn.cycle_calendar.profile import CycleConfig, CycleKind
from syncn.models.base import SyncnBase


# ---------- Request ----------

class CycleProfileIn(SyncnBase):
    last_period_start: dt.date | None = None
    cycle_length_days: int | None = Field(default=None, ge=1, le=120)
    period_length_days: int | None = Field(default=None, ge=1, le=30)
    cycle_kind: CycleKind = CycleKind.regular
    has_recurring_symptoms: bool | None = None
    uses_moon_cycle: bool = False
    widening_window_enabled: bool = False
    current_phase: Phase | None = None

    def to_cycle_config(self) -> CycleConfig:
        return CycleConfig(**self.model_dump())


class DailyRecordIn(SyncnBase):
    """One day of the prediction service's payload."""

    date: str  # ISO-8601 date or datetime; parsed by DailyCycleData
    phase: str | None = None
    is_widening_window: bool = Field(default=False, alias="isWideningWindow")


class CalendarMonthRequest(SyncnBase):
    profile: CycleProfileIn
    daily_data: list[DailyRecordIn] | None = None
    # Defaults to "daily_data was supplied"
    data_loaded: bool | None = None
    include_padding: bool = False


# ---------- Response ----------

class DayOut(SyncnBase):
    date: dt.date
    phase: Phase | None = None
    phase_name: str | None = None
    color: str | None = None
    is_widening_window: bool = False
    is_in_current_month: bool
    week_index: int
    weekday_index: int


class CalendarMonthResponse(SyncnBase):
    year: int
    month: int
    weeks: int
    week_tints: list[str]
    days: list[DayOut]


class PhaseInfoOut(SyncnBase):
    phase: Phase
    display_name: str
    description: str
    fitness_focus: str
    color: str
    week_tint: str
    icon: str
    system_icon: str
    is_moon_based: bool
    base_phase: Phase
