"""Shared fixtures for the calendar core tests."""

from __future__ import annotations

from datetime import date

import pytest

from syncn.cycle_calendar.config_loader import CalendarConfig, load_calendar_config
from syncn.cycle_calendar.phases import Phase
from syncn.cycle_calendar.profile import CycleConfig, CycleKind
from syncn.cycle_calendar.providers import DailyCycleData

# Canonical dates used across the suite
LAST_PERIOD_START = date(2024, 9, 1)
WINDOW_DAYS = frozenset({date(2024, 9, 10), date(2024, 9, 11)})


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def calendar_config() -> CalendarConfig:
    """Load the bundled calendar config for tests."""
    return load_calendar_config()


# ---------------------------------------------------------------------------
# Profile fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def regular_profile() -> CycleConfig:
    return CycleConfig(
        last_period_start=LAST_PERIOD_START,
        cycle_length_days=28,
        period_length_days=5,
        cycle_kind=CycleKind.regular,
    )


@pytest.fixture
def irregular_profile() -> CycleConfig:
    return CycleConfig(
        last_period_start=LAST_PERIOD_START,
        cycle_length_days=35,
        period_length_days=6,
        cycle_kind=CycleKind.irregular,
        widening_window_enabled=True,
    )


@pytest.fixture
def symptomatic_profile() -> CycleConfig:
    return CycleConfig(cycle_kind=CycleKind.no_period, has_recurring_symptoms=True)


@pytest.fixture
def moon_profile() -> CycleConfig:
    return CycleConfig(
        cycle_kind=CycleKind.no_period,
        has_recurring_symptoms=False,
        uses_moon_cycle=True,
    )


# ---------------------------------------------------------------------------
# Prediction payload fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def september_records() -> list[dict]:
    """A realistic slice of the prediction service's daily payload."""
    return [
        {"date": "2024-09-01T00:00:00Z", "phase": "menstrual", "isWideningWindow": False},
        {"date": "2024-09-02T00:00:00Z", "phase": "menstrual", "isWideningWindow": False},
        {"date": "2024-09-08T00:00:00Z", "phase": "follicular", "isWideningWindow": False},
        {"date": "2024-09-10T00:00:00Z", "phase": "ovulation", "isWideningWindow": True},
        {"date": "2024-09-11T00:00:00Z", "phase": "ovulation", "isWideningWindow": True},
        {"date": "2024-09-20T00:00:00Z", "phase": "luteal", "isWideningWindow": False},
    ]


@pytest.fixture
def september_data(september_records: list[dict]) -> DailyCycleData:
    return DailyCycleData.from_records(september_records)


@pytest.fixture
def moon_data() -> DailyCycleData:
    return DailyCycleData(
        phases={
            date(2024, 10, 2): Phase.menstrual_moon,
            date(2024, 10, 9): Phase.follicular_moon,
            date(2024, 10, 17): Phase.ovulatory_moon,
            date(2024, 10, 25): Phase.luteal_moon,
        }
    )
