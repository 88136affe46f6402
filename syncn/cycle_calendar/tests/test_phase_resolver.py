"""Tests for day → phase resolution."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from syncn.cycle_calendar.phase_resolver import PhaseResolver, resolve_phase
from syncn.cycle_calendar.phases import Phase
from syncn.cycle_calendar.profile import CycleConfig
from syncn.cycle_calendar.providers import DailyCycleData
from syncn.cycle_calendar.tests.conftest import LAST_PERIOD_START


def always(phase: Phase):
    return lambda _day: phase


class TestResolvePhase:
    def test_before_last_period_is_none(self, regular_profile: CycleConfig) -> None:
        assert resolve_phase(date(2024, 8, 31), regular_profile) is None

    def test_before_last_period_ignores_lookup(self, regular_profile: CycleConfig) -> None:
        for offset in range(1, 40):
            day = LAST_PERIOD_START - timedelta(days=offset)
            assert resolve_phase(day, regular_profile, always(Phase.luteal)) is None

    def test_start_day_itself_is_tracked(self, regular_profile: CycleConfig) -> None:
        assert resolve_phase(LAST_PERIOD_START, regular_profile) is Phase.follicular

    def test_fallback_after_start(self, regular_profile: CycleConfig) -> None:
        assert resolve_phase(date(2024, 9, 2), regular_profile) is Phase.follicular

    def test_lookup_wins(self, regular_profile: CycleConfig) -> None:
        for phase in Phase:
            assert resolve_phase(date(2024, 9, 15), regular_profile, always(phase)) is phase

    def test_lookup_not_cross_validated(self, regular_profile: CycleConfig) -> None:
        # A menstrual prediction deep into the cycle is accepted as-is
        day = date(2024, 9, 20)
        assert resolve_phase(day, regular_profile, always(Phase.menstrual)) is Phase.menstrual

    def test_no_last_period_never_returns_none(self, symptomatic_profile: CycleConfig) -> None:
        assert resolve_phase(date(1999, 1, 1), symptomatic_profile) is Phase.follicular

    def test_current_phase_used_before_fallback(self) -> None:
        config = CycleConfig(current_phase=Phase.luteal)
        assert resolve_phase(date(2024, 9, 2), config) is Phase.luteal
        assert resolve_phase(date(2024, 9, 2), config, always(Phase.ovulatory)) is Phase.ovulatory

    def test_custom_fallback(self, regular_profile: CycleConfig) -> None:
        assert (
            resolve_phase(date(2024, 9, 2), regular_profile, fallback=Phase.menstrual)
            is Phase.menstrual
        )

    def test_datetime_compared_at_day_granularity(self) -> None:
        config = CycleConfig(last_period_start=datetime(2024, 9, 1, 18, 30))
        assert resolve_phase(datetime(2024, 9, 1, 6, 0), config) is Phase.follicular
        assert resolve_phase(datetime(2024, 8, 31, 23, 59), config) is None

    def test_provider_accepted(
        self, regular_profile: CycleConfig, september_data: DailyCycleData
    ) -> None:
        assert resolve_phase(date(2024, 9, 10), regular_profile, september_data) is Phase.ovulatory
        # Day missing from the payload falls through to the fallback
        assert resolve_phase(date(2024, 9, 3), regular_profile, september_data) is Phase.follicular

    def test_moon_phase_returned_verbatim(
        self, moon_profile: CycleConfig, moon_data: DailyCycleData
    ) -> None:
        assert resolve_phase(date(2024, 10, 17), moon_profile, moon_data) is Phase.ovulatory_moon


class TestPhaseResolver:
    def test_bound_lookup(
        self, regular_profile: CycleConfig, september_data: DailyCycleData
    ) -> None:
        resolver = PhaseResolver(september_data)
        assert resolver.resolve(date(2024, 9, 20), regular_profile) is Phase.luteal
        assert resolver.resolve(date(2024, 8, 20), regular_profile) is None

    def test_deterministic(self, regular_profile: CycleConfig, september_data: DailyCycleData) -> None:
        resolver = PhaseResolver(september_data)
        days = [date(2024, 9, 1) + timedelta(days=i) for i in range(30)]
        first = [resolver.resolve(d, regular_profile) for d in days]
        second = [resolver.resolve(d, regular_profile) for d in days]
        assert first == second

    def test_default_fallback(self) -> None:
        assert PhaseResolver().fallback is Phase.follicular
