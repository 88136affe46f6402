"""Tests for calendar_config.yaml loading and validation."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from syncn.cycle_calendar.config_loader import (
    CalendarConfig,
    ConfigValidationError,
    _validate_and_build,
    get_calendar_config,
    load_calendar_config,
    reload_calendar_config,
)
from syncn.cycle_calendar.grid import MONDAY, SUNDAY
from syncn.cycle_calendar.phases import Phase


class TestConfigLoading:
    def test_load_default_config(self, calendar_config: CalendarConfig) -> None:
        assert calendar_config.version == "1.0"
        assert calendar_config.grid.first_weekday == SUNDAY
        assert calendar_config.grid.min_week_rows == 5
        assert calendar_config.grid.months_to_show == 3
        assert calendar_config.phases.fallback_phase is Phase.follicular

    def test_singleton_returns_same_instance(self) -> None:
        assert get_calendar_config() is get_calendar_config()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_calendar_config(tmp_path / "nope.yaml")

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("grid: [unclosed\n")
        with pytest.raises(ConfigValidationError):
            load_calendar_config(path)

    def test_reload_replaces_singleton(self, tmp_path: Path) -> None:
        path = tmp_path / "calendar_config.yaml"
        path.write_text(
            textwrap.dedent(
                """
                version: "2.0"
                grid:
                  first_weekday: monday
                """
            )
        )
        try:
            new = reload_calendar_config(path)
            assert new.version == "2.0"
            assert get_calendar_config() is new
            assert new.grid.first_weekday == MONDAY
        finally:
            reload_calendar_config()

    def test_failed_reload_keeps_old_config(self, tmp_path: Path) -> None:
        before = get_calendar_config()
        path = tmp_path / "broken.yaml"
        path.write_text("grid:\n  min_week_rows: zero\n")
        with pytest.raises(ConfigValidationError):
            reload_calendar_config(path)
        assert get_calendar_config() is before


class TestValidation:
    def test_empty_config_uses_defaults(self) -> None:
        config = _validate_and_build({})
        assert config.grid.first_weekday == SUNDAY
        assert config.grid.min_week_rows == 5
        assert config.phases.fallback_phase is Phase.follicular

    def test_unknown_weekday(self) -> None:
        with pytest.raises(ConfigValidationError, match="first_weekday"):
            _validate_and_build({"grid": {"first_weekday": "friday"}})

    def test_non_positive_rows(self) -> None:
        with pytest.raises(ConfigValidationError, match="min_week_rows"):
            _validate_and_build({"grid": {"min_week_rows": 0}})

    def test_unknown_fallback_phase(self) -> None:
        with pytest.raises(ConfigValidationError, match="fallback_phase"):
            _validate_and_build({"phases": {"fallback_phase": "winter"}})

    def test_errors_collected(self) -> None:
        with pytest.raises(ConfigValidationError) as excinfo:
            _validate_and_build(
                {
                    "grid": {"first_weekday": "friday", "months_to_show": -2},
                    "phases": {"fallback_phase": "winter"},
                }
            )
        assert "3 validation error(s)" in str(excinfo.value)

    def test_moon_fallback_accepted(self) -> None:
        config = _validate_and_build({"phases": {"fallback_phase": "Follicular Moon"}})
        assert config.phases.fallback_phase is Phase.follicular_moon
