"""Load, validate, and hot-reload the calendar configuration.

The config lives in ``calendar_config.yaml`` alongside this module.  At
startup it is loaded once and cached.  Call ``reload_calendar_config()`` to
re-read from disk.

Usage::

    from syncn.cycle_calendar.config_loader import get_calendar_config

    config = get_calendar_config()
    config.grid.min_week_rows        # 5
    config.phases.fallback_phase     # Phase.follicular
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from syncn.cycle_calendar.grid import MONDAY, SUNDAY
from syncn.cycle_calendar.phases import Phase

logger = logging.getLogger("syncn.cycle_calendar.config")

_CONFIG_PATH = Path(__file__).parent / "calendar_config.yaml"

_WEEKDAYS = {"sunday": SUNDAY, "monday": MONDAY}


# ---------------------------------------------------------------------------
# Typed config sections
# ---------------------------------------------------------------------------


@dataclass
class GridConfig:
    """Month grid layout settings."""

    first_weekday: int = SUNDAY  # Python weekday number
    min_week_rows: int = 5
    months_to_show: int = 3


@dataclass
class PhaseConfig:
    """Phase resolution settings."""

    fallback_phase: Phase = Phase.follicular


@dataclass
class CalendarConfig:
    """Complete, validated calendar configuration.

    Attributes:
        version: Config schema version string.
        grid:    Month grid layout settings.
        phases:  Phase resolution settings.
    """

    version: str
    grid: GridConfig
    phases: PhaseConfig
    _raw: dict = field(default_factory=dict, repr=False)


# ---------------------------------------------------------------------------
# Loader / validation
# ---------------------------------------------------------------------------


class ConfigValidationError(ValueError):
    """Raised when calendar_config.yaml fails validation."""


def _load_yaml(path: Path) -> dict:
    """Read and parse a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the YAML is malformed or not a mapping.
    """
    if not path.exists():
        raise FileNotFoundError(f"Calendar config not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise ConfigValidationError(f"YAML parse error in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigValidationError(f"{path} must contain a mapping at the top level")
    return data


def _positive_int(value: object, key: str, errors: list[str]) -> int | None:
    if isinstance(value, bool):
        errors.append(f"{key} must be an integer, got {value!r}")
        return None
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        errors.append(f"{key} must be an integer, got {value!r}")
        return None
    if number < 1:
        errors.append(f"{key} must be >= 1, got {number}")
        return None
    return number


def _validate_and_build(raw: dict) -> CalendarConfig:
    """Validate the raw YAML dict and construct a CalendarConfig.

    Missing sections fall back to defaults; every problem found is reported
    in a single ConfigValidationError.

    Args:
        raw: Parsed YAML dict.

    Returns:
        Validated CalendarConfig instance.

    Raises:
        ConfigValidationError: If any field is invalid.
    """
    errors: list[str] = []

    version = str(raw.get("version", "1.0"))

    # ── Grid ──
    grid_raw = raw.get("grid") or {}
    if not isinstance(grid_raw, dict):
        errors.append("'grid' must be a mapping")
        grid_raw = {}
    grid = GridConfig()

    weekday_raw = str(grid_raw.get("first_weekday", "sunday")).strip().lower()
    if weekday_raw in _WEEKDAYS:
        grid.first_weekday = _WEEKDAYS[weekday_raw]
    else:
        errors.append(
            f"grid.first_weekday must be one of {sorted(_WEEKDAYS)}, got {weekday_raw!r}"
        )

    for key in ("min_week_rows", "months_to_show"):
        if key in grid_raw:
            value = _positive_int(grid_raw[key], f"grid.{key}", errors)
            if value is not None:
                setattr(grid, key, value)

    if grid.min_week_rows > 6:
        logger.warning(
            "grid.min_week_rows = %d exceeds the 6 rows any month needs; "
            "grids will carry empty trailing weeks",
            grid.min_week_rows,
        )

    # ── Phases ──
    phases_raw = raw.get("phases") or {}
    if not isinstance(phases_raw, dict):
        errors.append("'phases' must be a mapping")
        phases_raw = {}
    phases = PhaseConfig()
    fallback_raw = phases_raw.get("fallback_phase")
    if fallback_raw is not None:
        fallback = Phase.from_backend_name(str(fallback_raw))
        if fallback is None:
            errors.append(f"phases.fallback_phase is not a known phase: {fallback_raw!r}")
        else:
            phases.fallback_phase = fallback

    if errors:
        raise ConfigValidationError(
            f"calendar_config.yaml has {len(errors)} validation error(s):\n"
            + "\n".join(f"  • {e}" for e in errors)
        )

    return CalendarConfig(version=version, grid=grid, phases=phases, _raw=raw)


def load_calendar_config(path: Path | None = None) -> CalendarConfig:
    """Load and validate the calendar config from disk.

    Args:
        path: Override path to YAML. Uses the bundled calendar_config.yaml by default.

    Returns:
        Validated CalendarConfig instance.
    """
    target = path or _CONFIG_PATH
    raw = _load_yaml(target)
    config = _validate_and_build(raw)
    logger.info("Loaded calendar config v%s from %s", config.version, target)
    return config


# ---------------------------------------------------------------------------
# Global singleton with hot-reload support
# ---------------------------------------------------------------------------

_config: CalendarConfig | None = None
_config_lock = threading.Lock()


def get_calendar_config() -> CalendarConfig:
    """Return the global CalendarConfig singleton, loading it on first call.

    Thread-safe.  Use ``reload_calendar_config()`` to refresh after YAML changes.
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:  # double-checked locking
                _config = load_calendar_config()
    return _config


def reload_calendar_config(path: Path | None = None) -> CalendarConfig:
    """Reload the calendar config from disk and replace the global singleton.

    If validation fails, the old config is retained and the error is re-raised.

    Raises:
        ConfigValidationError: If the new config is invalid.
        FileNotFoundError:     If the config file is missing.
    """
    global _config
    new_config = load_calendar_config(path)  # validate before acquiring lock
    with _config_lock:
        old_version = _config.version if _config else "none"
        _config = new_config
    logger.info("Reloaded calendar config: %s → %s", old_version, new_config.version)
    return new_config
