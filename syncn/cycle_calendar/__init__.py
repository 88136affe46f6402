"""Cycle-phase calendar core.

Pure, synchronous date logic that turns a user's cycle configuration plus
externally fetched predictions into per-day calendar annotations.  No I/O,
no shared mutable state; safe to call from any thread.

Modules:
    grid            — Month grid construction (week rows, padding days)
    phases          — Phase enum and display catalogue
    profile         — CycleConfig / CycleKind inputs
    phase_resolver  — Phase shown for a day (lookup → profile → fallback)
    widening_window — Potential-bleed day flag for irregular cycles
    providers       — Collaborator interfaces + daily payload snapshot
    annotator       — Month-level composition of the above
    config_loader   — Load/validate/hot-reload calendar_config.yaml
"""

from syncn.cycle_calendar.annotator import (
    DayAnnotation,
    MonthAnnotation,
    MonthAnnotator,
    annotate_month,
    week_tint,
)
from syncn.cycle_calendar.config_loader import CalendarConfig, get_calendar_config
from syncn.cycle_calendar.grid import (
    CalendarCell,
    InvalidMonthError,
    build_month_grid,
    upcoming_months,
)
from syncn.cycle_calendar.phase_resolver import PhaseResolver, resolve_phase
from syncn.cycle_calendar.phases import Phase
from syncn.cycle_calendar.profile import CycleConfig, CycleKind
from syncn.cycle_calendar.providers import (
    DailyCycleData,
    PhaseLookupProvider,
    PredictionPayloadError,
    WideningWindowProvider,
)
from syncn.cycle_calendar.widening_window import (
    WideningWindowClassifier,
    is_widening_window,
)

__all__ = [
    "CalendarCell",
    "InvalidMonthError",
    "build_month_grid",
    "upcoming_months",
    "Phase",
    "CycleConfig",
    "CycleKind",
    "PhaseResolver",
    "resolve_phase",
    "WideningWindowClassifier",
    "is_widening_window",
    "PhaseLookupProvider",
    "WideningWindowProvider",
    "DailyCycleData",
    "PredictionPayloadError",
    "DayAnnotation",
    "MonthAnnotation",
    "MonthAnnotator",
    "annotate_month",
    "week_tint",
    "CalendarConfig",
    "get_calendar_config",
]
