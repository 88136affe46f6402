"""Cycle phases and their display catalogue.

Eight mutually exclusive phases: the four bleeding-based phases and their
moon-based counterparts for users tracked by lunar cycle.  The colors, tints
and icon identifiers are consumed by the rendering layer only; nothing in the
calendar core branches on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    menstrual = "menstrual"
    follicular = "follicular"
    ovulatory = "ovulatory"
    luteal = "luteal"
    menstrual_moon = "menstrual_moon"
    follicular_moon = "follicular_moon"
    ovulatory_moon = "ovulatory_moon"
    luteal_moon = "luteal_moon"

    @property
    def info(self) -> PhaseInfo:
        return PHASE_CATALOGUE[self]

    @property
    def display_name(self) -> str:
        return self.info.display_name

    @property
    def color(self) -> str:
        return self.info.color

    @property
    def week_tint(self) -> str:
        return self.info.week_tint

    @property
    def icon(self) -> str:
        return self.info.icon

    @property
    def is_moon_based(self) -> bool:
        return self in _MOON_TO_BASE

    @property
    def base_phase(self) -> Phase:
        """Bleeding-based counterpart (identity for bleeding-based phases)."""
        return _MOON_TO_BASE.get(self, self)

    @classmethod
    def from_backend_name(cls, name: str | None) -> Phase | None:
        """Map a prediction-service phase name onto a ``Phase``.

        Matching is case-insensitive and also accepts the enum values and
        display names ("Luteal Moon").  Unknown names return ``None``.

        Args:
            name: Phase string as returned by the prediction service.

        Returns:
            The matching Phase or None.
        """
        if not name:
            return None
        key = name.strip().lower().replace(" ", "_").replace("-", "_")
        return _BACKEND_NAMES.get(key)


@dataclass(frozen=True)
class PhaseInfo:
    """Static presentation metadata for one phase.

    Attributes:
        display_name:  Human-readable label.
        description:   One-line coaching summary.
        fitness_focus: Suggested workout styles.
        color:         Day-cell color as ``#RRGGBB``.
        week_tint:     Light tint used for a week row starting in this phase.
        icon:          Asset identifier of the custom phase icon.
        system_icon:   Fallback symbol name.
    """

    display_name: str
    description: str
    fitness_focus: str
    color: str
    week_tint: str
    icon: str
    system_icon: str


# Tint for weeks whose first day has no phase
NEUTRAL_WEEK_TINT = "#CCCCCC"

_RED = "#FF3B30"
_GREEN = "#34C759"
_ORANGE = "#FF9500"
_PURPLE = "#AF52DE"

_RECOVERY = "Focus on gentle movement and recovery"
_BUILD = "Perfect time for building strength and endurance"
_PEAK = "Peak energy for high-intensity workouts"
_MODERATE = "Moderate exercise with stress management"

PHASE_CATALOGUE: dict[Phase, PhaseInfo] = {
    Phase.menstrual: PhaseInfo(
        "Menstrual", _RECOVERY, "Gentle yoga, walking, stretching",
        _RED, "#E6B3E6", "Menstrual Icon", "drop.fill",
    ),
    Phase.follicular: PhaseInfo(
        "Follicular", _BUILD, "Strength training, cardio, HIIT",
        _GREEN, "#B3E6B3", "Follicular Icon", "leaf.fill",
    ),
    Phase.ovulatory: PhaseInfo(
        "Ovulatory", _PEAK, "High-intensity workouts, sports, dance",
        _ORANGE, "#CCB3E6", "Ovulation Icon", "sun.max.fill",
    ),
    Phase.luteal: PhaseInfo(
        "Luteal", _MODERATE, "Moderate cardio, pilates, mindfulness",
        _PURPLE, "#CC99E6", "Luteal Icon", "moon.fill",
    ),
    Phase.menstrual_moon: PhaseInfo(
        "Menstrual Moon", _RECOVERY, "Gentle yoga, walking, stretching",
        _RED, "#E6B3E6", "Menstrual Moon Icon", "drop.circle",
    ),
    Phase.follicular_moon: PhaseInfo(
        "Follicular Moon", _BUILD, "Strength training, cardio, HIIT",
        _GREEN, "#B3E6B3", "Follicular Moon Icon", "leaf.circle",
    ),
    Phase.ovulatory_moon: PhaseInfo(
        "Ovulatory Moon", _PEAK, "High-intensity workouts, sports, dance",
        _ORANGE, "#CCB3E6", "Ovulatory Moon Icon", "sun.max.circle",
    ),
    Phase.luteal_moon: PhaseInfo(
        "Luteal Moon", _MODERATE, "Moderate cardio, pilates, mindfulness",
        _PURPLE, "#CC99E6", "Luteal Moon Icon", "moon.circle",
    ),
}

_MOON_TO_BASE: dict[Phase, Phase] = {
    Phase.menstrual_moon: Phase.menstrual,
    Phase.follicular_moon: Phase.follicular,
    Phase.ovulatory_moon: Phase.ovulatory,
    Phase.luteal_moon: Phase.luteal,
}

_BACKEND_NAMES: dict[str, Phase] = {
    "menstrual": Phase.menstrual,
    # No-period users with recurring symptoms report a "symptomatic" phase
    "symptomatic": Phase.menstrual,
    "follicular": Phase.follicular,
    "ovulation": Phase.ovulatory,
    "ovulatory": Phase.ovulatory,
    "luteal": Phase.luteal,
    "new_moon": Phase.menstrual_moon,
    "waxing_moon": Phase.follicular_moon,
    "full_moon": Phase.ovulatory_moon,
    "waning_moon": Phase.luteal_moon,
}
for _phase in Phase:
    _BACKEND_NAMES.setdefault(_phase.value, _phase)
    _BACKEND_NAMES.setdefault(_phase.display_name.lower().replace(" ", "_"), _phase)
del _phase
