"""Flag potential-bleed ("widening window") days for irregular cycles.

The candidate days themselves come from the prediction service.  This module
only applies the eligibility gate and the day-granularity membership test:

* nothing is flagged until the candidate set has been loaded once;
* only irregular cycles are eligible.  Regular cycles and all no-period
  cycles (symptom-tracked or moon-based) never show widening windows,
  whatever the candidate set or the per-user display flag says.

An early ``False`` (data not loaded) is not authoritative; callers should
re-evaluate once the fetch completes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime

from syncn.cycle_calendar.dates import as_day
from syncn.cycle_calendar.profile import CycleConfig, CycleKind
from syncn.cycle_calendar.providers import WideningWindowProvider

logger = logging.getLogger("syncn.cycle_calendar.widening_window")


def is_eligible(config: CycleConfig) -> bool:
    """True when widening windows may be shown for this cycle configuration."""
    return config.cycle_kind is CycleKind.irregular


def normalize_days(days: Iterable[date | datetime]) -> frozenset[date]:
    return frozenset(as_day(d) for d in days)


def is_widening_window(
    day: date | datetime,
    config: CycleConfig,
    candidate_days: Iterable[date | datetime],
    data_loaded: bool,
) -> bool:
    """Return True if ``day`` should be flagged as a potential-bleed day.

    Args:
        day:            Day to classify (datetimes are reduced to their day).
        config:         The user's cycle configuration.
        candidate_days: Widening-window days from the prediction service.
        data_loaded:    Whether the candidate set has been fetched at least once.

    Returns:
        True only for loaded data, an irregular cycle and a candidate day.
    """
    if not data_loaded:
        return False
    if not is_eligible(config):
        return False
    target = as_day(day)
    return any(as_day(candidate) == target for candidate in candidate_days)


class WideningWindowClassifier:
    """Classifier bound to one snapshot of candidate days.

    The candidate set is normalized once, so classifying a whole month costs
    one set lookup per day.
    """

    def __init__(
        self, candidate_days: Iterable[date | datetime] = (), data_loaded: bool = False
    ) -> None:
        self._days = normalize_days(candidate_days)
        self._loaded = data_loaded

    @classmethod
    def from_provider(cls, provider: WideningWindowProvider) -> WideningWindowClassifier:
        if not provider.is_loaded:
            return cls((), data_loaded=False)
        return cls(provider.widening_window_days(), data_loaded=True)

    @property
    def data_loaded(self) -> bool:
        return self._loaded

    @property
    def candidate_days(self) -> frozenset[date]:
        return self._days

    def classify(self, day: date | datetime, config: CycleConfig) -> bool:
        if not self._loaded or not is_eligible(config):
            return False
        return as_day(day) in self._days
