"""Resolve the cycle phase shown for a calendar day.

Priority order, first match wins:

1. Days before the start of the last recorded period have no phase.
2. A phase from the external per-date lookup is returned verbatim.
3. The profile's ``current_phase`` if one is set.
4. The fallback phase (``follicular`` unless configured otherwise).

Moon-based phases are never derived here; they arrive through the lookup
like any other phase.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Optional

from syncn.cycle_calendar.dates import as_day
from syncn.cycle_calendar.phases import Phase
from syncn.cycle_calendar.profile import CycleConfig
from syncn.cycle_calendar.providers import PhaseLookupProvider

logger = logging.getLogger("syncn.cycle_calendar.phase_resolver")

DEFAULT_FALLBACK_PHASE = Phase.follicular

PhaseLookup = Callable[[date], Optional[Phase]]


def _no_lookup(_day: date) -> Phase | None:
    return None


def as_phase_lookup(source: PhaseLookup | PhaseLookupProvider | None) -> PhaseLookup:
    """Normalize a provider object, a plain callable or None into a callable."""
    if source is None:
        return _no_lookup
    if isinstance(source, PhaseLookupProvider):
        return source.phase_for
    return source


def resolve_phase(
    day: date | datetime,
    config: CycleConfig,
    external_phase_lookup: PhaseLookup | PhaseLookupProvider | None = None,
    *,
    fallback: Phase = DEFAULT_FALLBACK_PHASE,
) -> Phase | None:
    """Return the phase to display for ``day``.

    Args:
        day:                   Day to classify (datetimes are reduced to their day).
        config:                The user's cycle configuration.
        external_phase_lookup: Per-date predicted phases, as a provider or callable.
        fallback:              Phase returned when nothing else applies.

    Returns:
        The resolved Phase, or None for days before tracking began.
    """
    target = as_day(day)

    if config.last_period_start is not None and target < config.last_period_start:
        return None

    predicted = as_phase_lookup(external_phase_lookup)(target)
    if predicted is not None:
        return predicted

    if config.current_phase is not None:
        return config.current_phase

    return fallback


class PhaseResolver:
    """``resolve_phase`` bound to a lookup and a fallback phase.

    Usage::

        resolver = PhaseResolver(DailyCycleData.from_records(payload))
        phase = resolver.resolve(date(2024, 9, 2), profile)
    """

    def __init__(
        self,
        lookup: PhaseLookup | PhaseLookupProvider | None = None,
        fallback: Phase = DEFAULT_FALLBACK_PHASE,
    ) -> None:
        self._lookup = as_phase_lookup(lookup)
        self._fallback = fallback

    @property
    def fallback(self) -> Phase:
        return self._fallback

    def resolve(self, day: date | datetime, config: CycleConfig) -> Phase | None:
        phase = resolve_phase(day, config, self._lookup, fallback=self._fallback)
        logger.debug("Resolved %s → %s", as_day(day), phase.value if phase else None)
        return phase
