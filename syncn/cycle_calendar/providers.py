"""Collaborator interfaces for per-date phase data and widening-window days.

The calendar core never fetches anything.  The prediction service's daily
payload is fetched and cached elsewhere; this module turns that payload into
plain lookups the resolver and classifier can consume.

Payload shape (one record per day)::

    {"date": "2024-09-10", "phase": "follicular", "isWideningWindow": false}
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Protocol, runtime_checkable

from syncn.cycle_calendar.dates import as_day, parse_day
from syncn.cycle_calendar.phases import Phase

logger = logging.getLogger("syncn.cycle_calendar.providers")


class PredictionPayloadError(ValueError):
    """Raised when a daily prediction payload cannot be parsed."""


@runtime_checkable
class PhaseLookupProvider(Protocol):
    def phase_for(self, day: date) -> Phase | None:
        """Return the predicted phase for ``day`` or None when unknown."""
        ...


@runtime_checkable
class WideningWindowProvider(Protocol):
    @property
    def is_loaded(self) -> bool:
        """True once the candidate set has been fetched at least once."""
        ...

    def widening_window_days(self) -> frozenset[date]:
        """Return the days flagged as possible period-start days."""
        ...


@dataclass(frozen=True)
class DailyCycleData:
    """In-memory snapshot of one prediction fetch.

    Implements both ``PhaseLookupProvider`` and ``WideningWindowProvider``.

    Attributes:
        phases:      Day → predicted phase.
        window_days: Days flagged as widening-window days.
        loaded:      False only for the "not fetched yet" placeholder.
    """

    phases: Mapping[date, Phase] = field(default_factory=dict)
    window_days: frozenset[date] = frozenset()
    loaded: bool = True

    @classmethod
    def empty(cls) -> DailyCycleData:
        """Placeholder used before the first fetch completes."""
        return cls(loaded=False)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> DailyCycleData:
        """Build a snapshot from the prediction service's daily records.

        Args:
            records: Dicts with ``date``, optional ``phase`` and optional
                     ``isWideningWindow`` (``is_widening_window`` also accepted).

        Returns:
            A loaded DailyCycleData.

        Raises:
            PredictionPayloadError: If a record has a missing or invalid date.
        """
        phases: dict[date, Phase] = {}
        window: set[date] = set()
        unknown: set[str] = set()

        for i, record in enumerate(records):
            raw_date = record.get("date")
            if raw_date is None:
                raise PredictionPayloadError(f"record {i} has no 'date'")
            try:
                day = parse_day(raw_date)
            except (TypeError, ValueError) as exc:
                raise PredictionPayloadError(
                    f"record {i} has invalid date {raw_date!r}"
                ) from exc

            raw_phase = record.get("phase")
            phase = raw_phase if isinstance(raw_phase, Phase) else Phase.from_backend_name(raw_phase)
            if phase is not None:
                phases[day] = phase
            elif raw_phase:
                unknown.add(str(raw_phase))

            flagged = record.get("isWideningWindow", record.get("is_widening_window", False))
            if flagged:
                window.add(day)

        if unknown:
            logger.debug("Ignored unknown phase names in payload: %s", sorted(unknown))
        logger.debug(
            "Parsed prediction payload: %d phased days, %d widening-window days",
            len(phases), len(window),
        )
        return cls(phases=phases, window_days=frozenset(window), loaded=True)

    @property
    def is_loaded(self) -> bool:
        return self.loaded

    def phase_for(self, day: date | datetime) -> Phase | None:
        return self.phases.get(as_day(day))

    def widening_window_days(self) -> frozenset[date]:
        return self.window_days
