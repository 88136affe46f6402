"""Calendar endpoints: month annotations and the phase catalogue.

Stateless: every response is a pure function of the request body.  The
caller supplies the user's cycle profile and the prediction service's daily
payload it already fetched.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from syncn.cycle_calendar.annotator import annotate_month
from syncn.cycle_calendar.config_loader import get_calendar_config
from syncn.cycle_calendar.grid import InvalidMonthError
from syncn.cycle_calendar.phases import PHASE_CATALOGUE
from syncn.cycle_calendar.providers import DailyCycleData, PredictionPayloadError
from syncn.models.base import ErrorDetail
from syncn.models.calendar import (
    CalendarMonthRequest,
    CalendarMonthResponse,
    DayOut,
    PhaseInfoOut,
)

router = APIRouter(prefix="/calendar", tags=["calendar"])
logger = logging.getLogger("syncn.calendar")


@router.get("/phases", response_model=list[PhaseInfoOut])
async def list_phases() -> Any:
    return [
        PhaseInfoOut(
            phase=phase,
            display_name=info.display_name,
            description=info.description,
            fitness_focus=info.fitness_focus,
            color=info.color,
            week_tint=info.week_tint,
            icon=info.icon,
            system_icon=info.system_icon,
            is_moon_based=phase.is_moon_based,
            base_phase=phase.base_phase,
        )
        for phase, info in PHASE_CATALOGUE.items()
    ]


@router.post(
    "/{year}/{month}",
    response_model=CalendarMonthResponse,
    responses={400: {"model": ErrorDetail}},
)
async def annotate_calendar_month(year: int, month: int, body: CalendarMonthRequest) -> Any:
    if body.daily_data is None:
        data = DailyCycleData.empty()
    else:
        try:
            data = DailyCycleData.from_records(r.model_dump() for r in body.daily_data)
        except PredictionPayloadError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    loaded = body.data_loaded if body.data_loaded is not None else data.is_loaded
    config = get_calendar_config()
    try:
        result = annotate_month(
            year,
            month,
            body.profile.to_cycle_config(),
            data,
            data.widening_window_days(),
            loaded,
            include_padding=body.include_padding,
            first_weekday=config.grid.first_weekday,
            min_week_rows=config.grid.min_week_rows,
            fallback=config.phases.fallback_phase,
        )
    except InvalidMonthError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    days = []
    for cell in result.cells:
        annotation = result.annotations.get(cell.date)
        if annotation is None:
            continue
        phase = annotation.phase
        days.append(
            DayOut(
                date=cell.date,
                phase=phase,
                phase_name=phase.display_name if phase else None,
                color=phase.color if phase else None,
                is_widening_window=annotation.is_widening_window,
                is_in_current_month=cell.is_in_current_month,
                week_index=cell.week_index,
                weekday_index=cell.weekday_index,
            )
        )

    logger.info(
        "Annotated %d-%02d for %s cycle (%d days, data_loaded=%s)",
        year, month, body.profile.cycle_kind.value, len(days), loaded,
    )
    return CalendarMonthResponse(
        year=year,
        month=month,
        weeks=result.weeks,
        week_tints=result.week_tints(),
        days=days,
    )
