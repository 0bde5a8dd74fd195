"""
Schedule API: nap/wake timeline from URL query parameters.

Routes (/schedule):
  GET /           - Generate the day's schedule (invalid values fall back to defaults)
  GET /defaults   - Default parameters and their query string
"""

import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, HTTPException, Query, status

from .models import (
    ScheduleParametersModel,
    ParametersResponse,
    ScheduleEvent,
    ParameterWarning,
    ScheduleResponse,
)
from ..core.constants import MAX_REQUEST_NUM_NAPS
from ..core.utils import current_schedule_date
from ..services.display import describe_event
from ..services.schedule_generator import ScheduleParameters, generate_schedule, wake_window_lengths
from ..services.schedule_params import (
    default_parameters,
    parse_schedule_parameters,
    to_query_params,
    to_query_string,
)
from ..services.validation import ScheduleValidationError, ensure_valid_parameters, validate_schedule_parameters

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedule", tags=["schedule"])


# Used by: get_schedule, get_default_parameters
def _parameters_model(params: ScheduleParameters) -> ScheduleParametersModel:
    return ScheduleParametersModel.model_validate(to_query_params(params))


# Used by: Planner page (initial load, "Generate schedule" submit, shared links)
@router.get("", response_model=ScheduleResponse)
async def get_schedule(
    wakeup: Optional[str] = Query(None, description="Wake-up time, HH:MM"),
    num_naps: Optional[str] = Query(None, alias="numNaps", description="Naps remaining today"),
    avg_nap_length: Optional[str] = Query(None, alias="avgNapLength", description="Average nap length in minutes"),
    next_wake_window: Optional[str] = Query(None, alias="nextWakeWindow", description="First wake window in minutes"),
    last_wake_window: Optional[str] = Query(None, alias="lastWakeWindow", description="Wake window before bedtime in minutes"),
    on: Optional[date] = Query(None, alias="date", description="Schedule date, defaults to today"),
    strict: bool = Query(False, description="Reject out-of-range parameters with 422 instead of warning"),
):
    # Raw strings so bad values fall back to defaults instead of failing the request
    params = parse_schedule_parameters({
        "wakeup": wakeup,
        "numNaps": num_naps,
        "avgNapLength": avg_nap_length,
        "nextWakeWindow": next_wake_window,
        "lastWakeWindow": last_wake_window,
    })

    if params.num_naps > MAX_REQUEST_NUM_NAPS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"numNaps cannot exceed {MAX_REQUEST_NUM_NAPS}",
        )

    if strict:
        try:
            ensure_valid_parameters(params)
        except ScheduleValidationError as e:
            raise HTTPException(
                status_code=422,
                detail=[{"field": i.field, "message": i.message} for i in e.issues],
            )
        issues = []
    else:
        issues = validate_schedule_parameters(params)

    schedule_date = on or current_schedule_date()
    logger.info(f"Generating schedule for {schedule_date} ({to_query_string(params)})")

    try:
        events = generate_schedule(params, on=schedule_date)
    except OverflowError as e:
        # Durations large enough to leave the datetime range
        logger.error(f"Failed to generate schedule for {to_query_string(params)}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Schedule falls outside the supported date range",
        )

    response_events = []
    for event in events:
        display = describe_event(event)
        response_events.append(ScheduleEvent(
            type=event.type,
            start=event.start,
            end=event.end,
            text=display.text,
            time_range=display.time_range,
            duration_minutes=display.duration_minutes,
        ))

    return ScheduleResponse(
        schedule_date=schedule_date,
        parameters=_parameters_model(params),
        query=to_query_string(params),
        wake_windows_minutes=wake_window_lengths(params),
        bedtime=events[-1].start,
        events=response_events,
        warnings=[ParameterWarning(field=i.field, message=i.message) for i in issues],
    )


# Used by: Planner page "Reset" button
@router.get("/defaults", response_model=ParametersResponse)
async def get_default_parameters():
    params = default_parameters()
    return ParametersResponse(
        parameters=_parameters_model(params),
        query=to_query_string(params),
    )
