"""
Builds ScheduleParameters from URL query values and back.

Every value falls back to its default when it is missing, empty, not a number,
not finite, or zero. Zero counts as "not set" for numeric fields, matching how
shared planner links have always behaved.
"""

import logging
import math
from datetime import datetime, time
from typing import Dict, Mapping, Optional
from urllib.parse import urlencode

from .schedule_generator import ScheduleParameters
from ..core.constants import (
    DEFAULT_WAKEUP, DEFAULT_NUM_NAPS, DEFAULT_AVG_NAP_LENGTH_MINUTES,
    DEFAULT_NEXT_WAKE_WINDOW_MINUTES, DEFAULT_LAST_WAKE_WINDOW_MINUTES,
    WAKEUP_FORMATS, WAKEUP_OUTPUT_FORMAT,
)
from ..core.utils import QUERY_PARAM_TO_FIELD_MAP, FIELD_TO_QUERY_PARAM_MAP

logger = logging.getLogger(__name__)

NUMERIC_DEFAULTS: Dict[str, int] = {
    "num_naps": DEFAULT_NUM_NAPS,
    "avg_nap_length": DEFAULT_AVG_NAP_LENGTH_MINUTES,
    "next_wake_window": DEFAULT_NEXT_WAKE_WINDOW_MINUTES,
    "last_wake_window": DEFAULT_LAST_WAKE_WINDOW_MINUTES,
}


# Used by: parse_wakeup, default_parameters
def _parse_time(value: str) -> Optional[time]:
    for fmt in WAKEUP_FORMATS:
        try:
            # Schedules are minute-granular
            return datetime.strptime(value, fmt).time().replace(second=0)
        except ValueError:
            continue
    return None


# Used by: parse_schedule_parameters
def parse_wakeup(raw: Optional[str]) -> time:
    """HH:MM (or HH:MM:SS) string → time; default wakeup otherwise."""
    if raw is not None and raw.strip():
        parsed = _parse_time(raw.strip())
        if parsed is not None:
            return parsed
        logger.warning(f"Unparseable wakeup {raw!r}, using default {DEFAULT_WAKEUP}")
    return _parse_time(DEFAULT_WAKEUP)


# Used by: parse_schedule_parameters
def parse_minutes(raw: Optional[str], default: int, name: str = "value") -> int:
    """Whole-number string → int; default when missing, invalid or zero."""
    if raw is None or not raw.strip():
        return default

    try:
        value = float(raw.strip())
    except ValueError:
        logger.warning(f"Unparseable {name} {raw!r}, using default {default}")
        return default

    if not math.isfinite(value) or not value.is_integer():
        logger.warning(f"Non-integer {name} {raw!r}, using default {default}")
        return default

    if value == 0:
        return default

    return int(value)


# Used by: api/schedule.py, to_query_params round-trip
def parse_schedule_parameters(query: Mapping[str, Optional[str]]) -> ScheduleParameters:
    """Build parameters from a mapping keyed by URL query names (numNaps, ...)."""
    values = {
        field: query.get(name)
        for name, field in QUERY_PARAM_TO_FIELD_MAP.items()
    }

    numeric = {
        field: parse_minutes(values[field], default, name=FIELD_TO_QUERY_PARAM_MAP[field])
        for field, default in NUMERIC_DEFAULTS.items()
    }

    return ScheduleParameters(wakeup=parse_wakeup(values["wakeup"]), **numeric)


# Used by: api/schedule.py
def default_parameters() -> ScheduleParameters:
    return parse_schedule_parameters({})


# Used by: to_query_string, api/schedule.py
def to_query_params(params: ScheduleParameters) -> Dict[str, str]:
    """Inverse of parse_schedule_parameters, keyed by URL query names."""
    return {
        "wakeup": params.wakeup.strftime(WAKEUP_OUTPUT_FORMAT),
        "numNaps": str(params.num_naps),
        "avgNapLength": str(params.avg_nap_length),
        "nextWakeWindow": str(params.next_wake_window),
        "lastWakeWindow": str(params.last_wake_window),
    }


# Used by: api/schedule.py
def to_query_string(params: ScheduleParameters) -> str:
    return urlencode(to_query_params(params))
