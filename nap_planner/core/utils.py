"""Shared lookup maps and clock helpers."""

from datetime import date, datetime
from typing import Dict, Optional

import pytz

from .settings import settings

# Used by: schedule_params.py, api/schedule.py. URL query name → ScheduleParameters field
QUERY_PARAM_TO_FIELD_MAP: Dict[str, str] = {
    "wakeup": "wakeup",
    "numNaps": "num_naps",
    "avgNapLength": "avg_nap_length",
    "nextWakeWindow": "next_wake_window",
    "lastWakeWindow": "last_wake_window",
}

# Used by: schedule_params.parse_schedule_parameters, validation.py. Field → URL query name
FIELD_TO_QUERY_PARAM_MAP: Dict[str, str] = {
    field: name for name, field in QUERY_PARAM_TO_FIELD_MAP.items()
}


# Used by: schedule_generator.generate_schedule, api/schedule.py
def current_schedule_date(tz_name: Optional[str] = None) -> date:
    """Today's date in the schedule timezone."""
    tz = pytz.timezone(tz_name or settings.SCHEDULE_TIMEZONE)
    return datetime.now(tz).date()
