"""Human-readable text for schedule events."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .schedule_generator import Event
from ..core.constants import EVENT_LABELS, TIME_RANGE_SEPARATOR


@dataclass(frozen=True)
class EventDisplay:
    text: str  # "Nap from 7:50 AM - 8:30 AM"
    time_range: str
    duration_minutes: Optional[int] = None


def format_time_12h(dt: datetime) -> str:
    """Format as "H:MM AM/PM"."""
    hour = dt.hour
    period = "AM" if hour < 12 else "PM"
    if hour == 0:
        hour = 12
    elif hour > 12:
        hour -= 12
    return f"{hour}:{dt.minute:02d} {period}"


def format_date_range(start: datetime, end: Optional[datetime] = None) -> str:
    parts = [format_time_12h(start)]
    if end is not None:
        parts.append(format_time_12h(end))
    return TIME_RANGE_SEPARATOR.join(parts)


def event_duration_minutes(event: Event) -> Optional[int]:
    """Whole minutes from start to end, truncated toward zero; None for bedtime."""
    if event.duration is None:
        return None
    return int(event.duration.total_seconds() / 60)


# Used by: api/schedule.py
def describe_event(event: Event) -> EventDisplay:
    time_range = format_date_range(event.start, event.end)
    return EventDisplay(
        text=f"{EVENT_LABELS[event.type]} {time_range}",
        time_range=time_range,
        duration_minutes=event_duration_minutes(event),
    )
