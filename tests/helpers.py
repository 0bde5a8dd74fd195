"""
Shared helpers for nap schedule tests.
"""

from datetime import date, datetime
from typing import List

from nap_planner.services.schedule_generator import Event, ScheduleParameters


SCHEDULE_DATE = date(2026, 3, 14)


def at(hhmm: str, on: date = SCHEDULE_DATE) -> datetime:
    """"06:20" → datetime on the test schedule date."""
    return datetime.combine(on, datetime.strptime(hhmm, "%H:%M").time())


def event_minutes(events: List[Event], event_type: str) -> List[int]:
    """Durations in minutes of every event of one type, in order."""
    return [
        int(e.duration.total_seconds() // 60)
        for e in events
        if e.type == event_type and e.duration is not None
    ]


def make_params(
    wakeup: str = "06:20",
    num_naps: int = 5,
    avg_nap_length: int = 40,
    next_wake_window: int = 90,
    last_wake_window: int = 120,
) -> ScheduleParameters:
    return ScheduleParameters(
        wakeup=datetime.strptime(wakeup, "%H:%M").time(),
        num_naps=num_naps,
        avg_nap_length=avg_nap_length,
        next_wake_window=next_wake_window,
        last_wake_window=last_wake_window,
    )
