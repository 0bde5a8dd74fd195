"""
Daily nap/wake schedule generation.

The day starts with a wake window of next_wake_window minutes. Each nap is
followed by another wake window, and the windows grow linearly from
next_wake_window toward last_wake_window, snapped to 5-minute steps. The last
wake window ends at bedtime.

Example (wakeup 06:00, 2 naps of 40 min, windows 90 → 120):
    Awake 06:00-07:30, Nap 07:30-08:10, Awake 08:10-09:55,
    Nap 09:55-10:35, Awake 10:35-12:35, Bedtime 12:35
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import List, Literal, Optional

from ..core.constants import WAKE_WINDOW_ROUNDING_MINUTES
from ..core.utils import current_schedule_date

logger = logging.getLogger(__name__)

EventType = Literal["Awake", "Nap", "Bedtime"]


@dataclass(frozen=True)
class ScheduleParameters:
    wakeup: time
    num_naps: int
    avg_nap_length: int  # minutes
    next_wake_window: int  # minutes, first wake window of the day
    last_wake_window: int  # minutes, wake window before bedtime


@dataclass(frozen=True)
class Event:
    start: datetime
    type: EventType
    end: Optional[datetime] = None  # None only for bedtime

    @property
    def duration(self) -> Optional[timedelta]:
        if self.end is None:
            return None
        return self.end - self.start


# Used by: wake_window_lengths
def round_to_step(value: float, step: int = WAKE_WINDOW_ROUNDING_MINUTES) -> int:
    """Round to the nearest multiple of step, halves rounding up."""
    return int(math.floor(value / step + 0.5)) * step


# Used by: generate_schedule, api/schedule.py
def wake_window_lengths(params: ScheduleParameters) -> List[int]:
    """Length in minutes of every wake window, first to last."""
    lengths = [params.next_wake_window]
    if params.num_naps <= 0:
        # Single wake window, no growth to compute
        return lengths

    num_wake_windows = params.num_naps + 1
    increase = (params.last_wake_window - params.next_wake_window) / (num_wake_windows - 1)

    for i in range(params.num_naps):
        lengths.append(params.next_wake_window + round_to_step(increase * (i + 1)))

    return lengths


# Used by: api/schedule.py
def generate_schedule(params: ScheduleParameters, on: Optional[date] = None) -> List[Event]:
    """Build the day's events. Wakeup is placed on `on` (defaults to today)."""
    if on is None:
        on = current_schedule_date()

    windows = wake_window_lengths(params)
    nap_length = timedelta(minutes=params.avg_nap_length)

    event_start = datetime.combine(on, params.wakeup)
    event_end = event_start + timedelta(minutes=windows[0])
    schedule = [Event(start=event_start, end=event_end, type="Awake")]

    for window in windows[1:]:
        event_start = event_end
        event_end = event_end + nap_length
        schedule.append(Event(start=event_start, end=event_end, type="Nap"))

        event_start = event_end
        event_end = event_end + timedelta(minutes=window)
        schedule.append(Event(start=event_start, end=event_end, type="Awake"))

    schedule.append(Event(start=event_end, type="Bedtime"))

    logger.debug(
        f"Generated {len(schedule)} events for wakeup {params.wakeup:%H:%M} "
        f"with {params.num_naps} naps, bedtime {event_end:%H:%M}"
    )
    return schedule
