"""
Opt-in bounds checks for schedule parameters.

The generator accepts anything and produces a well-typed (possibly nonsensical)
schedule. These checks let a caller flag or reject inputs that would produce
inverted events or a day that never reaches bedtime.
"""

import logging
from dataclasses import dataclass
from typing import List

from .schedule_generator import ScheduleParameters, wake_window_lengths
from ..core.constants import (
    MAX_NUM_NAPS, MIN_NAP_LENGTH_MINUTES, MAX_NAP_LENGTH_MINUTES,
    MIN_WAKE_WINDOW_MINUTES, MAX_WAKE_WINDOW_MINUTES, MINUTES_PER_DAY,
)
from ..core.utils import FIELD_TO_QUERY_PARAM_MAP

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterIssue:
    field: str  # URL query name, e.g. "numNaps"
    message: str


class ScheduleValidationError(ValueError):
    def __init__(self, issues: List[ParameterIssue]):
        self.issues = issues
        super().__init__("; ".join(f"{i.field}: {i.message}" for i in issues))


# Used by: validate_schedule_parameters
def _check_range(field: str, value: int, low: int, high: int, unit: str = "") -> List[ParameterIssue]:
    suffix = f" {unit}" if unit else ""
    if value < low:
        return [ParameterIssue(FIELD_TO_QUERY_PARAM_MAP[field], f"must be at least {low}{suffix}, got {value}")]
    if value > high:
        return [ParameterIssue(FIELD_TO_QUERY_PARAM_MAP[field], f"must be at most {high}{suffix}, got {value}")]
    return []


# Used by: ensure_valid_parameters, api/schedule.py
def validate_schedule_parameters(params: ScheduleParameters) -> List[ParameterIssue]:
    """Return every problem found; an empty list means the parameters are sane."""
    issues: List[ParameterIssue] = []
    issues += _check_range("num_naps", params.num_naps, 0, MAX_NUM_NAPS)
    issues += _check_range(
        "avg_nap_length", params.avg_nap_length,
        MIN_NAP_LENGTH_MINUTES, MAX_NAP_LENGTH_MINUTES, "minutes",
    )
    issues += _check_range(
        "next_wake_window", params.next_wake_window,
        MIN_WAKE_WINDOW_MINUTES, MAX_WAKE_WINDOW_MINUTES, "minutes",
    )
    issues += _check_range(
        "last_wake_window", params.last_wake_window,
        MIN_WAKE_WINDOW_MINUTES, MAX_WAKE_WINDOW_MINUTES, "minutes",
    )

    if issues:
        return issues

    if params.num_naps == 0 and params.last_wake_window != params.next_wake_window:
        issues.append(ParameterIssue(
            FIELD_TO_QUERY_PARAM_MAP["last_wake_window"],
            "is ignored when there are no naps; only nextWakeWindow is used",
        ))

    day_minutes = sum(wake_window_lengths(params)) + params.num_naps * params.avg_nap_length
    if day_minutes >= MINUTES_PER_DAY:
        issues.append(ParameterIssue(
            FIELD_TO_QUERY_PARAM_MAP["num_naps"],
            f"schedule spans {day_minutes} minutes, bedtime would be a day or more after wakeup",
        ))

    return issues


# Used by: api/schedule.py (strict mode)
def ensure_valid_parameters(params: ScheduleParameters) -> ScheduleParameters:
    """Raises ScheduleValidationError listing every issue."""
    issues = validate_schedule_parameters(params)
    if issues:
        logger.info(f"Rejected schedule parameters: {len(issues)} issue(s)")
        raise ScheduleValidationError(issues)
    return params
