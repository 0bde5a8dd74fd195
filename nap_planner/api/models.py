"""Pydantic response models for the schedule API."""

from pydantic import BaseModel, ConfigDict, Field
from datetime import date, datetime
from typing import List, Optional, Literal


# Schedule parameters, serialised with the URL query names

class ScheduleParametersModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    wakeup: str  # "06:20"
    num_naps: int = Field(alias="numNaps")
    avg_nap_length: int = Field(alias="avgNapLength")
    next_wake_window: int = Field(alias="nextWakeWindow")
    last_wake_window: int = Field(alias="lastWakeWindow")


class ParametersResponse(BaseModel):
    parameters: ScheduleParametersModel
    query: str  # "wakeup=06%3A20&numNaps=5&..."


# Schedule models

class ScheduleEvent(BaseModel):
    type: Literal["Awake", "Nap", "Bedtime"]
    start: datetime
    end: Optional[datetime] = None
    text: str  # "Awake from 6:20 AM - 7:50 AM"
    time_range: str
    duration_minutes: Optional[int] = None


class ParameterWarning(BaseModel):
    field: str
    message: str


class ScheduleResponse(BaseModel):
    schedule_date: date
    parameters: ScheduleParametersModel
    query: str
    wake_windows_minutes: List[int]
    bedtime: datetime
    events: List[ScheduleEvent]
    warnings: List[ParameterWarning] = []
