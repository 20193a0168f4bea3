from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime, time
from typing import Optional, List, Union

import pytz
from dateutil import parser as date_parser

from .models import Chronotype, TaskPriority


def parse_deadline(value):
    """
    Normalize a deadline to a date or a naive UTC datetime.
    A bare YYYY-MM-DD string becomes a date; aware datetimes are converted to UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        text = value.strip()
        parsed = date_parser.isoparse(text)
        if len(text) == 10:
            return parsed.date()
        value = parsed
    if isinstance(value, datetime) and value.tzinfo is not None:
        return value.astimezone(pytz.utc).replace(tzinfo=None)
    return value


# ----------------- Input Schemas ---------------------

class Task(BaseModel):
    id: str
    title: str = ""
    estimated_time: Optional[int] = None  # minutes, None means the default duration
    priority: TaskPriority = TaskPriority.MEDIUM
    deadline: Optional[Union[datetime, date]] = None
    is_divisible: bool = True
    is_completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return str(value)

    @field_validator("priority", mode="before")
    @classmethod
    def normalize_priority(cls, value):
        if value is None:
            return TaskPriority.MEDIUM
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("deadline", mode="before")
    @classmethod
    def normalize_deadline(cls, value):
        return parse_deadline(value)

    @property
    def deadline_date(self) -> Optional[date]:
        if self.deadline is None:
            return None
        if isinstance(self.deadline, datetime):
            return self.deadline.date()
        return self.deadline

    @property
    def deadline_datetime(self) -> Optional[datetime]:
        """Deadline as a datetime; a date-only deadline is taken at midnight."""
        if self.deadline is None:
            return None
        if isinstance(self.deadline, datetime):
            return self.deadline
        return datetime.combine(self.deadline, time.min)


class Commitment(BaseModel):
    id: Optional[str] = None
    title: str = ""
    date: date
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    is_fixed: bool = True
    priority: int = Field(default=3, ge=1, le=5)
    is_completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return None if value is None else str(value)


class DateRange(BaseModel):
    start: date
    end: date


class WorkingHours(BaseModel):
    start_hour: int = 8
    end_hour: int = 22


class ScheduleRequest(BaseModel):
    tasks: List[Task]
    commitments: List[Commitment] = Field(default_factory=list)
    chronotype: Optional[Chronotype] = None  # None means the configured default
    date_range: Optional[DateRange] = None
    working_hours: Optional[WorkingHours] = None

    @field_validator("chronotype", mode="before")
    @classmethod
    def resolve_chronotype(cls, value):
        return None if value is None else Chronotype.from_value(value)


# ----------------- Output Schemas ---------------------

class ScheduledItem(BaseModel):
    task_id: str
    title: str
    date: date
    start_time: str  # HH:MM
    duration: int    # minutes
    reason: str


class ScheduleResult(BaseModel):
    scheduled_items: List[ScheduledItem] = Field(default_factory=list)
    unscheduled_task_ids: List[str] = Field(default_factory=list)
    conflicts: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)


class TimeSlotOut(BaseModel):
    date: date
    start_time: str
    end_time: str
    duration: int
    chronotype_score: int


class FreeSlotsResult(BaseModel):
    date: date
    slots: List[TimeSlotOut]
    message: str


class ConflictCheck(BaseModel):
    has_conflict: bool
    conflicting_commitment: Optional[Commitment] = None
    conflicting_commitments: List[Commitment] = Field(default_factory=list)
    message: str


class ActivitySuggestion(BaseModel):
    date: date
    time: str  # HH:MM
    duration: int


class ActivitySuggestionResult(BaseModel):
    activity_type: str
    suggestions: List[ActivitySuggestion]
    message: str
