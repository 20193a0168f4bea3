"""
Focus Scheduler

Chronotype-aware time-slot scheduling: turns pending tasks and fixed
commitments into concrete time assignments.
"""

from .exceptions import SchedulingError, InvalidInterval, InvalidHour
from .models import Chronotype, TaskPriority, TaskState
from .schemas import Task, Commitment, DateRange, WorkingHours, ScheduleRequest, ScheduleResult, ScheduledItem
from .services.scheduler_service import SchedulerService, schedule_tasks

__version__ = "1.0.0"
