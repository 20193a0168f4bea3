"""
Scheduling service: the entry point the orchestration layer calls.
Fills in defaults from configuration, then runs the engine.
"""

import logging
from datetime import date
from typing import List, Optional, Tuple

from .. import config
from ..models import Chronotype
from ..schemas import (
    Task, Commitment, DateRange, WorkingHours, ScheduleRequest, ScheduleResult,
    ActivitySuggestionResult, FreeSlotsResult, ConflictCheck,
)
from ..scheduling.core.availability import calculate_available_slots, find_free_slots
from ..scheduling.core.scheduler import SlotAllocator
from ..scheduling.core.time_slot import TimeSlot
from ..scheduling.constraints.conflicts import check_conflicts
from ..scheduling.algorithms.activity_suggestions import suggest_activity_slots

logger = logging.getLogger(__name__)


class SchedulerService:
    """Stateless facade over the scheduling engine; safe to share between requests."""

    def __init__(self, work_start_hour: Optional[int] = None, work_end_hour: Optional[int] = None,
                 default_chronotype: Optional[str] = None, default_task_minutes: Optional[int] = None):
        self.work_start_hour = config.WORK_START_HOUR if work_start_hour is None else work_start_hour
        self.work_end_hour = config.WORK_END_HOUR if work_end_hour is None else work_end_hour
        self.default_chronotype = Chronotype.from_value(default_chronotype or config.DEFAULT_CHRONOTYPE)
        self.default_task_minutes = default_task_minutes or config.DEFAULT_TASK_MINUTES

    # ----------------- Defaults ---------------------

    def _resolve_chronotype(self, chronotype) -> Chronotype:
        return self.default_chronotype if chronotype is None else Chronotype.from_value(chronotype)

    def _resolve_range(self, date_range: Optional[DateRange]) -> Tuple[date, date]:
        if date_range is None:
            return config.default_date_range()
        return date_range.start, date_range.end

    def _resolve_hours(self, working_hours: Optional[WorkingHours]) -> Tuple[int, int]:
        if working_hours is None:
            return self.work_start_hour, self.work_end_hour
        return working_hours.start_hour, working_hours.end_hour

    def _pending_tasks(self, tasks: List[Task]) -> List[Task]:
        """Drop completed tasks and give estimate-less tasks the configured default duration."""
        pending = []
        for task in tasks:
            if task.is_completed:
                continue
            if task.estimated_time is None:
                task = task.model_copy(update={"estimated_time": self.default_task_minutes})
            pending.append(task)
        return pending

    # ----------------- Operations ---------------------

    def schedule_tasks(self, request: ScheduleRequest) -> ScheduleResult:
        """Place the request's pending tasks into the free time around its commitments."""
        chronotype = self._resolve_chronotype(request.chronotype)
        start_date, end_date = self._resolve_range(request.date_range)
        work_start_hour, work_end_hour = self._resolve_hours(request.working_hours)
        tasks = self._pending_tasks(request.tasks)

        logger.info(f"Scheduling {len(tasks)} tasks for {chronotype.value} chronotype, "
                    f"{start_date} to {end_date}, hours {work_start_hour}-{work_end_hour}")

        slots = calculate_available_slots(
            request.commitments, chronotype, start_date, end_date, work_start_hour, work_end_hour
        )
        return SlotAllocator(slots, chronotype).allocate(tasks)

    def get_available_slots(
        self,
        commitments: List[Commitment],
        chronotype=None,
        date_range: Optional[DateRange] = None,
        working_hours: Optional[WorkingHours] = None,
    ) -> List[TimeSlot]:
        start_date, end_date = self._resolve_range(date_range)
        work_start_hour, work_end_hour = self._resolve_hours(working_hours)
        return calculate_available_slots(
            commitments, self._resolve_chronotype(chronotype), start_date, end_date,
            work_start_hour, work_end_hour,
        )

    def find_free_slots(self, commitments: List[Commitment], day: date,
                        required_duration: Optional[int] = None, chronotype=None,
                        working_hours: Optional[WorkingHours] = None) -> FreeSlotsResult:
        work_start_hour, work_end_hour = self._resolve_hours(working_hours)
        return find_free_slots(
            commitments, day, self._resolve_chronotype(chronotype),
            required_duration or self.default_task_minutes, work_start_hour, work_end_hour,
        )

    def check_conflicts(self, day: date, start_time, duration: int,
                        commitments: List[Commitment]) -> ConflictCheck:
        return check_conflicts(day, start_time, duration, commitments)

    def suggest_activity_slots(self, activity_type: str, commitments: List[Commitment],
                               date_range: Optional[DateRange] = None, chronotype=None,
                               working_hours: Optional[WorkingHours] = None,
                               title: str = "") -> ActivitySuggestionResult:
        start_date, end_date = self._resolve_range(date_range)
        work_start_hour, work_end_hour = self._resolve_hours(working_hours)
        return suggest_activity_slots(
            activity_type, commitments, start_date, end_date,
            self._resolve_chronotype(chronotype), work_start_hour, work_end_hour, title,
        )


# Default instance
scheduler_service = SchedulerService()


def schedule_tasks(request: ScheduleRequest) -> ScheduleResult:
    return scheduler_service.schedule_tasks(request)
