"""
Human-readable justifications and suggestions for a schedule.
"""

from typing import List

from ...models import Chronotype, TaskPriority
from ...schemas import Task
from ..core.time_slot import TimeSlot
from ..scoring.time_scoring import is_deadline_approaching

PEAK_REASON_THRESHOLD = 80
GOOD_REASON_THRESHOLD = 50


def build_reason(task: Task, slot: TimeSlot, chronotype: Chronotype) -> str:
    """Short justification for placing `task` at the start of `slot`."""
    reasons = []

    if slot.chronotype_score >= PEAK_REASON_THRESHOLD:
        reasons.append(f"Peak focus time for the {chronotype.value.replace('_', ' ')} chronotype")
    elif slot.chronotype_score >= GOOD_REASON_THRESHOLD:
        reasons.append("Good time")

    if task.priority == TaskPriority.HIGH:
        reasons.append("High priority")

    if is_deadline_approaching(task.deadline_date, slot.date):
        reasons.append("Deadline approaching")

    return ", ".join(reasons) or "Free time"


def build_conflict_notes(unscheduled_task_ids: List[str]) -> List[str]:
    if not unscheduled_task_ids:
        return []
    return [f"Not enough time to schedule {len(unscheduled_task_ids)} tasks."]


def build_suggestions(unscheduled_task_ids: List[str], chronotype: Chronotype) -> List[str]:
    suggestions = []
    if unscheduled_task_ids:
        suggestions.append(
            f"You have {len(unscheduled_task_ids)} tasks that didn't fit. "
            "Consider relaxing their deadlines or freeing up existing commitments."
        )
    suggestions.append(
        f"Your focus time is {chronotype.label}. Important tasks are scheduled during this time."
    )
    return suggestions
