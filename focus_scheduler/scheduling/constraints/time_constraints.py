"""
Time-related constraint checking functions.
"""

from typing import Tuple

from ...exceptions import InvalidInterval
from ...schemas import Task, Commitment
from ..core.constants import DEFAULT_TASK_MINUTES, DEFAULT_COMMITMENT_MINUTES
from ..core.time_slot import TimeSlot
from ..utils.time_utils import minutes_of_day


def required_minutes(task: Task) -> int:
    """Minutes a task needs; rejects non-positive estimates."""
    if task.estimated_time is None:
        return DEFAULT_TASK_MINUTES
    if task.estimated_time <= 0:
        raise InvalidInterval(f"Task {task.id} has non-positive duration {task.estimated_time}")
    return task.estimated_time


def fits_capacity(task: Task, slot: TimeSlot) -> bool:
    return slot.duration_minutes >= required_minutes(task)


def violates_divisibility(task: Task, slot: TimeSlot) -> bool:
    """An indivisible task needs one contiguous slot of its full duration."""
    return not task.is_divisible and slot.duration_minutes < required_minutes(task)


def is_slot_allowed(task: Task, slot: TimeSlot) -> bool:
    """
    Check if a slot can host this task at all.
    Every placement consumes a contiguous span of the full duration, so the
    capacity rule covers divisible tasks too.
    """
    return fits_capacity(task, slot) and not violates_divisibility(task, slot)


def commitment_minutes(commitment: Commitment, default_start_minutes: int) -> Tuple[int, int]:
    """
    Occupied [start, end) minutes of a commitment on its own date.
    A missing start falls back to `default_start_minutes`; a missing end to start + 60.
    When the start was filled in and the given end is not after it, the
    commitment occupies nothing.
    """
    if commitment.start_time is not None:
        start = minutes_of_day(commitment.start_time)
    else:
        start = default_start_minutes

    if commitment.end_time is not None:
        end = minutes_of_day(commitment.end_time)
    else:
        end = start + DEFAULT_COMMITMENT_MINUTES

    if end <= start:
        if commitment.start_time is None:
            return start, start
        label = commitment.title or commitment.id or "commitment"
        raise InvalidInterval(
            f"Commitment '{label}' on {commitment.date} ends at or before it starts "
            f"({commitment.start_time} - {commitment.end_time})"
        )
    return start, end
