"""
Main slot scoring aggregator that combines the chronotype, priority and deadline scores.
"""

import logging

from ...schemas import Task
from ..core.time_slot import TimeSlot
from ..constraints.time_constraints import violates_divisibility
from .priority_scoring import apply_priority_adjustment
from .time_scoring import calculate_urgency_multiplier

logger = logging.getLogger(__name__)


def calculate_slot_score(task: Task, slot: TimeSlot) -> float:
    """
    Calculate the suitability of a slot for a task. Higher is better; 0 means never.

    The chronotype enters through the slot's own chronotype_score, which was
    computed for the user's chronotype when the slot was carved out.
    """
    # Chronotype score (20 - 100)
    score = float(slot.chronotype_score)

    # Priority pulls the score toward a baseline (additive)
    score = apply_priority_adjustment(score, task.priority)

    # Deadline urgency scales the result (multiplicative, 1.0 - 2.0)
    score *= calculate_urgency_multiplier(task.deadline_date, slot.date)

    if violates_divisibility(task, slot):
        score = 0.0

    logger.debug(f"Slot score for task {task.id} at {slot!r}: {score}")
    return score
