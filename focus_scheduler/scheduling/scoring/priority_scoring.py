"""
Priority-based scoring functions for slot evaluation.
"""

from datetime import datetime

from ...models import TaskPriority
from ..core.constants import MEDIUM_PRIORITY_BASELINE, LOW_PRIORITY_BASELINE


def apply_priority_adjustment(score: float, priority: TaskPriority) -> float:
    """
    Pull a chronotype score toward a neutral baseline for less important work.
    High: unchanged. Medium: halfway to 50. Low: halfway to 70, so filler work
    is not starved of slots outside peak hours.
    """
    if priority == TaskPriority.HIGH:
        return score
    if priority == TaskPriority.MEDIUM:
        return (score + MEDIUM_PRIORITY_BASELINE) / 2
    return (score + LOW_PRIORITY_BASELINE) / 2


def task_sort_key(indexed_task):
    """
    Ordering key for the allocation queue, taking (original_index, task).
    Deadlines first (earliest first), then priority high to low, then input order.
    """
    index, task = indexed_task
    deadline = task.deadline_datetime
    return (
        deadline is None,
        deadline or datetime.min,
        task.priority.rank,
        index,
    )
