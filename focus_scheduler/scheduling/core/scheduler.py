"""
Greedy allocator that places tasks into free time slots.
"""

import logging
from typing import Dict, List, NamedTuple, Optional

from ...models import Chronotype, TaskState
from ...schemas import Task, ScheduledItem, ScheduleResult
from ..constraints.time_constraints import is_slot_allowed, required_minutes
from ..reporting.result_reporter import build_reason, build_conflict_notes, build_suggestions
from ..scoring.priority_scoring import task_sort_key
from ..scoring.slot_scoring import calculate_slot_score
from ..utils.slot_utils import consume_slot
from ..utils.time_utils import format_clock
from .time_slot import TimeSlot

logger = logging.getLogger(__name__)


class Placement(NamedTuple):
    task: Task
    slot: TimeSlot      # the slot the assignment was carved from
    duration: int
    score: float

# ================================
# INITIALIZATION & SETUP
# ================================

class SlotAllocator:
    """
    Greedy, explainable allocator. Each task in priority order takes the best
    scoring slot that can hold it, and that slot is split so the leftover time
    stays available to later tasks.
    """
    def __init__(self, slots: List[TimeSlot], chronotype: Chronotype):
        self.chronotype = Chronotype.from_value(chronotype)
        self.available_slots = sorted(slots)
        self.slots: List[TimeSlot] = []
        self.placements: List[Placement] = []
        self.task_states: Dict[str, TaskState] = {}

# ================================
# CORE SCHEDULING LOGIC
# ================================

    def allocate(self, tasks: List[Task]) -> ScheduleResult:
        """Run the greedy loop over `tasks`. Re-running on the same input gives the same result."""
        # Reset so repeated calls always start from the full set of free slots
        self.slots = list(self.available_slots)
        self.placements = []

        ordered = self._order_tasks(tasks)
        self.task_states = {task.id: TaskState.PENDING for task in ordered}

        scheduled_items: List[ScheduledItem] = []
        unscheduled: List[str] = []

        for task in ordered:
            placement = self._place_task(task)
            if placement is None:
                self.task_states[task.id] = TaskState.UNSCHEDULED
                unscheduled.append(task.id)
                logger.warning(f"Task {task.id} ('{task.title}') could not be placed: no slot of {required_minutes(task)} minutes")
                continue

            self.task_states[task.id] = TaskState.SCHEDULED
            scheduled_items.append(self._to_item(placement))

        logger.info(f"Allocated {len(scheduled_items)} of {len(ordered)} tasks ({len(unscheduled)} unscheduled)")

        return ScheduleResult(
            scheduled_items=scheduled_items,
            unscheduled_task_ids=unscheduled,
            conflicts=build_conflict_notes(unscheduled),
            suggestions=build_suggestions(unscheduled, self.chronotype),
        )

# ================================
# SCHEDULING HELPER METHODS
# ================================

    def _order_tasks(self, tasks: List[Task]) -> List[Task]:
        for task in tasks:
            required_minutes(task)  # fail fast on malformed durations before any placement
        return [task for _, task in sorted(enumerate(tasks), key=task_sort_key)]

    def _place_task(self, task: Task) -> Optional[Placement]:
        best = self._find_optimal_slot(task)
        if best is None:
            return None

        score, slot = best
        duration = required_minutes(task)
        placement = Placement(task=task, slot=slot, duration=duration, score=score)
        self.placements.append(placement)
        self.slots = consume_slot(self.slots, slot, duration, self.chronotype)
        return placement

    def _to_item(self, placement: Placement) -> ScheduledItem:
        slot = placement.slot
        return ScheduledItem(
            task_id=placement.task.id,
            title=placement.task.title,
            date=slot.date,
            start_time=format_clock(slot.start),
            duration=placement.duration,
            reason=build_reason(placement.task, slot, self.chronotype),
        )

# ================================
# SLOT FINDING & OPTIMIZATION
# ================================

    def _find_optimal_slot(self, task: Task):
        """
        Highest scoring slot that can hold the task, as (score, slot).
        Ties go to the earliest date, then the earliest start time.
        """
        scored_candidates = []
        for slot in self.slots:
            if not is_slot_allowed(task, slot):
                continue
            score = calculate_slot_score(task, slot)
            if score > 0:
                scored_candidates.append((score, slot))

        if not scored_candidates:
            return None

        scored_candidates.sort(key=lambda x: (-x[0], x[1].start))
        return scored_candidates[0]

    def __repr__(self):
        return f"SlotAllocator({len(self.available_slots)} slots, chronotype={self.chronotype.value})"
