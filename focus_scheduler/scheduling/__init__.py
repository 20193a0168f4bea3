"""
Focus Scheduler scheduling engine

Interval arithmetic, chronotype-aware scoring and greedy slot allocation.
Pure functions of their inputs: no I/O, no state shared between runs.
"""

from .core.scheduler import SlotAllocator, Placement
from .core.time_slot import TimeSlot
from .core.availability import calculate_available_slots, calculate_day_slots, find_free_slots
from .core.constants import MIN_SLOT_MINUTES, DEFAULT_TASK_MINUTES
from .scoring.chronotype_scoring import calculate_chronotype_score
from .scoring.slot_scoring import calculate_slot_score
from .constraints.conflicts import check_conflicts
from .algorithms.activity_suggestions import suggest_activity_slots
from .reporting.result_reporter import build_reason, build_suggestions
