"""
Deadline-based scoring functions for slot evaluation.
"""

from datetime import date
from typing import Optional

from ..core.constants import URGENCY_MULTIPLIERS


def days_until_deadline(deadline: Optional[date], slot_date: date) -> Optional[int]:
    """Whole calendar days from the slot's date to the deadline (negative once passed)."""
    if deadline is None:
        return None
    return (deadline - slot_date).days


def calculate_urgency_multiplier(deadline: Optional[date], slot_date: date) -> float:
    """
    Multiplier for deadline proximity.
    <= 1 day away (or already passed): 2.0, <= 3 days: 1.5, otherwise 1.0.
    """
    days = days_until_deadline(deadline, slot_date)
    if days is None:
        return 1.0
    for max_days, multiplier in URGENCY_MULTIPLIERS:
        if days <= max_days:
            return multiplier
    return 1.0


def is_deadline_approaching(deadline: Optional[date], slot_date: date) -> bool:
    days = days_until_deadline(deadline, slot_date)
    return days is not None and days <= 1
