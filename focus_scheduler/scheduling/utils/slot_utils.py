"""
Slot construction and consumption helpers.
"""

from datetime import date, timedelta
from typing import List, Optional

from ...models import Chronotype
from ..core.constants import MIN_SLOT_MINUTES
from ..core.time_slot import TimeSlot
from ..scoring.chronotype_scoring import calculate_chronotype_score
from .time_utils import at_minute


def make_slot(day: date, start_minute: int, end_minute: int, chronotype: Chronotype) -> Optional[TimeSlot]:
    """Build a slot for [start_minute, end_minute) on `day`, or None if shorter than the minimum."""
    if end_minute - start_minute < MIN_SLOT_MINUTES:
        return None
    start = at_minute(day, start_minute)
    return TimeSlot(
        start=start,
        end=at_minute(day, end_minute),
        chronotype_score=calculate_chronotype_score(start.hour, chronotype),
    )


def consume_slot(slots: List[TimeSlot], used_slot: TimeSlot, used_minutes: int,
                 chronotype: Chronotype) -> List[TimeSlot]:
    """
    Return a new slot list with `used_minutes` taken from the start of `used_slot`.
    The remainder survives as a re-scored slot only if it meets the minimum length.
    """
    remaining: List[TimeSlot] = []
    for slot in slots:
        if slot is not used_slot:
            remaining.append(slot)
            continue

        new_start = slot.start + timedelta(minutes=used_minutes)
        if new_start < slot.end and slot.end - new_start >= timedelta(minutes=MIN_SLOT_MINUTES):
            remaining.append(TimeSlot(
                start=new_start,
                end=slot.end,
                chronotype_score=calculate_chronotype_score(new_start.hour, chronotype),
            ))
    return remaining
