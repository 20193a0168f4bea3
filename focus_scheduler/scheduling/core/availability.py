"""
Free-time calculation: fixed commitments subtracted from a daily working window.
"""

import logging
from datetime import date, timedelta
from typing import Iterator, List

from ...exceptions import InvalidInterval
from ...models import Chronotype
from ...schemas import Commitment, FreeSlotsResult, TimeSlotOut
from ..constraints.time_constraints import commitment_minutes
from ..utils.slot_utils import make_slot
from .constants import DEFAULT_WORK_START_HOUR, DEFAULT_WORK_END_HOUR, DEFAULT_TASK_MINUTES, LAST_WORK_END_HOUR
from .time_slot import TimeSlot

logger = logging.getLogger(__name__)


def validate_working_hours(work_start_hour: int, work_end_hour: int):
    if not (0 <= work_start_hour < work_end_hour <= LAST_WORK_END_HOUR):
        raise InvalidInterval(
            f"Working hours must satisfy 0 <= start < end <= {LAST_WORK_END_HOUR}, got {work_start_hour}-{work_end_hour}"
        )


def iter_days(start_date: date, end_date: date) -> Iterator[date]:
    """Every date from start_date to end_date inclusive."""
    if end_date < start_date:
        raise InvalidInterval(f"Date range ends ({end_date}) before it starts ({start_date})")
    current = start_date
    while current <= end_date:
        yield current
        current += timedelta(days=1)


def calculate_day_slots(
    commitments: List[Commitment],
    chronotype: Chronotype,
    day: date,
    work_start_hour: int = DEFAULT_WORK_START_HOUR,
    work_end_hour: int = DEFAULT_WORK_END_HOUR,
) -> List[TimeSlot]:
    """Free slots on a single day, walking a cursor across the sorted commitments."""
    work_start = work_start_hour * 60
    work_end = work_end_hour * 60

    busy = sorted(
        commitment_minutes(c, work_start)
        for c in commitments
        if c.date == day and not c.is_completed
    )

    slots: List[TimeSlot] = []
    cursor = work_start
    for busy_start, busy_end in busy:
        if cursor >= work_end:
            break
        if cursor < busy_start:
            slot = make_slot(day, cursor, min(busy_start, work_end), chronotype)
            if slot:
                slots.append(slot)
        cursor = max(cursor, busy_end)

    if cursor < work_end:
        slot = make_slot(day, cursor, work_end, chronotype)
        if slot:
            slots.append(slot)

    return slots


def calculate_available_slots(
    commitments: List[Commitment],
    chronotype: Chronotype,
    start_date: date,
    end_date: date,
    work_start_hour: int = DEFAULT_WORK_START_HOUR,
    work_end_hour: int = DEFAULT_WORK_END_HOUR,
) -> List[TimeSlot]:
    """
    Derive the free TimeSlots in [start_date, end_date], ordered by date then start.
    Completed commitments are ignored and gaps under 30 minutes are discarded.
    """
    validate_working_hours(work_start_hour, work_end_hour)
    chronotype = Chronotype.from_value(chronotype)

    slots: List[TimeSlot] = []
    for day in iter_days(start_date, end_date):
        slots.extend(calculate_day_slots(commitments, chronotype, day, work_start_hour, work_end_hour))

    logger.debug(f"Found {len(slots)} free slots between {start_date} and {end_date}")
    return slots


def find_free_slots(
    commitments: List[Commitment],
    day: date,
    chronotype: Chronotype,
    required_duration: int = DEFAULT_TASK_MINUTES,
    work_start_hour: int = DEFAULT_WORK_START_HOUR,
    work_end_hour: int = DEFAULT_WORK_END_HOUR,
) -> FreeSlotsResult:
    """Free slots on one day that can hold at least `required_duration` minutes."""
    if required_duration <= 0:
        raise InvalidInterval(f"Required duration must be positive, got {required_duration}")

    slots = [
        slot for slot in calculate_available_slots(
            commitments, chronotype, day, day, work_start_hour, work_end_hour
        )
        if slot.duration_minutes >= required_duration
    ]

    if slots:
        message = f"Found {len(slots)} free slots on {day.isoformat()}."
    else:
        message = f"No free slots of {required_duration} minutes or more on {day.isoformat()}."

    return FreeSlotsResult(
        date=day,
        slots=[TimeSlotOut(**slot.to_dict()) for slot in slots],
        message=message,
    )
