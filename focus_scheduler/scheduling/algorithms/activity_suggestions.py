"""
Activity slot suggestions: one recommended start per day, as close as possible
to the hour that suits the activity.
"""

import logging
from datetime import date
from typing import List, NamedTuple

from ...models import Chronotype
from ...schemas import Commitment, ActivitySuggestion, ActivitySuggestionResult
from ..core.availability import calculate_day_slots, iter_days, validate_working_hours
from ..core.constants import DEFAULT_WORK_START_HOUR, DEFAULT_WORK_END_HOUR
from ..utils.time_utils import format_clock

logger = logging.getLogger(__name__)


class ActivityDefaults(NamedTuple):
    duration: int        # minutes
    preferred_hour: int


ACTIVITY_DEFAULTS = {
    "workout": ActivityDefaults(duration=60, preferred_hour=7),
    "study": ActivityDefaults(duration=120, preferred_hour=10),
    "reading": ActivityDefaults(duration=60, preferred_hour=21),
    "meditation": ActivityDefaults(duration=30, preferred_hour=6),
}
FALLBACK_ACTIVITY = ActivityDefaults(duration=60, preferred_hour=14)


def get_activity_defaults(activity_type: str) -> ActivityDefaults:
    return ACTIVITY_DEFAULTS.get(activity_type.strip().lower(), FALLBACK_ACTIVITY)


def suggest_activity_slots(
    activity_type: str,
    commitments: List[Commitment],
    start_date: date,
    end_date: date,
    chronotype: Chronotype = Chronotype.AFTERNOON,
    work_start_hour: int = DEFAULT_WORK_START_HOUR,
    work_end_hour: int = DEFAULT_WORK_END_HOUR,
    title: str = "",
) -> ActivitySuggestionResult:
    """
    For each day in range, pick the free slot long enough for the activity whose
    start is nearest the activity's preferred hour (the earlier slot wins a tie).
    Days without such a slot are skipped.
    """
    validate_working_hours(work_start_hour, work_end_hour)
    defaults = get_activity_defaults(activity_type)
    preferred_minute = defaults.preferred_hour * 60

    suggestions: List[ActivitySuggestion] = []
    for day in iter_days(start_date, end_date):
        slots = [
            slot for slot in calculate_day_slots(commitments, chronotype, day, work_start_hour, work_end_hour)
            if slot.duration_minutes >= defaults.duration
        ]
        if not slots:
            continue

        best = min(slots, key=lambda s: (abs(s.start.hour * 60 + s.start.minute - preferred_minute), s.start))
        suggestions.append(ActivitySuggestion(
            date=day,
            time=format_clock(best.start),
            duration=defaults.duration,
        ))

    label = title or activity_type
    if suggestions:
        message = f"Recommending {len(suggestions)} slots for {label}."
    else:
        message = f"Could not find free time for {label}."
    logger.info(message)

    return ActivitySuggestionResult(activity_type=activity_type, suggestions=suggestions, message=message)
