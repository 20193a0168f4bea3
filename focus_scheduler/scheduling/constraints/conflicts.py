"""
Overlap checks between an ad-hoc candidate interval and existing commitments.
"""

import logging
from datetime import date, time
from typing import List, Union

from ...exceptions import InvalidInterval
from ...schemas import Commitment, ConflictCheck
from ..utils.time_utils import minutes_of_day, parse_clock
from .time_constraints import commitment_minutes

logger = logging.getLogger(__name__)


def intervals_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    return start_a < end_b and end_a > start_b


def check_conflicts(
    day: date,
    start_time: Union[str, time],
    duration: int,
    commitments: List[Commitment],
) -> ConflictCheck:
    """
    Test a candidate (day, start, duration) against commitments on the same date.
    Untimed commitments never conflict; completed ones still hold their time.
    The first conflicting commitment in input order is reported as
    `conflicting_commitment`.
    """
    if duration <= 0:
        raise InvalidInterval(f"Candidate duration must be positive, got {duration}")

    candidate_start = minutes_of_day(parse_clock(start_time))
    candidate_end = candidate_start + duration

    conflicting = []
    for commitment in commitments:
        if commitment.date != day or commitment.start_time is None:
            continue
        busy_start, busy_end = commitment_minutes(commitment, minutes_of_day(commitment.start_time))
        if intervals_overlap(candidate_start, candidate_end, busy_start, busy_end):
            conflicting.append(commitment)

    if conflicting:
        titles = ", ".join(c.title or (c.id or "untitled") for c in conflicting)
        message = f'Conflict with event(s): "{titles}" at that time.'
        logger.debug(f"Candidate {day} +{candidate_start}min for {duration}min conflicts with {len(conflicting)} commitment(s)")
    else:
        message = "No conflicting events at that time."

    return ConflictCheck(
        has_conflict=bool(conflicting),
        conflicting_commitment=conflicting[0] if conflicting else None,
        conflicting_commitments=conflicting,
        message=message,
    )
