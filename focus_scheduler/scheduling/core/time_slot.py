"""
Time slot representation for the scheduling system.
"""

from datetime import date, datetime, timedelta

from ..utils.time_utils import format_clock


class TimeSlot:
    """
    A free interval on a single day, tagged with the chronotype score of its start hour.
    Slots exist only for the duration of one scheduling run.
    """
    def __init__(self, start: datetime, end: datetime, chronotype_score: int):
        self.start = start
        self.end = end
        self.chronotype_score = chronotype_score

    @property
    def date(self) -> date:
        return self.start.date()

    @property
    def duration_minutes(self) -> int:
        return int(self.duration().total_seconds() // 60)

    def duration(self) -> timedelta:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "date": self.date,
            "start_time": format_clock(self.start),
            "end_time": format_clock(self.end),
            "duration": self.duration_minutes,
            "chronotype_score": self.chronotype_score,
        }

    def __eq__(self, other):
        if not isinstance(other, TimeSlot):
            return NotImplemented
        return (self.start, self.end, self.chronotype_score) == (other.start, other.end, other.chronotype_score)

    def __hash__(self):
        return hash((self.start, self.end, self.chronotype_score))

    def __lt__(self, other):
        return self.start < other.start

    def __repr__(self):
        return (f"TimeSlot({self.start.strftime('%Y-%m-%d %H:%M')} - "
                f"{format_clock(self.end)}, score={self.chronotype_score})")
