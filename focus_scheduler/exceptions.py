"""
Error taxonomy for the scheduling engine.
"""


class SchedulingError(Exception):
    """Base class for every error raised by the scheduling engine."""


class InvalidInterval(SchedulingError, ValueError):
    """Raised when an interval has start >= end or a duration that is not positive."""


class InvalidHour(SchedulingError, ValueError):
    """Raised when an hour-of-day outside 0-23 reaches the chronotype scorer."""
