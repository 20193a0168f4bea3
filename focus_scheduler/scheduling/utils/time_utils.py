"""
Clock helpers: conversion between time-of-day values, minutes and HH:MM strings.
"""

from datetime import date, datetime, time, timedelta
from typing import Union


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def at_minute(day: date, minutes: int) -> datetime:
    """Datetime `minutes` after midnight of `day`."""
    return datetime.combine(day, time.min) + timedelta(minutes=minutes)


def format_clock(moment: datetime) -> str:
    return moment.strftime("%H:%M")


def parse_clock(value: Union[str, time]) -> time:
    """Accept a time or an HH:MM / HH:MM:SS string."""
    if isinstance(value, time):
        return value
    return time.fromisoformat(value.strip())
