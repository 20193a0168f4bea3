from datetime import date, datetime

import pytest

from focus_scheduler.schemas import Task, Commitment
from focus_scheduler.scheduling.core.time_slot import TimeSlot


@pytest.fixture
def day() -> date:
    """Wednesday used as the reference day across the suite."""
    return date(2024, 1, 10)


@pytest.fixture
def make_task():
    """Factory for tasks with sensible defaults, overridable by kwargs."""
    counter = {"n": 0}

    def _make_task(**kwargs) -> Task:
        counter["n"] += 1
        params = {
            "id": f"task-{counter['n']}",
            "title": f"Task {counter['n']}",
            "estimated_time": 60,
            "priority": "medium",
            **kwargs,
        }
        return Task(**params)

    return _make_task


@pytest.fixture
def make_commitment(day):
    """Factory for commitments on the reference day unless a date is given."""
    def _make_commitment(start=None, end=None, **kwargs) -> Commitment:
        params = {
            "date": day,
            "start_time": start,
            "end_time": end,
            "title": kwargs.pop("title", "Meeting"),
            **kwargs,
        }
        return Commitment(**params)

    return _make_commitment


@pytest.fixture
def make_slot(day):
    """Factory for TimeSlots on the reference day: make_slot(10, 0, 12, 0, score)."""
    def _make_slot(start_hour, start_minute, end_hour, end_minute, score=100, on=None) -> TimeSlot:
        slot_day = on or day
        return TimeSlot(
            start=datetime(slot_day.year, slot_day.month, slot_day.day, start_hour, start_minute),
            end=datetime(slot_day.year, slot_day.month, slot_day.day, end_hour, end_minute),
            chronotype_score=score,
        )

    return _make_slot
