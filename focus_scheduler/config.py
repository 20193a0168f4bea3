"""
Runtime configuration for Focus Scheduler.

Values come from the environment (optionally a .env file) and are only read
by the service layer; the engine functions take explicit parameters.
"""

import logging
import os
from datetime import date, datetime, timedelta
from typing import Optional, Tuple

import pytz
from dotenv import load_dotenv

load_dotenv()

WORK_START_HOUR = int(os.getenv("WORK_START_HOUR", "8"))
WORK_END_HOUR = int(os.getenv("WORK_END_HOUR", "22"))
DEFAULT_TASK_MINUTES = int(os.getenv("DEFAULT_TASK_MINUTES", "60"))
DEFAULT_CHRONOTYPE = os.getenv("DEFAULT_CHRONOTYPE", "afternoon")
DEFAULT_RANGE_DAYS = int(os.getenv("DEFAULT_RANGE_DAYS", "7"))
SCHEDULER_TIMEZONE = os.getenv("SCHEDULER_TIMEZONE", "UTC")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def setup_logging(level: Optional[str] = None):
    """Configure root logging for scripts and services embedding the engine."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def today(tz_name: Optional[str] = None) -> date:
    """Current calendar date in the configured scheduler timezone."""
    tz = pytz.timezone(tz_name or SCHEDULER_TIMEZONE)
    return datetime.now(tz).date()


def default_date_range(start: Optional[date] = None) -> Tuple[date, date]:
    """Today through DEFAULT_RANGE_DAYS days later, inclusive."""
    start = start or today()
    return start, start + timedelta(days=DEFAULT_RANGE_DAYS)
