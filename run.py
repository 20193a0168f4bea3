#!/usr/bin/env python3
"""
Simple launcher script for Focus Scheduler.
Run this from the root directory with a JSON schedule request:

    python run.py request.json
"""

import json
import sys
import os

# Add the current directory to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from focus_scheduler.config import setup_logging
from focus_scheduler.schemas import ScheduleRequest
from focus_scheduler.services.scheduler_service import schedule_tasks


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Usage: python run.py <request.json>")
        return 2

    setup_logging()
    with open(argv[0]) as f:
        request = ScheduleRequest.model_validate(json.load(f))

    result = schedule_tasks(request)
    print(json.dumps(result.model_dump(mode="json"), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
