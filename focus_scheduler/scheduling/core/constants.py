"""
Constants shared across the scheduling engine.
"""

# Shortest free gap worth reporting as a slot, inclusive
MIN_SLOT_MINUTES = 30

# Duration assumed for a task without an estimate
DEFAULT_TASK_MINUTES = 60

# Duration assumed for a commitment without an end time
DEFAULT_COMMITMENT_MINUTES = 60

DEFAULT_WORK_START_HOUR = 8
DEFAULT_WORK_END_HOUR = 22

# Latest allowed end of the working day, so every slot ends on its own date
LAST_WORK_END_HOUR = 23

# Chronotype preference tiers
PEAK_SCORE = 100
GOOD_SCORE = 70
FAIR_SCORE = 40
POOR_SCORE = 20

# Priority pulls the chronotype score toward these baselines
MEDIUM_PRIORITY_BASELINE = 50
LOW_PRIORITY_BASELINE = 70

# Deadline urgency multipliers keyed by the max days remaining
URGENCY_MULTIPLIERS = ((1, 2.0), (3, 1.5))
