"""
Chronotype scoring: how well an hour of the day suits a user's productive window.
"""

from ...exceptions import InvalidHour
from ...models import Chronotype, CHRONOTYPE_HOURS
from ..core.constants import PEAK_SCORE, GOOD_SCORE, FAIR_SCORE, POOR_SCORE


def calculate_chronotype_score(hour: int, chronotype: Chronotype) -> int:
    """
    Score an hour-of-day against a chronotype with a 4-tier system:
    1. Inside the optimal window: 100
    2. Within 2 hours of it: 70
    3. Within 4 hours of it: 40
    4. Anywhere else: 20

    Raises InvalidHour for anything that is not an integer in 0-23.
    """
    if isinstance(hour, bool) or not isinstance(hour, int) or not 0 <= hour <= 23:
        raise InvalidHour(f"Hour must be an integer between 0 and 23, got {hour!r}")

    chronotype = Chronotype.from_value(chronotype)
    if chronotype == Chronotype.NIGHT:
        return _night_score(hour)

    start, end = CHRONOTYPE_HOURS[chronotype]
    if start <= hour < end:
        return PEAK_SCORE
    if start - 2 <= hour < end + 2:
        return GOOD_SCORE
    if start - 4 <= hour < end + 4:
        return FAIR_SCORE
    return POOR_SCORE


def _night_score(hour: int) -> int:
    # Window is 21:00-02:00, so every tier wraps around midnight
    if hour >= 21 or hour < 2:
        return PEAK_SCORE
    if hour >= 19 or hour < 4:
        return GOOD_SCORE
    if hour >= 17 or hour < 6:
        return FAIR_SCORE
    return POOR_SCORE
