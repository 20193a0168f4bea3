import pytest

from focus_scheduler.exceptions import InvalidHour
from focus_scheduler.models import Chronotype
from focus_scheduler.scheduling.scoring.chronotype_scoring import calculate_chronotype_score


# --- Tests for the windowed chronotypes ---

@pytest.mark.parametrize("hour, expected", [
    (9, 100), (11, 100),
    (7, 70), (8, 70), (12, 70), (13, 70),
    (5, 40), (6, 40), (14, 40), (15, 40),
    (0, 20), (4, 20), (16, 20), (23, 20),
])
def test_morning_tiers(hour, expected):
    assert calculate_chronotype_score(hour, Chronotype.MORNING) == expected


@pytest.mark.parametrize("hour, expected", [
    (5, 100), (8, 100),
    (3, 70), (10, 70),
    (1, 40), (11, 40), (12, 40),
    (0, 20), (13, 20),
])
def test_early_morning_tiers(hour, expected):
    assert calculate_chronotype_score(hour, Chronotype.EARLY_MORNING) == expected


@pytest.mark.parametrize("hour, expected", [
    (12, 100), (16, 100),
    (10, 70), (17, 70), (18, 70),
    (8, 40), (19, 40), (20, 40),
    (7, 20), (21, 20),
])
def test_afternoon_tiers(hour, expected):
    assert calculate_chronotype_score(hour, Chronotype.AFTERNOON) == expected


@pytest.mark.parametrize("hour, expected", [
    (17, 100), (20, 100),
    (15, 70), (22, 70),
    (13, 40), (23, 40),
    (0, 20), (12, 20),
])
def test_evening_tiers(hour, expected):
    assert calculate_chronotype_score(hour, Chronotype.EVENING) == expected


# --- Tests for the wraparound night window ---

@pytest.mark.parametrize("hour, expected", [
    (21, 100), (23, 100), (0, 100), (1, 100),
    (19, 70), (20, 70), (2, 70), (3, 70),
    (17, 40), (18, 40), (4, 40), (5, 40),
    (6, 20), (12, 20), (16, 20),
])
def test_night_wraps_past_midnight(hour, expected):
    assert calculate_chronotype_score(hour, Chronotype.NIGHT) == expected


def test_every_hour_scores_within_tiers():
    for chronotype in Chronotype:
        for hour in range(24):
            assert calculate_chronotype_score(hour, chronotype) in {20, 40, 70, 100}


# --- Tests for input handling ---

@pytest.mark.parametrize("hour", [-1, 24, 100, 1.5, True, "9", None])
def test_invalid_hour_rejected(hour):
    with pytest.raises(InvalidHour):
        calculate_chronotype_score(hour, Chronotype.MORNING)


def test_invalid_hour_is_a_value_error():
    with pytest.raises(ValueError):
        calculate_chronotype_score(25, Chronotype.NIGHT)


def test_string_chronotype_accepted():
    assert calculate_chronotype_score(10, "morning") == 100


def test_legacy_neutral_maps_to_afternoon():
    assert Chronotype.from_value("neutral") == Chronotype.AFTERNOON
    assert calculate_chronotype_score(14, "neutral") == 100


def test_from_value_normalizes_case_and_whitespace():
    assert Chronotype.from_value(" Evening ") == Chronotype.EVENING


def test_unknown_chronotype_rejected():
    with pytest.raises(ValueError):
        Chronotype.from_value("lark")
