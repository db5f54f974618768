from datetime import datetime

import pytest

from app.models.activity_log_model import ActivityLog
from app.models.activity_type import ActivityType


def make(activity_type, **fields):
    return ActivityLog(
        activity_type=activity_type,
        start_time=datetime(2026, 3, 15, 9, 30),
        left_duration=fields.get("left_duration", 0),
        right_duration=fields.get("right_duration", 0),
        volume_ml=fields.get("volume_ml", 0),
        notes=fields.get("notes"),
    )


def test_unknown_type_reads_as_breastfeeding():
    assert ActivityType.parse("bottle") is ActivityType.BREASTFEEDING
    assert ActivityType.parse(None) is ActivityType.BREASTFEEDING
    assert ActivityType.parse("peePoop") is ActivityType.PEE_POOP


@pytest.mark.parametrize("activity_type, durations, volume", [
    (ActivityType.BREASTFEEDING, True, False),
    (ActivityType.FORMULA, False, True),
    (ActivityType.EBM, False, True),
    (ActivityType.PUMPING, False, True),
    (ActivityType.SLEEP, False, False),
    (ActivityType.PEE_POOP, False, False),
])
def test_numeric_field_per_type(activity_type, durations, volume):
    assert activity_type.uses_durations is durations
    assert activity_type.uses_volume is volume


def test_diaper_and_feeding_groups():
    assert {t for t in ActivityType if t.is_diaper} == {
        ActivityType.PEE, ActivityType.POOP, ActivityType.PEE_POOP
    }
    assert ActivityType.PUMPING.is_feeding is False
    assert ActivityType.EBM.is_feeding is True


def test_formatted_duration():
    assert make("breastfeeding", left_duration=10, right_duration=5).formatted_duration == "15m"
    assert make("breastfeeding", left_duration=40, right_duration=25).formatted_duration == "1h 5m"


def test_breastfeeding_summary():
    assert make("breastfeeding", left_duration=10, right_duration=5).summary == "L: 10m, R: 5m"
    assert make("breastfeeding", right_duration=7).summary == "R: 7m"
    assert make("breastfeeding").summary == "No duration"


def test_volume_and_event_summaries():
    assert make("formula", volume_ml=120).summary == "120 mL"
    assert make("sleep").summary == "Fell asleep"
    assert make("wakeUp", notes="cranky").summary == "cranky"
    assert make("peePoop").summary == "Pee & Poop"


def test_apply_measurements_zeroes_fields_that_do_not_apply():
    log = make("formula")
    log.apply_measurements(left_duration=10, right_duration=10, volume_ml=90)
    assert (log.left_duration, log.right_duration, log.volume_ml) == (0, 0, 90)

    log = make("breastfeeding", volume_ml=50)
    log.apply_measurements(left_duration=12, right_duration=None, volume_ml=90)
    assert (log.left_duration, log.right_duration, log.volume_ml) == (12, 0, 0)

    log = make("poop", left_duration=3, volume_ml=20)
    log.apply_measurements(left_duration=5, right_duration=5, volume_ml=5)
    assert (log.left_duration, log.right_duration, log.volume_ml) == (0, 0, 0)
