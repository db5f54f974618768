from datetime import date, datetime, timedelta

from app.utils.stats_calculator import (
    day_bounds,
    format_minutes,
    generate_daily_summary,
    generate_weekly_stats,
    hour_range,
    time_since,
)

DAY = date(2026, 3, 15)


def seed_day(make_log):
    make_log("breastfeeding", datetime(2026, 3, 15, 0, 0), left_duration=10, right_duration=5)
    make_log("breastfeeding", datetime(2026, 3, 15, 6, 30), left_duration=12)
    make_log("formula", datetime(2026, 3, 15, 9, 0), volume_ml=90)
    make_log("formula", datetime(2026, 3, 15, 12, 0), volume_ml=120)
    make_log("ebm", datetime(2026, 3, 15, 15, 0), volume_ml=60)
    make_log("pumping", datetime(2026, 3, 15, 16, 0), volume_ml=150)
    make_log("sleep", datetime(2026, 3, 15, 13, 0))
    make_log("wakeUp", datetime(2026, 3, 15, 14, 0))
    make_log("pee", datetime(2026, 3, 15, 10, 0))
    make_log("poop", datetime(2026, 3, 15, 11, 0))
    make_log("peePoop", datetime(2026, 3, 15, 23, 59, 59))
    # Outside the window on both sides
    make_log("formula", datetime(2026, 3, 14, 23, 59, 59), volume_ml=500)
    make_log("breastfeeding", datetime(2026, 3, 16, 0, 0), left_duration=30)


def test_day_bounds_are_half_open():
    start, end = day_bounds(DAY)
    assert start == datetime(2026, 3, 15)
    assert end == datetime(2026, 3, 16)


def test_daily_summary_sums_only_the_day_window(db, make_log):
    seed_day(make_log)

    assert generate_daily_summary(db, DAY) == {
        "date": "2026-03-15",
        "breastfeeding_minutes": 27,
        "formula_ml": 210,
        "ebm_ml": 60,
        "pumping_ml": 150,
        "sleep_count": 1,
        "wake_count": 1,
        "diaper_count": 3,
        "feeding_count": 5,
        "log_count": 11,
    }


def test_empty_day(db):
    summary = generate_daily_summary(db, DAY)
    assert summary["log_count"] == 0
    assert summary["breastfeeding_minutes"] == 0


def test_weekly_series_oldest_first(db, make_log):
    seed_day(make_log)
    make_log("formula", datetime(2026, 3, 10, 8, 0), volume_ml=40)
    # Before the seven-day window
    make_log("formula", datetime(2026, 3, 8, 8, 0), volume_ml=1000)

    week = generate_weekly_stats(db, date(2026, 3, 16))

    assert week["start_date"] == "2026-03-10"
    assert week["end_date"] == "2026-03-16"
    assert [p["date"] for p in week["formula"]] == [
        (date(2026, 3, 10) + timedelta(days=i)).isoformat() for i in range(7)
    ]
    assert [p["value"] for p in week["formula"]] == [40, 0, 0, 0, 500, 210, 0]
    assert week["formula"][0]["day_label"] == "Tue"
    assert [p["value"] for p in week["breastfeeding"]][-2:] == [27, 30]

    totals = week["totals"]
    assert totals["formula_ml"] == sum(p["value"] for p in week["formula"])
    assert totals["breastfeeding_minutes"] == 57
    assert totals["breastfeeding_formatted"] == "57 min"
    assert totals["log_count"] == 14


def test_hour_range():
    class Log:
        def __init__(self, hour):
            self.start_time = datetime(2026, 3, 15, hour)

    assert hour_range([]) == (6, 22)
    assert hour_range([Log(0), Log(5)]) == (0, 6)
    assert hour_range([Log(9), Log(23)]) == (8, 23)


def test_format_minutes():
    assert format_minutes(45) == "45 min"
    assert format_minutes(125) == "2h 5m"


def test_time_since():
    now = datetime(2026, 3, 15, 12, 0)
    assert time_since(None, now) == "No logs yet"
    assert time_since(datetime(2026, 3, 15, 11, 48), now) == "12m ago"
    assert time_since(datetime(2026, 3, 15, 9, 55), now) == "2h 5m ago"


def test_daily_endpoint(client, make_log):
    seed_day(make_log)
    body = client.get("/api/stats/daily", params={"date": "2026-03-15"}).json()
    assert body["formula_ml"] == 210
    assert body["diaper_count"] == 3


def test_weekly_endpoint(client, make_log):
    seed_day(make_log)
    body = client.get("/api/stats/weekly", params={"end": "2026-03-15"}).json()
    assert len(body["sleep"]) == 7
    assert body["sleep"][-1]["value"] == 1
    assert body["totals"]["pumping_ml"] == 150


def test_home_summary(client, make_log):
    now = datetime.now().replace(microsecond=0)
    make_log("breastfeeding", now - timedelta(minutes=1), left_duration=10, right_duration=10)
    make_log("pee", now - timedelta(minutes=2))

    body = client.get("/api/stats/home").json()
    assert body["recent_logs"][0]["activity_type"] == "breastfeeding"
    assert body["time_since_last_log"].endswith("m ago")


def test_home_summary_without_logs(client):
    body = client.get("/api/stats/home").json()
    assert body["recent_logs"] == []
    assert body["last_log_time"] is None
    assert body["time_since_last_log"] == "No logs yet"
