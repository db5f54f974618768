# app/utils/stats_calculator.py

from datetime import date, datetime, time, timedelta
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.activity_log_model import ActivityLog
from app.models.activity_type import ActivityType
from config.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_HOUR_RANGE = (6, 22)


def day_bounds(day: date):
    # [start of day, start of next day)
    start = datetime.combine(day, time.min)
    return start, start + timedelta(days=1)


def fetch_logs_between(db: Session, start: datetime, end: datetime) -> List[ActivityLog]:
    try:
        return (
            db.query(ActivityLog)
            .filter(ActivityLog.start_time >= start, ActivityLog.start_time < end)
            .order_by(ActivityLog.start_time.desc())
            .all()
        )
    except SQLAlchemyError as e:
        logger.error("Failed to fetch logs between %s and %s: %s", start, end, e)
        return []


def fetch_logs_for_day(db: Session, day: date) -> List[ActivityLog]:
    start, end = day_bounds(day)
    return fetch_logs_between(db, start, end)


def fetch_recent_logs(db: Session, limit: int = 5) -> List[ActivityLog]:
    try:
        return (
            db.query(ActivityLog)
            .order_by(ActivityLog.start_time.desc())
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as e:
        logger.error("Failed to fetch recent logs: %s", e)
        return []


def total_breastfeeding_minutes(logs) -> int:
    return sum(log.total_duration for log in logs if log.type is ActivityType.BREASTFEEDING)


def total_volume_ml(logs, activity_type: ActivityType) -> int:
    return sum(log.volume_ml for log in logs if log.type is activity_type)


def count_matching(logs, predicate) -> int:
    return sum(1 for log in logs if predicate(log.type))


def summarize_logs(logs, day: date) -> dict:
    """
    Reduces one day's entries into the daily summary:
    - breastfeeding_minutes: left + right of every breastfeeding entry
    - formula_ml / ebm_ml / pumping_ml: volume per type
    - sleep_count, wake_count, diaper_count (pee, poop and combined)
    - feeding_count and log_count
    """
    return {
        "date": day.isoformat(),
        "breastfeeding_minutes": total_breastfeeding_minutes(logs),
        "formula_ml": total_volume_ml(logs, ActivityType.FORMULA),
        "ebm_ml": total_volume_ml(logs, ActivityType.EBM),
        "pumping_ml": total_volume_ml(logs, ActivityType.PUMPING),
        "sleep_count": count_matching(logs, lambda t: t.is_sleep),
        "wake_count": count_matching(logs, lambda t: t is ActivityType.WAKE_UP),
        "diaper_count": count_matching(logs, lambda t: t.is_diaper),
        "feeding_count": count_matching(logs, lambda t: t.is_feeding),
        "log_count": len(logs),
    }


def generate_daily_summary(db: Session, day: date) -> dict:
    return summarize_logs(fetch_logs_for_day(db, day), day)


WEEKLY_SERIES = {
    "breastfeeding": "breastfeeding_minutes",
    "formula": "formula_ml",
    "ebm": "ebm_ml",
    "pumping": "pumping_ml",
    "sleep": "sleep_count",
    "diapers": "diaper_count",
}


def generate_weekly_stats(db: Session, end_day: date) -> dict:
    # Seven points, oldest first, ending on end_day
    days = [end_day - timedelta(days=offset) for offset in range(6, -1, -1)]
    summaries = [generate_daily_summary(db, day) for day in days]

    result = {
        "start_date": days[0].isoformat(),
        "end_date": end_day.isoformat(),
    }
    for series, key in WEEKLY_SERIES.items():
        result[series] = [
            {"date": day.isoformat(), "day_label": day.strftime("%a"), "value": summary[key]}
            for day, summary in zip(days, summaries)
        ]

    breastfeeding_total = sum(s["breastfeeding_minutes"] for s in summaries)
    result["totals"] = {
        "breastfeeding_minutes": breastfeeding_total,
        "formula_ml": sum(s["formula_ml"] for s in summaries),
        "ebm_ml": sum(s["ebm_ml"] for s in summaries),
        "pumping_ml": sum(s["pumping_ml"] for s in summaries),
        "sleep_count": sum(s["sleep_count"] for s in summaries),
        "diaper_count": sum(s["diaper_count"] for s in summaries),
        "log_count": sum(s["log_count"] for s in summaries),
        "breastfeeding_formatted": format_minutes(breastfeeding_total),
    }
    return result


def hour_range(logs):
    """Time-axis bounds for a day: one hour of padding around the entries."""
    hours = [log.start_time.hour for log in logs]
    if not hours:
        return DEFAULT_HOUR_RANGE
    return max(min(hours) - 1, 0), min(max(hours) + 1, 23)


def format_minutes(minutes: int) -> str:
    if minutes >= 60:
        return f"{minutes // 60}h {minutes % 60}m"
    return f"{minutes} min"


def time_since(last_time: Optional[datetime], now: Optional[datetime] = None) -> str:
    if last_time is None:
        return "No logs yet"

    now = now or datetime.now()
    seconds = max(int((now - last_time).total_seconds()), 0)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60

    if hours > 0:
        return f"{hours}h {minutes}m ago"
    return f"{minutes}m ago"
