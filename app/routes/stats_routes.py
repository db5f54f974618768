from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from datetime import date
from typing import Optional

from config.database import get_db
from app.schemas.activity_log_schema import ActivityLogRead
from app.schemas.stats_schema import DailyStats, WeeklyStats, HomeSummary
from app.utils.stats_calculator import (
    fetch_recent_logs,
    generate_daily_summary,
    generate_weekly_stats,
    time_since,
)

router = APIRouter(prefix="/stats", tags=["statistics"])


@router.get("/daily", response_model=DailyStats)
def daily_stats(day: Optional[date] = Query(None, alias="date"), db: Session = Depends(get_db)):
    """
    Totals for one day (today when no date is given), recomputed from the
    entries in [start of day, start of next day).
    """
    return generate_daily_summary(db, day or date.today())


@router.get("/weekly", response_model=WeeklyStats)
def weekly_stats(end: Optional[date] = Query(None), db: Session = Depends(get_db)):
    """
    Seven daily points per metric, oldest first, ending on `end` (today by default),
    and the weekly totals.
    """
    return generate_weekly_stats(db, end or date.today())


@router.get("/home", response_model=HomeSummary)
def home_summary(db: Session = Depends(get_db)):
    today = generate_daily_summary(db, date.today())
    recent = fetch_recent_logs(db, limit=5)
    last_log_time = recent[0].start_time if recent else None

    return {
        "breastfeeding_minutes": today["breastfeeding_minutes"],
        "formula_ml": today["formula_ml"],
        "sleep_count": today["sleep_count"],
        "diaper_count": today["diaper_count"],
        "last_log_time": last_log_time,
        "time_since_last_log": time_since(last_log_time),
        "recent_logs": [ActivityLogRead.from_log(log) for log in recent],
    }
