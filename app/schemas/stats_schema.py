# app/schemas/stats_schema.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.schemas.activity_log_schema import ActivityLogRead


class DailyStats(BaseModel):
    date: str
    breastfeeding_minutes: int
    formula_ml: int
    ebm_ml: int
    pumping_ml: int
    sleep_count: int
    wake_count: int
    diaper_count: int
    feeding_count: int
    log_count: int


class DailyPoint(BaseModel):
    date: str
    day_label: str
    value: int


class WeeklyTotals(BaseModel):
    breastfeeding_minutes: int
    formula_ml: int
    ebm_ml: int
    pumping_ml: int
    sleep_count: int
    diaper_count: int
    log_count: int
    breastfeeding_formatted: str


class WeeklyStats(BaseModel):
    start_date: str
    end_date: str
    breastfeeding: List[DailyPoint]
    formula: List[DailyPoint]
    ebm: List[DailyPoint]
    pumping: List[DailyPoint]
    sleep: List[DailyPoint]
    diapers: List[DailyPoint]
    totals: WeeklyTotals


class HomeSummary(BaseModel):
    breastfeeding_minutes: int
    formula_ml: int
    sleep_count: int
    diaper_count: int
    last_log_time: Optional[datetime]
    time_since_last_log: str
    recent_logs: List[ActivityLogRead]
