from fastapi import APIRouter, Depends, HTTPException, Body, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from datetime import date
from typing import List, Optional, Union

from app.models.activity_log_model import ActivityLog
from app.models.caregiver_model import Caregiver
from app.schemas.activity_log_schema import (
    ActivityLogCreate,
    ActivityLogUpdate,
    ActivityLogRead,
    TimelineResponse,
    clean_notes,
)
from app.dependencies.current_caregiver import get_current_caregiver
from app.utils.stats_calculator import (
    fetch_logs_for_day,
    fetch_recent_logs,
    hour_range,
    total_breastfeeding_minutes,
    total_volume_ml,
)
from app.models.activity_type import ActivityType
from config.database import get_db
from config.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/logs", tags=["activity logs"])


def _get_log_or_404(db: Session, log_id: str) -> ActivityLog:
    log = db.get(ActivityLog, log_id)
    if not log:
        raise HTTPException(status_code=404, detail="Log not found.")
    return log


def _commit(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to %s: %s", action, e)
        raise HTTPException(status_code=500, detail=f"Could not {action}.")


@router.post("", status_code=201, response_model=List[ActivityLogRead])
def create_logs(
    # The body can be a single entry or a list of entries
    logs: Union[ActivityLogCreate, List[ActivityLogCreate]] = Body(...),
    db: Session = Depends(get_db),
    current: Caregiver = Depends(get_current_caregiver),
):
    """
    Creates one entry, or a batch of entries, owned by the current caregiver.
    Numeric fields that do not apply to an entry's type are stored as zero.
    """
    log_list = logs if isinstance(logs, list) else [logs]

    created = []
    for data in log_list:
        new_log = ActivityLog(
            caregiver_id=current.id,
            activity_type=data.activity_type.value,
            start_time=data.start_time,
            notes=data.notes,
        )
        new_log.apply_measurements(data.left_duration, data.right_duration, data.volume_ml)
        db.add(new_log)
        created.append(new_log)

    _commit(db, "save log")

    for log in created:
        db.refresh(log)
        logger.info("Saved %s log %s", log.activity_type, log.id)
    return [ActivityLogRead.from_log(log) for log in created]


@router.get("", response_model=List[ActivityLogRead])
def list_logs(
    day: Optional[date] = Query(None, alias="date"),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
):
    if day is not None:
        logs = fetch_logs_for_day(db, day)
        if limit:
            logs = logs[:limit]
        return [ActivityLogRead.from_log(log) for log in logs]

    try:
        query = db.query(ActivityLog).order_by(ActivityLog.start_time.desc())
        if limit:
            query = query.limit(limit)
        logs = query.all()
    except SQLAlchemyError as e:
        logger.error("Failed to fetch logs: %s", e)
        logs = []
    return [ActivityLogRead.from_log(log) for log in logs]


@router.get("/recent", response_model=List[ActivityLogRead])
def recent_logs(limit: int = Query(5, ge=1, le=100), db: Session = Depends(get_db)):
    return [ActivityLogRead.from_log(log) for log in fetch_recent_logs(db, limit)]


@router.get("/timeline", response_model=TimelineResponse)
def day_timeline(day: Optional[date] = Query(None, alias="date"), db: Session = Depends(get_db)):
    """
    Entries of one day in chronological order, with the hour range of the
    time axis and the day's feeding summary.
    """
    day = day or date.today()
    logs = sorted(fetch_logs_for_day(db, day), key=lambda log: log.start_time)
    start_hour, end_hour = hour_range(logs)

    return {
        "date": day.isoformat(),
        "hour_range": {"start": start_hour, "end": end_hour},
        "summary": {
            "log_count": len(logs),
            "breastfeeding_minutes": total_breastfeeding_minutes(logs),
            "formula_ml": total_volume_ml(logs, ActivityType.FORMULA),
        },
        "logs": [ActivityLogRead.from_log(log) for log in logs],
    }


@router.get("/{log_id}", response_model=ActivityLogRead)
def get_log(log_id: str, db: Session = Depends(get_db)):
    return ActivityLogRead.from_log(_get_log_or_404(db, log_id))


@router.put("/{log_id}", response_model=ActivityLogRead)
def update_log(log_id: str, log_update: ActivityLogUpdate, db: Session = Depends(get_db)):
    # Type and owner never change; only time, measurements and notes
    log = _get_log_or_404(db, log_id)

    log.start_time = log_update.start_time or log.start_time
    log.apply_measurements(log_update.left_duration, log_update.right_duration, log_update.volume_ml)
    if "notes" in log_update.model_fields_set:
        log.notes = clean_notes(log_update.notes)

    _commit(db, "update log")
    db.refresh(log)
    return ActivityLogRead.from_log(log)


@router.delete("/{log_id}")
def delete_log(log_id: str, db: Session = Depends(get_db)):
    log = _get_log_or_404(db, log_id)

    db.delete(log)
    _commit(db, "delete log")

    return {"msg": "Log deleted.", "log_id": log_id}
