from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from app.models.activity_log_model import ActivityLog
from app.models.caregiver_model import Caregiver
from app.schemas.caregiver_schema import CaregiverName, CaregiverResponse, SetupStatus, CaregiverLogCount
from app.dependencies.current_caregiver import find_current_caregiver, get_current_caregiver
from config.database import get_db
from config.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["caregivers"])


# POST: first-run setup, creates the local operator
@router.post("/setup", response_model=CaregiverResponse, status_code=201)
def complete_setup(data: CaregiverName, db: Session = Depends(get_db)):
    """
    Creates the caregiver that represents this device's operator.
    Every other caregiver loses the current-user flag.
    """
    caregiver = Caregiver(name=data.name, is_current_user=True)
    try:
        db.query(Caregiver).filter(Caregiver.is_current_user.is_(True)).update(
            {Caregiver.is_current_user: False}, synchronize_session=False
        )
        db.add(caregiver)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to save caregiver: %s", e)
        raise HTTPException(status_code=500, detail="Could not save caregiver.")

    db.refresh(caregiver)
    return caregiver


@router.get("/setup/status", response_model=SetupStatus)
def setup_status(db: Session = Depends(get_db)):
    caregiver = find_current_caregiver(db)
    return {
        "has_completed_setup": caregiver is not None,
        "current_caregiver_id": caregiver.id if caregiver else None,
    }


# GET: all caregivers, oldest first
@router.get("/caregivers", response_model=List[CaregiverResponse])
def list_caregivers(db: Session = Depends(get_db)):
    try:
        return db.query(Caregiver).order_by(Caregiver.created_at.asc()).all()
    except SQLAlchemyError as e:
        logger.error("Failed to fetch caregivers: %s", e)
        return []


@router.get("/caregivers/me", response_model=CaregiverResponse)
def get_me(current: Caregiver = Depends(get_current_caregiver)):
    return current


@router.get("/caregivers/log-counts", response_model=List[CaregiverLogCount])
def caregiver_log_counts(db: Session = Depends(get_db)):
    results = (
        db.query(
            Caregiver.id.label("caregiver_id"),
            Caregiver.name.label("name"),
            func.count(ActivityLog.id).label("log_count"),
        )
        .outerjoin(ActivityLog, ActivityLog.caregiver_id == Caregiver.id)
        .group_by(Caregiver.id, Caregiver.name, Caregiver.created_at)
        .order_by(Caregiver.created_at.asc())
        .all()
    )

    return [
        {
            "caregiver_id": row.caregiver_id,
            "name": row.name,
            "log_count": row.log_count,
        }
        for row in results
    ]


# PUT: rename a caregiver
@router.put("/caregivers/{caregiver_id}", response_model=CaregiverResponse)
def rename_caregiver(caregiver_id: str, data: CaregiverName, db: Session = Depends(get_db)):
    caregiver = db.get(Caregiver, caregiver_id)
    if not caregiver:
        raise HTTPException(status_code=404, detail="Caregiver not found.")

    caregiver.name = data.name
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to rename caregiver %s: %s", caregiver_id, e)
        raise HTTPException(status_code=500, detail="Could not save caregiver.")

    db.refresh(caregiver)
    return caregiver
