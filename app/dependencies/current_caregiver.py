from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.models.caregiver_model import Caregiver
from app.services.cloud_share_client import CloudShareClient
from config.database import get_db


def find_current_caregiver(db: Session):
    return db.query(Caregiver).filter(Caregiver.is_current_user.is_(True)).first()


def get_current_caregiver(db: Session = Depends(get_db)) -> Caregiver:
    caregiver = find_current_caregiver(db)
    if caregiver is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Setup not completed. Create your caregiver profile first."
        )
    return caregiver


def get_share_client() -> CloudShareClient:
    return CloudShareClient()
