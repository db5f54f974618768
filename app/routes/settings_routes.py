from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.app_setting_model import AppSetting, LANGUAGE_KEY
from app.schemas.settings_schema import LanguageSetting, AboutResponse
from config.database import get_db
from config.logging_config import get_logger
from config.settings import APP_NAME, APP_VERSION

logger = get_logger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/language", response_model=LanguageSetting)
def get_language(db: Session = Depends(get_db)):
    setting = db.get(AppSetting, LANGUAGE_KEY)
    return {"language": setting.value if setting else ""}


@router.put("/language", response_model=LanguageSetting)
def set_language(data: LanguageSetting, db: Session = Depends(get_db)):
    setting = db.get(AppSetting, LANGUAGE_KEY)
    if setting is None:
        setting = AppSetting(key=LANGUAGE_KEY)
        db.add(setting)
    setting.value = data.language

    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Failed to save language preference: %s", e)
        raise HTTPException(status_code=500, detail="Could not save language preference.")

    return {"language": setting.value}


@router.get("/about", response_model=AboutResponse)
def about():
    return {"name": APP_NAME, "version": APP_VERSION}
