# app/models/app_setting_model.py

from sqlalchemy import Column, String
from config.database import Base

LANGUAGE_KEY = "selectedLanguage"


class AppSetting(Base):
    __tablename__ = "app_settings"

    key = Column(String(64), primary_key=True)
    value = Column(String, nullable=False, default="")
