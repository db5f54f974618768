# app/models/caregiver_model.py

import uuid
from datetime import datetime

from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from config.database import Base


class Caregiver(Base):
    __tablename__ = "caregivers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    is_current_user = Column(Boolean, default=False, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.now)

    logs = relationship("ActivityLog", back_populates="caregiver", cascade="all, delete")
    shares = relationship("CaregiverShare", back_populates="caregiver", cascade="all, delete")

    @property
    def display_name(self) -> str:
        return self.name or "Unknown"
