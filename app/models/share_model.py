# app/models/share_model.py

import uuid
from datetime import datetime

from sqlalchemy import Column, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from config.database import Base


class CaregiverShare(Base):
    __tablename__ = "caregiver_shares"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    caregiver_id = Column(String(36), ForeignKey("caregivers.id", ondelete="CASCADE"), nullable=False, unique=True)
    title = Column(String, nullable=False)
    # Assigned by the share server; NULL until the share has been pushed
    url = Column(String, nullable=True)
    token = Column(Text, nullable=False)
    permission = Column(String(20), nullable=False, default="readWrite")
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    caregiver = relationship("Caregiver", back_populates="shares")
