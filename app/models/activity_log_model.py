# app/models/activity_log_model.py

import uuid
from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from config.database import Base

from app.models.activity_type import ActivityType


class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    caregiver_id = Column(String(36), ForeignKey("caregivers.id", ondelete="CASCADE"), nullable=False, index=True)
    activity_type = Column(String(20), nullable=False)
    start_time = Column(DateTime, nullable=False, index=True)
    left_duration = Column(Integer, nullable=False, default=0)
    right_duration = Column(Integer, nullable=False, default=0)
    volume_ml = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.now)

    caregiver = relationship("Caregiver", back_populates="logs")

    @property
    def type(self) -> ActivityType:
        return ActivityType.parse(self.activity_type)

    @property
    def total_duration(self) -> int:
        return (self.left_duration or 0) + (self.right_duration or 0)

    @property
    def formatted_duration(self) -> str:
        total = self.total_duration
        if total >= 60:
            return f"{total // 60}h {total % 60}m"
        return f"{total}m"

    @property
    def formatted_volume(self) -> str:
        return f"{self.volume_ml or 0} mL"

    @property
    def caregiver_name(self) -> str:
        return self.caregiver.display_name if self.caregiver else ""

    @property
    def summary(self) -> str:
        activity = self.type
        if activity.uses_durations:
            parts = []
            if self.left_duration:
                parts.append(f"L: {self.left_duration}m")
            if self.right_duration:
                parts.append(f"R: {self.right_duration}m")
            return ", ".join(parts) if parts else "No duration"
        if activity.uses_volume:
            return self.formatted_volume
        return self.notes or activity.default_summary

    def apply_measurements(self, left_duration=None, right_duration=None, volume_ml=None):
        """
        Sets the numeric fields that apply to this entry's type and zeroes the rest.
        None keeps the current value.
        """
        activity = self.type
        if activity.uses_durations:
            if left_duration is not None:
                self.left_duration = left_duration
            if right_duration is not None:
                self.right_duration = right_duration
        else:
            self.left_duration = 0
            self.right_duration = 0

        if activity.uses_volume:
            if volume_ml is not None:
                self.volume_ml = volume_ml
        else:
            self.volume_ml = 0
