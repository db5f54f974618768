# app/schemas/activity_log_schema.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.activity_type import ActivityType

MAX_SIDE_MINUTES = 180
MAX_VOLUME_ML = 1000
MAX_NOTES_LENGTH = 1000


def clean_notes(value):
    """Blank notes are stored as NULL."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def to_local_naive(value):
    """Times are stored as naive local wall-clock times."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


class ActivityLogCreate(BaseModel):
    activity_type: ActivityType
    start_time: datetime
    left_duration: int = Field(0, ge=0, le=MAX_SIDE_MINUTES)
    right_duration: int = Field(0, ge=0, le=MAX_SIDE_MINUTES)
    volume_ml: int = Field(0, ge=0, le=MAX_VOLUME_ML)
    notes: Optional[str] = Field(None, max_length=MAX_NOTES_LENGTH)

    @field_validator("notes")
    @classmethod
    def strip_notes(cls, value):
        return clean_notes(value)

    @field_validator("start_time")
    @classmethod
    def local_start_time(cls, value):
        return to_local_naive(value)

    @model_validator(mode="after")
    def check_measurements(self):
        # Same rules as the entry forms: save is disabled until these hold
        if self.activity_type.uses_durations and self.left_duration + self.right_duration <= 0:
            raise ValueError("Breastfeeding needs a duration on at least one side")
        if self.activity_type.uses_volume and self.volume_ml <= 0:
            raise ValueError(f"{self.activity_type.display_name} needs a volume in mL")
        return self


class ActivityLogUpdate(BaseModel):
    start_time: Optional[datetime] = None
    left_duration: Optional[int] = Field(None, ge=0, le=MAX_SIDE_MINUTES)
    right_duration: Optional[int] = Field(None, ge=0, le=MAX_SIDE_MINUTES)
    volume_ml: Optional[int] = Field(None, ge=0, le=MAX_VOLUME_ML)
    notes: Optional[str] = Field(None, max_length=MAX_NOTES_LENGTH)

    @field_validator("start_time")
    @classmethod
    def local_start_time(cls, value):
        return to_local_naive(value)


class ActivityLogRead(BaseModel):
    id: str
    activity_type: ActivityType
    display_name: str
    start_time: datetime
    left_duration: int
    right_duration: int
    total_duration: int
    volume_ml: int
    notes: Optional[str]
    summary: str
    caregiver_id: str
    caregiver_name: str
    created_at: Optional[datetime]

    @classmethod
    def from_log(cls, log):
        return cls(
            id=log.id,
            activity_type=log.type,
            display_name=log.type.display_name,
            start_time=log.start_time,
            left_duration=log.left_duration,
            right_duration=log.right_duration,
            total_duration=log.total_duration,
            volume_ml=log.volume_ml,
            notes=log.notes,
            summary=log.summary,
            caregiver_id=log.caregiver_id,
            caregiver_name=log.caregiver_name,
            created_at=log.created_at,
        )


class HourRange(BaseModel):
    start: int
    end: int


class DaySummary(BaseModel):
    log_count: int
    breastfeeding_minutes: int
    formula_ml: int


class TimelineResponse(BaseModel):
    date: str
    hour_range: HourRange
    summary: DaySummary
    logs: list[ActivityLogRead]
