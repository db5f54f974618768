from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional


class CaregiverName(BaseModel):
    name: str = Field(..., max_length=100)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        value = value.strip()
        if not value:
            raise ValueError("Name must not be empty")
        return value


class CaregiverResponse(BaseModel):
    id: str
    name: str
    is_current_user: bool
    created_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class SetupStatus(BaseModel):
    has_completed_setup: bool
    current_caregiver_id: Optional[str] = None


class CaregiverLogCount(BaseModel):
    caregiver_id: str
    name: str
    log_count: int
