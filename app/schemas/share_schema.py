# app/schemas/share_schema.py

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

SharePermission = Literal["readWrite", "readOnly"]


class AccountStatusResponse(BaseModel):
    status: str
    available: bool


class ShareRequest(BaseModel):
    permission: SharePermission = "readWrite"


class ShareResponse(BaseModel):
    id: str
    caregiver_id: str
    title: str
    url: str
    permission: str
    created_at: Optional[datetime]

    model_config = ConfigDict(from_attributes=True)


class AcceptShareRequest(BaseModel):
    token: str


class AcceptShareResponse(BaseModel):
    caregiver_id: str
    name: str
    permission: str
