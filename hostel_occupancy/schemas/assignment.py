from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, Field


class AssignmentCreate(BaseModel):
    tenant_id: str = Field(min_length=1)
    room_number: int
    tenant_name: str = ""
    floor: int | None = None


class AssignmentTransfer(BaseModel):
    room_number: int


class AssignmentRead(BaseModel):
    id: str
    property_id: str
    tenant_id: str
    tenant_name: str = ""
    room_number: int
    floor: int | None = None
    status: str  # active | vacated
    created_at: datetime
    vacated_at: datetime | None = None

    model_config = {"from_attributes": True}
