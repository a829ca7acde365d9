from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, Field


class PropertyCreate(BaseModel):
    label: str
    total_rooms: int = Field(gt=0)
    owner_id: str | None = None
    room_occupant_limit: int | None = Field(default=None, gt=0)


class PropertyResize(BaseModel):
    total_rooms: int = Field(gt=0)


class PropertyRead(BaseModel):
    id: str
    label: str
    total_rooms: int
    owner_id: str | None = None
    room_occupant_limit: int | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
