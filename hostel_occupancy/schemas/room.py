from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel


class OccupantRead(BaseModel):
    assignment_id: str
    tenant_id: str
    tenant_name: str = ""
    floor: int | None = None
    assigned_at: datetime

    model_config = {"from_attributes": True}


class RoomRead(BaseModel):
    room_number: int
    state: str  # vacant | occupied
    occupants: list[OccupantRead] = []

    model_config = {"from_attributes": True}


class OrphanedAssignmentRead(BaseModel):
    room_number: int
    occupant: OccupantRead
    warning: str

    model_config = {"from_attributes": True}


class OccupancyRead(BaseModel):
    property_id: str
    total_rooms: int
    rooms: list[RoomRead]
    orphaned: list[OrphanedAssignmentRead] = []

    model_config = {"from_attributes": True}


class FilledRoomRead(BaseModel):
    room_number: int
    occupants: list[OccupantRead]

    model_config = {"from_attributes": True}


class OccupancySummaryRead(BaseModel):
    total_rooms: int
    filled_rooms: int
    available_rooms: int
    tenants: int
    orphaned: int
    property_count: int = 1

    model_config = {"from_attributes": True}
