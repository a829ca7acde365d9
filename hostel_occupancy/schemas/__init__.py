"""Pydantic request/response schemas."""

from hostel_occupancy.schemas.property import PropertyCreate, PropertyRead, PropertyResize
from hostel_occupancy.schemas.assignment import AssignmentCreate, AssignmentRead, AssignmentTransfer
from hostel_occupancy.schemas.room import (
    OccupantRead, RoomRead, OrphanedAssignmentRead, OccupancyRead,
    FilledRoomRead, OccupancySummaryRead,
)

__all__ = [
    "PropertyCreate", "PropertyRead", "PropertyResize",
    "AssignmentCreate", "AssignmentRead", "AssignmentTransfer",
    "OccupantRead", "RoomRead", "OrphanedAssignmentRead", "OccupancyRead",
    "FilledRoomRead", "OccupancySummaryRead",
]
