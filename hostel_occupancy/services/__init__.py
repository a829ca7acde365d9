from hostel_occupancy.services.registry import PropertyRegistry, SqlPropertyRegistry
from hostel_occupancy.services.assignment_store import AssignmentStore, SqlAssignmentStore
from hostel_occupancy.services.occupancy import OccupancyDeriver, OccupancyView, RoomView, derive_rooms
from hostel_occupancy.services.allocation import AllocationGuard
from hostel_occupancy.services.projections import OccupancyProjections, OccupancySummary, FilledRoom

__all__ = [
    "PropertyRegistry", "SqlPropertyRegistry",
    "AssignmentStore", "SqlAssignmentStore",
    "OccupancyDeriver", "OccupancyView", "RoomView", "derive_rooms",
    "AllocationGuard",
    "OccupancyProjections", "OccupancySummary", "FilledRoom",
]
