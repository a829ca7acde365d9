"""Typed failures raised by the occupancy core.

Every failure is client-correctable and carries a stable ``code`` plus the
HTTP status the API layer renders it with.
"""

from __future__ import annotations


class OccupancyError(Exception):
    code = "occupancy_error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(OccupancyError):
    code = "not_found"
    status_code = 404

    @classmethod
    def for_property(cls, property_id: str) -> NotFoundError:
        return cls(f"Property {property_id} not found")

    @classmethod
    def for_assignment(cls, assignment_id: str) -> NotFoundError:
        return cls(f"Assignment {assignment_id} not found")


class OutOfRangeError(OccupancyError):
    code = "out_of_range"
    status_code = 422

    def __init__(self, room_number: int, total_rooms: int):
        super().__init__(f"Room {room_number} is outside 1..{total_rooms}")
        self.room_number = room_number
        self.total_rooms = total_rooms


class AlreadyAssignedError(OccupancyError):
    code = "already_assigned"
    status_code = 409

    def __init__(self, tenant_id: str, property_id: str, room_number: int):
        super().__init__(
            f"Tenant {tenant_id} already holds room {room_number} at property {property_id}"
        )
        self.tenant_id = tenant_id
        self.room_number = room_number


class RoomFullError(OccupancyError):
    code = "room_full"
    status_code = 409

    def __init__(self, room_number: int, limit: int):
        super().__init__(f"Room {room_number} is full ({limit} occupants max)")
        self.room_number = room_number
        self.limit = limit


class AlreadyVacatedError(OccupancyError):
    code = "already_vacated"
    status_code = 409

    def __init__(self, assignment_id: str):
        super().__init__(f"Assignment {assignment_id} was already vacated")
        self.assignment_id = assignment_id


class InvalidCapacityError(OccupancyError):
    code = "invalid_capacity"
    status_code = 422

    def __init__(self, total_rooms: int):
        super().__init__(f"A property needs at least one room, got {total_rooms}")
        self.total_rooms = total_rooms


class ConflictError(OccupancyError):
    """A concurrent write won the race at the storage layer."""

    code = "conflict"
    status_code = 409


class CapacityBelowOccupiedError(OccupancyError):
    code = "capacity_below_occupied"
    status_code = 409

    def __init__(self, total_rooms: int, highest_occupied: int):
        super().__init__(
            f"Cannot shrink to {total_rooms} rooms: room {highest_occupied} is occupied"
        )
        self.total_rooms = total_rooms
        self.highest_occupied = highest_occupied
