"""Occupancy Deriver: per-room vacant/occupied view built from raw assignments.

The view is recomputed on every read from the property's capacity and its
active assignments. Nothing here is cached or stored; the dashboard
projections in ``projections.py`` all filter the same derived view.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from hostel_occupancy.models import Assignment
from hostel_occupancy.services.assignment_store import AssignmentStore
from hostel_occupancy.services.registry import PropertyRegistry

logger = logging.getLogger(__name__)

VACANT = "vacant"
OCCUPIED = "occupied"


@dataclass(frozen=True)
class Occupant:
    assignment_id: str
    tenant_id: str
    tenant_name: str
    floor: int | None
    assigned_at: datetime

    @classmethod
    def from_assignment(cls, a: Assignment) -> Occupant:
        return cls(
            assignment_id=a.id,
            tenant_id=a.tenant_id,
            tenant_name=a.tenant_name or "",
            floor=a.floor,
            assigned_at=a.created_at,
        )


@dataclass(frozen=True)
class RoomView:
    room_number: int
    occupants: tuple[Occupant, ...] = ()

    @property
    def state(self) -> str:
        return OCCUPIED if self.occupants else VACANT

    @property
    def is_vacant(self) -> bool:
        return not self.occupants


@dataclass(frozen=True)
class OrphanedAssignment:
    """Active assignment whose room number lies outside the property's range."""

    room_number: int
    occupant: Occupant
    warning: str


@dataclass(frozen=True)
class OccupancyView:
    property_id: str
    total_rooms: int
    rooms: tuple[RoomView, ...]
    orphaned: tuple[OrphanedAssignment, ...] = field(default=())

    def room(self, room_number: int) -> RoomView:
        if not 1 <= room_number <= self.total_rooms:
            raise IndexError(room_number)
        return self.rooms[room_number - 1]


def derive_rooms(
    property_id: str, total_rooms: int, assignments: Iterable[Assignment]
) -> OccupancyView:
    """Group active assignments into rooms 1..total_rooms.

    Rooms come out ascending; occupants keep assignment-creation order.
    Assignments numbered outside the range are returned as orphaned rather
    than dropped. Vacated records passed in are ignored.
    """
    active = sorted(
        (a for a in assignments if a.is_active),
        key=lambda a: (a.created_at, a.id),
    )
    groups: dict[int, list[Occupant]] = defaultdict(list)
    orphaned: list[OrphanedAssignment] = []

    for a in active:
        if 1 <= a.room_number <= total_rooms:
            groups[a.room_number].append(Occupant.from_assignment(a))
        else:
            orphaned.append(OrphanedAssignment(
                room_number=a.room_number,
                occupant=Occupant.from_assignment(a),
                warning=f"Room {a.room_number} is outside 1..{total_rooms}",
            ))

    if orphaned:
        logger.warning(
            "Property %s has %d orphaned assignment(s) beyond room %d",
            property_id, len(orphaned), total_rooms,
        )

    rooms = tuple(
        RoomView(room_number=n, occupants=tuple(groups.get(n, ())))
        for n in range(1, total_rooms + 1)
    )
    orphaned.sort(key=lambda o: (o.room_number, o.occupant.assigned_at))
    return OccupancyView(
        property_id=property_id, total_rooms=total_rooms,
        rooms=rooms, orphaned=tuple(orphaned),
    )


class OccupancyDeriver:
    def __init__(self, registry: PropertyRegistry, store: AssignmentStore):
        self.registry = registry
        self.store = store

    async def rooms(self, property_id: str) -> OccupancyView:
        # Capacity and occupants come from one statement; separate reads could
        # straddle a concurrent resize+assign and mix two states
        total_rooms, assignments = await self.store.snapshot(property_id)
        return derive_rooms(property_id, total_rooms, assignments)
