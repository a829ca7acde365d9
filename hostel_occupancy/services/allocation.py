"""Allocation Guard: validated, serialized assignment writes.

``assign`` checks, in order and each with its own failure:

1. the property exists                       -> NotFoundError
2. the room number is within 1..total_rooms  -> OutOfRangeError
3. the tenant holds no active slot here      -> AlreadyAssignedError
4. the room is below its occupant cap        -> RoomFullError

The checks and the store write happen under the property's lock and commit
before the lock is released, so two racing requests cannot both pass
validation. The store's unique index on active (property, tenant) pairs
backs this up across processes and surfaces as ConflictError.
"""

from __future__ import annotations

import logging

from hostel_occupancy.errors import (
    OutOfRangeError, AlreadyAssignedError, RoomFullError, AlreadyVacatedError,
)
from hostel_occupancy.models import Assignment
from hostel_occupancy.services.assignment_store import AssignmentStore
from hostel_occupancy.services.locks import PropertyLockRegistry, property_locks
from hostel_occupancy.services.occupancy import OccupancyDeriver
from hostel_occupancy.services.registry import PropertyRegistry

logger = logging.getLogger(__name__)


class AllocationGuard:
    def __init__(
        self, registry: PropertyRegistry, store: AssignmentStore,
        deriver: OccupancyDeriver | None = None,
        locks: PropertyLockRegistry = property_locks,
    ):
        self.registry = registry
        self.store = store
        self.deriver = deriver or OccupancyDeriver(registry, store)
        self.locks = locks

    async def _check_room(self, property_id: str, room_number: int) -> None:
        total_rooms = await self.registry.get_capacity(property_id)
        if not 1 <= room_number <= total_rooms:
            raise OutOfRangeError(room_number, total_rooms)

    async def _check_not_full(self, property_id: str, room_number: int) -> None:
        limit = await self.registry.get_occupant_limit(property_id)
        if limit is None:
            return
        view = await self.deriver.rooms(property_id)
        if len(view.room(room_number).occupants) >= limit:
            raise RoomFullError(room_number, limit)

    async def assign(
        self, property_id: str, tenant_id: str, room_number: int,
        tenant_name: str = "", floor: int | None = None,
    ) -> Assignment:
        async with self.locks.hold(property_id):
            await self._check_room(property_id, room_number)
            existing = await self.store.find_active(property_id, tenant_id)
            if existing is not None:
                raise AlreadyAssignedError(tenant_id, property_id, existing.room_number)
            await self._check_not_full(property_id, room_number)
            assignment = await self.store.create(
                property_id, tenant_id, room_number,
                tenant_name=tenant_name, floor=floor,
            )
        logger.info(
            "Assigned tenant %s to room %d at property %s (assignment %s)",
            tenant_id, room_number, property_id, assignment.id,
        )
        return assignment

    async def unassign(self, assignment_id: str) -> Assignment:
        # The property is only known after the lookup; re-read under its lock
        target = await self.store.get(assignment_id)
        async with self.locks.hold(target.property_id):
            assignment = await self.store.vacate(assignment_id)
        logger.info(
            "Vacated assignment %s (tenant %s, room %d, property %s)",
            assignment.id, assignment.tenant_id, assignment.room_number, assignment.property_id,
        )
        return assignment

    async def transfer(self, assignment_id: str, room_number: int) -> Assignment:
        """Move an active tenant to another room of the same property.

        Returns the new active assignment; the old record is vacated in the
        same commit. Moving to the current room is a no-op.
        """
        target = await self.store.get(assignment_id)
        property_id = target.property_id
        async with self.locks.hold(property_id):
            current = await self.store.get(assignment_id)
            if not current.is_active:
                raise AlreadyVacatedError(assignment_id)
            await self._check_room(property_id, room_number)
            if current.room_number == room_number:
                return current
            await self._check_not_full(property_id, room_number)
            await self.store.vacate(assignment_id, commit=False)
            moved = await self.store.create(
                property_id, current.tenant_id, room_number,
                tenant_name=current.tenant_name, floor=current.floor,
            )
        logger.info(
            "Moved tenant %s from room %d to room %d at property %s",
            moved.tenant_id, current.room_number, room_number, property_id,
        )
        return moved
