"""Assignment Store: persistence of tenant-to-room records.

The store keeps records and the one-active-slot-per-tenant constraint; it
does not know about room capacity. Capacity is the Allocation Guard's job.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_occupancy.db import crud
from hostel_occupancy.errors import NotFoundError, AlreadyVacatedError, ConflictError
from hostel_occupancy.models import Assignment

logger = logging.getLogger(__name__)


class AssignmentStore(ABC):

    @abstractmethod
    async def list_active(self, property_id: str) -> list[Assignment]:
        """Active assignments for a property, oldest first."""
        ...

    @abstractmethod
    async def snapshot(self, property_id: str) -> tuple[int, list[Assignment]]:
        """Capacity and active assignments read together in one snapshot.

        Raises NotFoundError for an unknown property.
        """
        ...

    @abstractmethod
    async def find_active(self, property_id: str, tenant_id: str) -> Assignment | None:
        ...

    @abstractmethod
    async def get(self, assignment_id: str) -> Assignment:
        ...

    @abstractmethod
    async def create(
        self, property_id: str, tenant_id: str, room_number: int,
        tenant_name: str = "", floor: int | None = None, commit: bool = True,
    ) -> Assignment:
        ...

    @abstractmethod
    async def vacate(self, assignment_id: str, commit: bool = True) -> Assignment:
        """Mark an active assignment vacated."""
        ...


class SqlAssignmentStore(AssignmentStore):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_active(self, property_id: str) -> list[Assignment]:
        return await crud.list_active_assignments(self.db, property_id)

    async def snapshot(self, property_id: str) -> tuple[int, list[Assignment]]:
        prop, assignments = await crud.load_occupancy(self.db, property_id)
        if prop is None:
            raise NotFoundError.for_property(property_id)
        return prop.total_rooms, assignments

    async def find_active(self, property_id: str, tenant_id: str) -> Assignment | None:
        return await crud.get_active_assignment_for_tenant(self.db, property_id, tenant_id)

    async def get(self, assignment_id: str) -> Assignment:
        assignment = await crud.get_assignment(self.db, assignment_id)
        if assignment is None:
            raise NotFoundError.for_assignment(assignment_id)
        return assignment

    async def list_for_tenant(self, tenant_id: str, active_only: bool = True) -> list[Assignment]:
        return await crud.list_assignments_for_tenant(self.db, tenant_id, active_only)

    async def create(
        self, property_id: str, tenant_id: str, room_number: int,
        tenant_name: str = "", floor: int | None = None, commit: bool = True,
    ) -> Assignment:
        try:
            return await crud.create_assignment(
                self.db, property_id, tenant_id, room_number,
                tenant_name=tenant_name, floor=floor, commit=commit,
            )
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                "Storage rejected assignment of tenant %s at property %s: %s",
                tenant_id, property_id, e.orig,
            )
            raise ConflictError(
                f"Tenant {tenant_id} already has an active assignment at property {property_id}"
            ) from e

    async def vacate(self, assignment_id: str, commit: bool = True) -> Assignment:
        assignment = await self.get(assignment_id)
        if not assignment.is_active:
            raise AlreadyVacatedError(assignment_id)
        return await crud.vacate_assignment(self.db, assignment, commit=commit)
