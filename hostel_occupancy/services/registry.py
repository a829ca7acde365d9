"""Property Registry: room capacity lookups for the occupancy core."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession

from hostel_occupancy.config import OccupancyConfig
from hostel_occupancy.db import crud
from hostel_occupancy.errors import (
    NotFoundError, CapacityBelowOccupiedError, InvalidCapacityError,
)
from hostel_occupancy.models import Property
from hostel_occupancy.services.locks import PropertyLockRegistry, property_locks

logger = logging.getLogger(__name__)


class PropertyRegistry(ABC):
    """Read interface over property capacity."""

    @abstractmethod
    async def get_capacity(self, property_id: str) -> int:
        """Return total_rooms for the property, raising NotFoundError if unknown."""
        ...

    @abstractmethod
    async def get_occupant_limit(self, property_id: str) -> int | None:
        """Return the per-room occupant cap, or None when rooms are unlimited."""
        ...


class SqlPropertyRegistry(PropertyRegistry):
    def __init__(
        self, db: AsyncSession, config: OccupancyConfig | None = None,
        locks: PropertyLockRegistry = property_locks,
    ):
        self.db = db
        self.config = config or OccupancyConfig()
        self.locks = locks

    async def _require(self, property_id: str) -> Property:
        prop = await crud.get_property(self.db, property_id)
        if prop is None:
            raise NotFoundError.for_property(property_id)
        return prop

    async def get_capacity(self, property_id: str) -> int:
        prop = await self._require(property_id)
        return prop.total_rooms

    async def get_occupant_limit(self, property_id: str) -> int | None:
        prop = await self._require(property_id)
        if prop.room_occupant_limit is not None:
            return prop.room_occupant_limit
        return self.config.room_occupant_limit

    async def resize(self, property_id: str, total_rooms: int) -> Property:
        """Change a property's room count.

        Growing always succeeds. Shrinking is refused while any room above
        the new count has an active occupant.
        """
        if total_rooms < 1:
            raise InvalidCapacityError(total_rooms)
        async with self.locks.hold(property_id):
            prop = await self._require(property_id)
            if total_rooms < prop.total_rooms:
                highest = await crud.highest_active_room(self.db, property_id)
                if highest is not None and highest > total_rooms:
                    raise CapacityBelowOccupiedError(total_rooms, highest)
            previous = prop.total_rooms
            prop = await crud.update_property(self.db, prop, total_rooms=total_rooms)
        logger.info("Resized property %s from %d to %d rooms", property_id, previous, total_rooms)
        return prop
