"""FastAPI dependency providers wiring the occupancy services per request."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_occupancy.config import Settings, get_settings
from hostel_occupancy.db.engine import get_db
from hostel_occupancy.services import (
    SqlPropertyRegistry, SqlAssignmentStore, OccupancyDeriver,
    AllocationGuard, OccupancyProjections,
)


@lru_cache
def get_settings_dep() -> Settings:
    return get_settings()


def get_registry(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings_dep),
) -> SqlPropertyRegistry:
    return SqlPropertyRegistry(db, settings.occupancy)


def get_store(db: AsyncSession = Depends(get_db)) -> SqlAssignmentStore:
    return SqlAssignmentStore(db)


def get_deriver(
    registry: SqlPropertyRegistry = Depends(get_registry),
    store: SqlAssignmentStore = Depends(get_store),
) -> OccupancyDeriver:
    return OccupancyDeriver(registry, store)


def get_guard(
    registry: SqlPropertyRegistry = Depends(get_registry),
    store: SqlAssignmentStore = Depends(get_store),
    deriver: OccupancyDeriver = Depends(get_deriver),
) -> AllocationGuard:
    return AllocationGuard(registry, store, deriver)


def get_projections(deriver: OccupancyDeriver = Depends(get_deriver)) -> OccupancyProjections:
    return OccupancyProjections(deriver)
