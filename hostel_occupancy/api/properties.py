from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_occupancy.db import crud
from hostel_occupancy.db.engine import get_db
from hostel_occupancy.dependencies import get_registry, get_projections
from hostel_occupancy.errors import NotFoundError
from hostel_occupancy.schemas import PropertyCreate, PropertyRead, PropertyResize, OccupancySummaryRead
from hostel_occupancy.services import SqlPropertyRegistry, OccupancyProjections

router = APIRouter(prefix="/api", tags=["properties"])


@router.post("/properties", response_model=PropertyRead, status_code=201)
async def create_property(
    body: PropertyCreate,
    db: AsyncSession = Depends(get_db),
):
    return await crud.create_property(
        db, body.label, body.total_rooms,
        owner_id=body.owner_id, room_occupant_limit=body.room_occupant_limit,
    )


@router.get("/properties", response_model=list[PropertyRead])
async def list_properties(
    owner_id: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await crud.list_properties(db, owner_id)


@router.get("/properties/{property_id}", response_model=PropertyRead)
async def get_property(
    property_id: str,
    db: AsyncSession = Depends(get_db),
):
    prop = await crud.get_property(db, property_id)
    if not prop:
        raise NotFoundError.for_property(property_id)
    return prop


@router.put("/properties/{property_id}/capacity", response_model=PropertyRead)
async def resize_property(
    property_id: str,
    body: PropertyResize,
    registry: SqlPropertyRegistry = Depends(get_registry),
):
    return await registry.resize(property_id, body.total_rooms)


@router.get("/owners/{owner_id}/summary", response_model=OccupancySummaryRead)
async def owner_summary(
    owner_id: str,
    db: AsyncSession = Depends(get_db),
    projections: OccupancyProjections = Depends(get_projections),
):
    """Dashboard totals across every property the owner manages."""
    properties = await crud.list_properties(db, owner_id)
    summary = await projections.combined_summary(p.id for p in properties)
    return OccupancySummaryRead.model_validate(summary)
