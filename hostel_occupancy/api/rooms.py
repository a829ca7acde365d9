"""Room occupancy endpoints feeding the owner dashboard panels."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from hostel_occupancy.dependencies import get_deriver, get_projections
from hostel_occupancy.schemas import OccupancyRead, FilledRoomRead, OccupancySummaryRead
from hostel_occupancy.services import OccupancyDeriver, OccupancyProjections

router = APIRouter(prefix="/api/properties/{property_id}", tags=["rooms"])


@router.get("/rooms", response_model=OccupancyRead)
async def list_rooms(
    property_id: str,
    deriver: OccupancyDeriver = Depends(get_deriver),
):
    view = await deriver.rooms(property_id)
    return OccupancyRead.model_validate(view)


@router.get("/rooms/available", response_model=list[int])
async def available_rooms(
    property_id: str,
    projections: OccupancyProjections = Depends(get_projections),
):
    return await projections.available_rooms(property_id)


@router.get("/rooms/filled", response_model=list[FilledRoomRead])
async def filled_rooms(
    property_id: str,
    projections: OccupancyProjections = Depends(get_projections),
):
    filled = await projections.filled_rooms(property_id)
    return [FilledRoomRead.model_validate(r) for r in filled]


@router.get("/summary", response_model=OccupancySummaryRead)
async def occupancy_summary(
    property_id: str,
    projections: OccupancyProjections = Depends(get_projections),
):
    return OccupancySummaryRead.model_validate(await projections.summary(property_id))
