from __future__ import annotations

from fastapi import APIRouter, Depends

from hostel_occupancy.dependencies import get_guard, get_registry, get_store
from hostel_occupancy.schemas import AssignmentCreate, AssignmentRead, AssignmentTransfer
from hostel_occupancy.services import AllocationGuard, SqlAssignmentStore, SqlPropertyRegistry

router = APIRouter(prefix="/api", tags=["assignments"])


@router.post("/properties/{property_id}/assignments", response_model=AssignmentRead, status_code=201)
async def assign_room(
    property_id: str,
    body: AssignmentCreate,
    guard: AllocationGuard = Depends(get_guard),
):
    return await guard.assign(
        property_id, body.tenant_id, body.room_number,
        tenant_name=body.tenant_name, floor=body.floor,
    )


@router.get("/properties/{property_id}/assignments", response_model=list[AssignmentRead])
async def list_active_assignments(
    property_id: str,
    registry: SqlPropertyRegistry = Depends(get_registry),
    store: SqlAssignmentStore = Depends(get_store),
):
    await registry.get_capacity(property_id)
    return await store.list_active(property_id)


@router.get("/assignments/{assignment_id}", response_model=AssignmentRead)
async def get_assignment(
    assignment_id: str,
    store: SqlAssignmentStore = Depends(get_store),
):
    return await store.get(assignment_id)


@router.post("/assignments/{assignment_id}/vacate", response_model=AssignmentRead)
async def vacate_assignment(
    assignment_id: str,
    guard: AllocationGuard = Depends(get_guard),
):
    return await guard.unassign(assignment_id)


@router.post("/assignments/{assignment_id}/transfer", response_model=AssignmentRead)
async def transfer_assignment(
    assignment_id: str,
    body: AssignmentTransfer,
    guard: AllocationGuard = Depends(get_guard),
):
    return await guard.transfer(assignment_id, body.room_number)


@router.get("/tenants/{tenant_id}/assignments", response_model=list[AssignmentRead])
async def tenant_assignments(
    tenant_id: str,
    include_vacated: bool = False,
    store: SqlAssignmentStore = Depends(get_store),
):
    """Rooms a tenant holds, newest first (the tenant's "my room" page)."""
    return await store.list_for_tenant(tenant_id, active_only=not include_vacated)
