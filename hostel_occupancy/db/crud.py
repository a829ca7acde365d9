"""CRUD operations for properties and room assignments."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from hostel_occupancy.models import Property, Assignment, AssignmentStatus

_ACTIVE = AssignmentStatus.ACTIVE.value


# ── Property ─────────────────────────────────────────────

async def create_property(
    db: AsyncSession, label: str, total_rooms: int,
    owner_id: str | None = None, room_occupant_limit: int | None = None,
) -> Property:
    prop = Property(
        label=label, total_rooms=total_rooms,
        owner_id=owner_id, room_occupant_limit=room_occupant_limit,
    )
    db.add(prop)
    await db.commit()
    await db.refresh(prop)
    return prop


async def get_property(db: AsyncSession, property_id: str) -> Property | None:
    return await db.get(Property, property_id, populate_existing=True)


async def list_properties(db: AsyncSession, owner_id: str | None = None) -> list[Property]:
    stmt = select(Property).order_by(Property.created_at)
    if owner_id is not None:
        stmt = stmt.where(Property.owner_id == owner_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def update_property(db: AsyncSession, prop: Property, **kwargs) -> Property:
    for k, v in kwargs.items():
        if v is not None:
            setattr(prop, k, v)
    await db.commit()
    await db.refresh(prop)
    return prop


# ── Assignment ───────────────────────────────────────────

async def create_assignment(
    db: AsyncSession, property_id: str, tenant_id: str, room_number: int,
    tenant_name: str = "", floor: int | None = None, commit: bool = True,
) -> Assignment:
    assignment = Assignment(
        property_id=property_id, tenant_id=tenant_id, room_number=room_number,
        tenant_name=tenant_name, floor=floor, status=_ACTIVE,
    )
    db.add(assignment)
    if commit:
        await db.commit()
        await db.refresh(assignment)
    else:
        await db.flush()
    return assignment


async def get_assignment(db: AsyncSession, assignment_id: str) -> Assignment | None:
    return await db.get(Assignment, assignment_id, populate_existing=True)


async def list_active_assignments(db: AsyncSession, property_id: str) -> list[Assignment]:
    """Active assignments for a property in creation order."""
    result = await db.execute(
        select(Assignment)
        .where(Assignment.property_id == property_id, Assignment.status == _ACTIVE)
        .order_by(Assignment.created_at, Assignment.id)
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def get_active_assignment_for_tenant(
    db: AsyncSession, property_id: str, tenant_id: str
) -> Assignment | None:
    result = await db.execute(
        select(Assignment)
        .where(
            Assignment.property_id == property_id,
            Assignment.tenant_id == tenant_id,
            Assignment.status == _ACTIVE,
        )
        .execution_options(populate_existing=True)
    )
    return result.scalars().first()


async def list_assignments_for_tenant(
    db: AsyncSession, tenant_id: str, active_only: bool = True
) -> list[Assignment]:
    stmt = select(Assignment).where(Assignment.tenant_id == tenant_id)
    if active_only:
        stmt = stmt.where(Assignment.status == _ACTIVE)
    result = await db.execute(stmt.order_by(Assignment.created_at.desc()))
    return list(result.scalars().all())


async def load_occupancy(
    db: AsyncSession, property_id: str
) -> tuple[Property | None, list[Assignment]]:
    """Property row and its active assignments from a single SELECT.

    One statement sees one snapshot, so capacity and occupants always agree
    even while writes commit between awaits.
    """
    result = await db.execute(
        select(Property, Assignment)
        .outerjoin(Assignment, and_(
            Assignment.property_id == Property.id, Assignment.status == _ACTIVE,
        ))
        .where(Property.id == property_id)
        .order_by(Assignment.created_at, Assignment.id)
        .execution_options(populate_existing=True)
    )
    rows = result.all()
    if not rows:
        return None, []
    return rows[0][0], [a for _, a in rows if a is not None]


async def highest_active_room(db: AsyncSession, property_id: str) -> int | None:
    result = await db.execute(
        select(func.max(Assignment.room_number)).where(
            Assignment.property_id == property_id, Assignment.status == _ACTIVE,
        )
    )
    return result.scalar()


async def vacate_assignment(
    db: AsyncSession, assignment: Assignment, commit: bool = True
) -> Assignment:
    assignment.status = AssignmentStatus.VACATED.value
    assignment.vacated_at = datetime.now(timezone.utc)
    if commit:
        await db.commit()
        await db.refresh(assignment)
    else:
        await db.flush()
    return assignment
