"""Seed the database with demo hostels and a few room assignments."""

import asyncio

from hostel_occupancy.config import get_settings
from hostel_occupancy.db import crud
from hostel_occupancy.db.engine import async_session_factory, create_tables
from hostel_occupancy.services import SqlPropertyRegistry, SqlAssignmentStore, AllocationGuard


async def seed():
    await create_tables()

    async with async_session_factory() as db:
        # Check if demo property already exists
        existing = await crud.list_properties(db)
        if any(p.label == "Sunrise Boys Hostel" for p in existing):
            print("Demo hostels already exist, skipping seed.")
            return

        prop = await crud.create_property(db, "Sunrise Boys Hostel", 12, owner_id="demo-owner")
        print(f"Created property: {prop.label} (id: {prop.id}, rooms: {prop.total_rooms})")

        prop2 = await crud.create_property(
            db, "Lakeview Co-Live", 6, owner_id="demo-owner", room_occupant_limit=2,
        )
        print(f"Created property: {prop2.label} (id: {prop2.id}, rooms: {prop2.total_rooms})")

        registry = SqlPropertyRegistry(db, get_settings().occupancy)
        guard = AllocationGuard(registry, SqlAssignmentStore(db))
        for tenant_id, name, room in [
            ("stu-001", "Arjun", 1), ("stu-002", "Rahul", 1), ("stu-003", "Imran", 4),
        ]:
            await guard.assign(prop.id, tenant_id, room, tenant_name=name)
        await guard.assign(prop2.id, "stu-004", 2, tenant_name="Priya")
        print("Assigned 4 demo tenants.")

    print("\nSeed complete. Start the server with: uvicorn hostel_occupancy.main:app --reload")


if __name__ == "__main__":
    asyncio.run(seed())
