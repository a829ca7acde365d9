from datetime import datetime, timedelta, timezone

import pytest

from hostel_occupancy.db import crud
from hostel_occupancy.errors import NotFoundError
from hostel_occupancy.models import Assignment
from hostel_occupancy.services.occupancy import derive_rooms, VACANT, OCCUPIED

_T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _assignment(id, tenant, room, minutes=0, status="active"):
    return Assignment(
        id=id, property_id="P1", tenant_id=tenant, tenant_name=tenant.upper(),
        room_number=room, status=status, created_at=_T0 + timedelta(minutes=minutes),
    )


def test_empty_property_is_all_vacant():
    view = derive_rooms("P1", 3, [])
    assert [r.room_number for r in view.rooms] == [1, 2, 3]
    assert all(r.state == VACANT for r in view.rooms)
    assert view.orphaned == ()


def test_groups_shared_room_in_creation_order():
    view = derive_rooms("P1", 3, [
        _assignment("b", "t2", 2, minutes=5),
        _assignment("a", "t1", 2, minutes=1),
        _assignment("c", "t3", 3, minutes=2),
    ])
    assert view.room(1).state == VACANT
    assert view.room(2).state == OCCUPIED
    assert [o.tenant_id for o in view.room(2).occupants] == ["t1", "t2"]
    assert [o.tenant_name for o in view.room(3).occupants] == ["T3"]


def test_vacated_records_are_ignored():
    view = derive_rooms("P1", 2, [_assignment("a", "t1", 1, status="vacated")])
    assert view.room(1).is_vacant


def test_out_of_range_assignments_are_orphaned_not_dropped():
    view = derive_rooms("P1", 2, [
        _assignment("a", "t1", 1),
        _assignment("b", "t2", 4),
        _assignment("c", "t3", 0),
    ])
    assert len(view.rooms) == 2
    assert [o.room_number for o in view.orphaned] == [0, 4]
    assert view.orphaned[1].occupant.tenant_id == "t2"
    assert "outside 1..2" in view.orphaned[1].warning
    # orphans never leak into in-range rooms
    assert [o.tenant_id for o in view.room(1).occupants] == ["t1"]
    assert view.room(2).is_vacant


def test_room_lookup_rejects_unknown_number():
    view = derive_rooms("P1", 2, [])
    with pytest.raises(IndexError):
        view.room(3)


async def test_deriver_reads_store(db, make_services):
    _, _, deriver, guard, _ = make_services(db)
    prop = await crud.create_property(db, "Sunrise Hostel", 3)
    await guard.assign(prop.id, "t1", 3, tenant_name="Asha")

    view = await deriver.rooms(prop.id)
    assert view.total_rooms == 3
    assert view.room(3).occupants[0].tenant_name == "Asha"


async def test_deriver_unknown_property_fails_whole_read(db, make_services):
    _, _, deriver, _, _ = make_services(db)
    with pytest.raises(NotFoundError):
        await deriver.rooms("missing")


async def test_capacity_shrunk_outside_guard_reports_orphan(db, make_services):
    _, _, deriver, guard, _ = make_services(db)
    prop = await crud.create_property(db, "Old Block", 5)
    await guard.assign(prop.id, "t1", 5)
    await crud.update_property(db, prop, total_rooms=3)

    view = await deriver.rooms(prop.id)
    assert len(view.rooms) == 3
    assert [o.occupant.tenant_id for o in view.orphaned] == ["t1"]


async def test_rooms_consistent_when_resize_and_assign_land_between_reads(file_factory, make_services):
    async with file_factory() as setup:
        prop = await crud.create_property(setup, "Annex", 2)

    writes = []

    async def grow_and_fill():
        writes.append(1)
        async with file_factory() as session:
            registry, _, _, guard, _ = make_services(session)
            await registry.resize(prop.id, 4)
            await guard.assign(prop.id, "late", 4)

    async with file_factory() as session:
        registry, _, deriver, _, _ = make_services(session)
        read_capacity = registry.get_capacity

        async def capacity_then_write(property_id):
            # a writer commits right after capacity is read
            total = await read_capacity(property_id)
            await grow_and_fill()
            return total

        registry.get_capacity = capacity_then_write

        before = await deriver.rooms(prop.id)
        assert before.total_rooms == 2
        assert before.orphaned == ()

        if not writes:
            await grow_and_fill()

        after = await deriver.rooms(prop.id)
        assert after.total_rooms == 4
        assert after.orphaned == ()
        assert [o.tenant_id for o in after.room(4).occupants] == ["late"]
