"""CLI for the occupancy service: set up the DB, register hostels, manage rooms."""

from __future__ import annotations

import argparse
import asyncio
import sys

from hostel_occupancy.config import get_settings
from hostel_occupancy.errors import OccupancyError
from hostel_occupancy.logging_setup import configure_logging


def _services(db):
    from hostel_occupancy.services import (
        SqlPropertyRegistry, SqlAssignmentStore, OccupancyDeriver, AllocationGuard,
    )

    registry = SqlPropertyRegistry(db, get_settings().occupancy)
    store = SqlAssignmentStore(db)
    deriver = OccupancyDeriver(registry, store)
    return deriver, AllocationGuard(registry, store, deriver)


async def cmd_init_db(args):
    from hostel_occupancy.db.engine import create_tables

    await create_tables()
    print(f"Tables ready at {get_settings().database_url}")


async def cmd_add_property(args):
    from hostel_occupancy.db import crud
    from hostel_occupancy.db.engine import async_session_factory

    async with async_session_factory() as db:
        prop = await crud.create_property(
            db, args.label, args.rooms,
            owner_id=args.owner or None, room_occupant_limit=args.limit,
        )
    print(f"Property created: {prop.label} (id={prop.id}, rooms={prop.total_rooms})")


async def cmd_rooms(args):
    from hostel_occupancy.db.engine import async_session_factory

    async with async_session_factory() as db:
        deriver, _ = _services(db)
        view = await deriver.rooms(args.property_id)

    for room in view.rooms:
        names = ", ".join(o.tenant_name or o.tenant_id for o in room.occupants)
        print(f"  Room {room.room_number:>3}  {room.state:<8}  {names}")
    for orphan in view.orphaned:
        print(f"  WARNING: {orphan.occupant.tenant_id}: {orphan.warning}")


async def cmd_assign(args):
    from hostel_occupancy.db.engine import async_session_factory

    async with async_session_factory() as db:
        _, guard = _services(db)
        assignment = await guard.assign(
            args.property_id, args.tenant_id, args.room,
            tenant_name=args.name, floor=args.floor,
        )
    print(f"Assigned {assignment.tenant_id} to room {assignment.room_number} (id={assignment.id})")


async def cmd_unassign(args):
    from hostel_occupancy.db.engine import async_session_factory

    async with async_session_factory() as db:
        _, guard = _services(db)
        assignment = await guard.unassign(args.assignment_id)
    print(f"Vacated room {assignment.room_number} held by {assignment.tenant_id}")


_COMMANDS = {
    "init-db": cmd_init_db,
    "add-property": cmd_add_property,
    "rooms": cmd_rooms,
    "assign": cmd_assign,
    "unassign": cmd_unassign,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hostel occupancy CLI")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("init-db", help="Create database tables")

    ap = subparsers.add_parser("add-property", help="Register a hostel")
    ap.add_argument("--label", required=True, help="Display name")
    ap.add_argument("--rooms", type=int, required=True, help="Number of rooms (numbered from 1)")
    ap.add_argument("--owner", default="", help="Owner id")
    ap.add_argument("--limit", type=int, default=None, help="Max occupants per room")

    rm = subparsers.add_parser("rooms", help="Show the room occupancy of a hostel")
    rm.add_argument("property_id")

    asg = subparsers.add_parser("assign", help="Assign a tenant to a room")
    asg.add_argument("property_id")
    asg.add_argument("tenant_id")
    asg.add_argument("room", type=int)
    asg.add_argument("--name", default="", help="Tenant display name")
    asg.add_argument("--floor", type=int, default=None)

    un = subparsers.add_parser("unassign", help="Vacate an assignment")
    un.add_argument("assignment_id")

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(get_settings().logging)
    try:
        asyncio.run(_COMMANDS[args.command](args))
    except OccupancyError as e:
        print(f"Error ({e.code}): {e.message}")
        sys.exit(2)


if __name__ == "__main__":
    main()
