"""Dashboard projections over the derived room view.

Each panel filters one ``OccupancyView`` from the deriver; none of them
looks at assignments or capacity directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hostel_occupancy.services.occupancy import OccupancyDeriver, OccupancyView, Occupant


@dataclass(frozen=True)
class FilledRoom:
    room_number: int
    occupants: tuple[Occupant, ...]


@dataclass(frozen=True)
class OccupancySummary:
    total_rooms: int
    filled_rooms: int
    available_rooms: int
    tenants: int
    orphaned: int
    property_count: int = 1


def available_from(view: OccupancyView) -> list[int]:
    return [r.room_number for r in view.rooms if r.is_vacant]


def filled_from(view: OccupancyView) -> list[FilledRoom]:
    return [
        FilledRoom(room_number=r.room_number, occupants=r.occupants)
        for r in view.rooms if not r.is_vacant
    ]


def summarize(view: OccupancyView) -> OccupancySummary:
    filled = filled_from(view)
    return OccupancySummary(
        total_rooms=view.total_rooms,
        filled_rooms=len(filled),
        available_rooms=view.total_rooms - len(filled),
        tenants=sum(len(r.occupants) for r in filled) + len(view.orphaned),
        orphaned=len(view.orphaned),
    )


class OccupancyProjections:
    def __init__(self, deriver: OccupancyDeriver):
        self.deriver = deriver

    async def available_rooms(self, property_id: str) -> list[int]:
        return available_from(await self.deriver.rooms(property_id))

    async def filled_rooms(self, property_id: str) -> list[FilledRoom]:
        return filled_from(await self.deriver.rooms(property_id))

    async def summary(self, property_id: str) -> OccupancySummary:
        return summarize(await self.deriver.rooms(property_id))

    async def combined_summary(self, property_ids: Iterable[str]) -> OccupancySummary:
        """Owner dashboard totals across several properties."""
        totals = dict(total_rooms=0, filled_rooms=0, available_rooms=0, tenants=0, orphaned=0)
        count = 0
        for property_id in property_ids:
            s = await self.summary(property_id)
            for key in totals:
                totals[key] += getattr(s, key)
            count += 1
        return OccupancySummary(property_count=count, **totals)
