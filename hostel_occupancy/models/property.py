from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Integer, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column

from hostel_occupancy.models.base import Base, RecordMixin


class Property(Base, RecordMixin):
    __tablename__ = "properties"
    __table_args__ = (
        CheckConstraint("total_rooms > 0", name="ck_properties_total_rooms_positive"),
        CheckConstraint(
            "room_occupant_limit IS NULL OR room_occupant_limit > 0",
            name="ck_properties_room_occupant_limit_positive",
        ),
    )

    label: Mapped[str] = mapped_column(String(255))
    total_rooms: Mapped[int] = mapped_column(Integer)
    # Overrides occupancy.room_occupant_limit from config when set
    room_occupant_limit: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    owner_id: Mapped[Optional[str]] = mapped_column(String(64), nullable=True, index=True)
