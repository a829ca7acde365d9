from __future__ import annotations

import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, DateTime, ForeignKey, Index, text
from sqlalchemy.orm import Mapped, mapped_column

from hostel_occupancy.models.base import Base, RecordMixin


class AssignmentStatus(str, enum.Enum):
    ACTIVE = "active"
    VACATED = "vacated"


class Assignment(Base, RecordMixin):
    __tablename__ = "assignments"
    __table_args__ = (
        # One active slot per tenant per property, enforced by the database too
        Index(
            "uq_assignments_active_tenant",
            "property_id", "tenant_id",
            unique=True,
            sqlite_where=text("status = 'active'"),
            postgresql_where=text("status = 'active'"),
        ),
        Index("ix_assignments_property_status", "property_id", "status"),
    )

    property_id: Mapped[str] = mapped_column(String(26), ForeignKey("properties.id"))
    tenant_id: Mapped[str] = mapped_column(String(64), index=True)
    tenant_name: Mapped[str] = mapped_column(String(255), default="")
    room_number: Mapped[int] = mapped_column(Integer)
    floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default=AssignmentStatus.ACTIVE.value)
    vacated_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    @property
    def is_active(self) -> bool:
        return self.status == AssignmentStatus.ACTIVE.value
