"""Declarative base and the id/creation-time columns shared by occupancy records.

Occupants of a room are listed in creation order, ``(created_at, id)``.
``created_at`` comes from :func:`creation_time`, which never hands out the
same instant twice in one process, so two tenants assigned within the same
clock tick still keep the order they were assigned in.
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from ulid import ULID

_TICK = timedelta(microseconds=1)
_clock_lock = threading.Lock()
_last_issued: datetime | None = None


def creation_time() -> datetime:
    """Current UTC time, nudged forward so each call is strictly later than the last."""
    global _last_issued
    with _clock_lock:
        now = datetime.now(timezone.utc)
        if _last_issued is not None and now <= _last_issued:
            now = _last_issued + _TICK
        _last_issued = now
        return now


def new_record_id() -> str:
    return str(ULID())


class Base(DeclarativeBase):
    pass


class RecordMixin:
    """ULID primary key plus a strictly increasing ``created_at``."""

    id: Mapped[str] = mapped_column(String(26), primary_key=True, default=new_record_id)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=creation_time, index=True,
    )
