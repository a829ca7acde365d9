import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hostel_occupancy.config import OccupancyConfig
from hostel_occupancy.models import Base
from hostel_occupancy.services import (
    SqlPropertyRegistry, SqlAssignmentStore, OccupancyDeriver, AllocationGuard,
    OccupancyProjections,
)
from hostel_occupancy.services.locks import PropertyLockRegistry


@pytest_asyncio.fixture
async def db():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest_asyncio.fixture
async def file_factory(tmp_path):
    """Session factory over a file DB so several sessions see the same data."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'occupancy.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


def build_services(db, room_occupant_limit=None, locks=None):
    registry = SqlPropertyRegistry(
        db, OccupancyConfig(room_occupant_limit=room_occupant_limit),
        locks=locks if locks is not None else PropertyLockRegistry(),
    )
    store = SqlAssignmentStore(db)
    deriver = OccupancyDeriver(registry, store)
    guard = AllocationGuard(registry, store, deriver, locks=registry.locks)
    return registry, store, deriver, guard, OccupancyProjections(deriver)


@pytest.fixture
def make_services():
    return build_services
