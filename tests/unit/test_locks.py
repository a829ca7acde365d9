import asyncio

from hostel_occupancy.services.locks import PropertyLockRegistry


async def test_same_property_is_serialized():
    locks = PropertyLockRegistry()
    events = []

    async def worker(name):
        async with locks.hold("P1"):
            events.append(f"{name}-in")
            await asyncio.sleep(0.01)
            events.append(f"{name}-out")

    await asyncio.gather(worker("a"), worker("b"))
    assert events in (
        ["a-in", "a-out", "b-in", "b-out"],
        ["b-in", "b-out", "a-in", "a-out"],
    )


async def test_different_properties_do_not_block():
    locks = PropertyLockRegistry()
    entered = asyncio.Event()

    async def holder():
        async with locks.hold("P1"):
            await asyncio.wait_for(entered.wait(), timeout=1)

    async def other():
        async with locks.hold("P2"):
            entered.set()

    await asyncio.gather(holder(), other())


async def test_entries_released_after_use():
    locks = PropertyLockRegistry()
    async with locks.hold("P1"):
        assert len(locks) == 1
    assert len(locks) == 0


async def test_entry_released_when_body_raises():
    locks = PropertyLockRegistry()
    try:
        async with locks.hold("P1"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass
    assert len(locks) == 0
