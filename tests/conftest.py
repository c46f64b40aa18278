"""Canonical test fixtures shared across engine, data and API tests.

Fixture room: 12' x 10' with 9' walls, walls + ceiling, two coats.
Priced at the default rates it comes to $557 (6 billed hours, 3 gallons).
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from paintquote.data.cart_store import MemorySnapshotStore
from paintquote.engine.cart import Cart
from paintquote.models.cart import LineItem
from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.services import ServiceType
from paintquote.models.surfaces import RoomSpec


@pytest.fixture
def standard_room() -> RoomSpec:
    return RoomSpec(
        length=Decimal("12"),
        width=Decimal("10"),
        height=Decimal("9"),
        include_ceiling=True,
    )


@pytest.fixture
def standard_room_params() -> dict:
    """The same room as submitted by the quote form (strings, as typed)."""
    return {"length": "12", "width": "10", "height": "9", "include_ceiling": True}


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def memory_store(clock) -> MemorySnapshotStore:
    return MemorySnapshotStore(max_age=timedelta(days=7), clock=clock)


@pytest.fixture
def cart(memory_store) -> Cart:
    return Cart(store=memory_store, session_id="sess_test")


@pytest.fixture
def make_item():
    """Factory for line items with a hand-built breakdown."""
    counter = iter(range(1, 1000))

    def _make(service_id: str = "accent-wall", params: dict | None = None, **breakdown) -> LineItem:
        return LineItem(
            id=f"line_{next(counter)}",
            service_id=service_id,
            service_name=service_id,
            service_type=ServiceType.CALCULATED,
            params=params or {},
            estimate=EstimateBreakdown(**breakdown),
        )

    return _make
