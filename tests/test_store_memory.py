"""Unit tests for InMemoryEntityStore and InMemoryCRMStore."""
from __future__ import annotations

import asyncio
from datetime import date

import pytest

from crmdesk.core.errors import NotFoundError
from crmdesk.schemas import Customer, CustomerStatus
from crmdesk.store import InMemoryCRMStore, InMemoryEntityStore

from conftest import START_DATE, FakeClock


def _customer_fields(**overrides: object) -> dict[str, object]:
    fields: dict[str, object] = {
        "name": "Test Co",
        "email": "t@test.com",
        "phone": "555",
        "industry": "Tech",
        "address": {"city": "X", "state": "Y"},
    }
    fields.update(overrides)
    return fields


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_then_get_returns_same_record(store: InMemoryCRMStore) -> None:
    created = await store.customers.create(_customer_fields(revenue=1000))

    fetched = await store.customers.get(created.id)

    assert fetched == created
    assert fetched is not None
    assert fetched.name == "Test Co"
    assert fetched.revenue == 1000
    assert fetched.address is not None and fetched.address.city == "X"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_assigns_id_defaults_and_dates(store: InMemoryCRMStore) -> None:
    created = await store.customers.create(_customer_fields())

    assert created.id == "id-1"
    assert created.status == CustomerStatus.ACTIVE
    assert created.created_at == created.updated_at == START_DATE


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_ignores_caller_supplied_id_and_dates(store: InMemoryCRMStore) -> None:
    created = await store.customers.create(
        _customer_fields(id="mine", created_at=date(2000, 1, 1))
    )

    assert created.id == "id-1"
    assert created.created_at == START_DATE


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_keeps_supplied_status(store: InMemoryCRMStore) -> None:
    created = await store.customers.create(_customer_fields(status="inactive"))
    assert created.status == CustomerStatus.INACTIVE


@pytest.mark.unit
@pytest.mark.asyncio
async def test_default_clock_is_today() -> None:
    store = InMemoryCRMStore()
    created = await store.customers.create(_customer_fields())

    assert created.created_at == date.today()
    assert created.id


@pytest.mark.unit
@pytest.mark.asyncio
async def test_store_accepts_unvalidated_form_values(store: InMemoryCRMStore) -> None:
    created = await store.customers.create(_customer_fields(email="not-an-email", phone=""))

    assert created.email == "not-an-email"
    assert created.phone == ""


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_all_preserves_insertion_order_and_copies(store: InMemoryCRMStore) -> None:
    for name in ("Zeta", "Alpha", "Mid"):
        await store.customers.create(_customer_fields(name=name))

    listed = await store.customers.list_all()
    listed.clear()

    assert [c.name for c in await store.customers.list_all()] == ["Zeta", "Alpha", "Mid"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_list_all_filters_by_field(store: InMemoryCRMStore) -> None:
    await store.contacts.create({"customer_id": "c1", "first_name": "Ann"})
    await store.contacts.create({"customer_id": "c2", "first_name": "Bob"})
    await store.contacts.create({"customer_id": "c1", "first_name": "Cid"})

    by_customer = await store.contacts.list_all(customer_id="c1")
    unfiltered = await store.contacts.list_all(customer_id=None)

    assert [c.first_name for c in by_customer] == ["Ann", "Cid"]
    assert len(unfiltered) == 3


@pytest.mark.unit
@pytest.mark.asyncio
async def test_get_missing_returns_none(store: InMemoryCRMStore) -> None:
    assert await store.deals.get("nope") is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_merges_shallowly_and_refreshes_updated_at(
    store: InMemoryCRMStore, clock: FakeClock
) -> None:
    created = await store.customers.create(
        _customer_fields(address={"street": "1 Road", "city": "X", "state": "Y"})
    )
    clock.advance(3)

    updated = await store.customers.update(
        created.id, {"industry": "Retail", "address": {"city": "Z", "state": "W"}}
    )

    assert updated.industry == "Retail"
    assert updated.name == created.name
    assert updated.address is not None
    # Nested objects are replaced, not merged
    assert updated.address.street is None
    assert updated.address.city == "Z"
    assert updated.created_at == START_DATE
    assert updated.updated_at == date(2026, 1, 8)
    assert await store.customers.get(created.id) == updated


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_cannot_change_id_or_created_at(store: InMemoryCRMStore) -> None:
    created = await store.customers.create(_customer_fields())

    updated = await store.customers.update(
        created.id, {"id": "other", "created_at": date(1999, 1, 1), "name": "Renamed"}
    )

    assert updated.id == created.id
    assert updated.created_at == created.created_at
    assert updated.name == "Renamed"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_missing_raises_and_leaves_store_unchanged(store: InMemoryCRMStore) -> None:
    await store.customers.create(_customer_fields())
    before = await store.customers.list_all()

    with pytest.raises(NotFoundError) as exc_info:
        await store.customers.update("missing", {"name": "Ghost"})

    assert str(exc_info.value) == "Customer not found"
    assert await store.customers.list_all() == before


@pytest.mark.unit
@pytest.mark.asyncio
async def test_delete_missing_raises_and_leaves_store_unchanged(store: InMemoryCRMStore) -> None:
    await store.deals.create({"customer_id": "c1", "title": "Deal", "value": 10})
    before = await store.deals.list_all()

    with pytest.raises(NotFoundError) as exc_info:
        await store.deals.delete("missing")

    assert exc_info.value.message == "Deal not found"
    assert await store.deals.list_all() == before


@pytest.mark.unit
@pytest.mark.asyncio
async def test_delete_removes_exactly_one(store: InMemoryCRMStore) -> None:
    first = await store.customers.create(_customer_fields(name="One"))
    await store.customers.create(_customer_fields(name="Two"))

    await store.customers.delete(first.id)

    assert await store.customers.get(first.id) is None
    assert len(store.customers) == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_concurrent_creates_get_unique_ids() -> None:
    store = InMemoryEntityStore(Customer, "Customer", defaults={"status": "active"})

    created = await asyncio.gather(
        *(store.create(_customer_fields(name=f"Co {i}")) for i in range(25))
    )

    assert len({c.id for c in created}) == 25
    assert len(store) == 25


@pytest.mark.unit
@pytest.mark.asyncio
async def test_concurrent_updates_last_write_wins(store: InMemoryCRMStore) -> None:
    created = await store.customers.create(_customer_fields())

    await asyncio.gather(
        store.customers.update(created.id, {"industry": "First"}),
        store.customers.update(created.id, {"industry": "Second"}),
    )

    current = await store.customers.get(created.id)
    assert current is not None
    assert current.industry == "Second"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_won_deal_gets_close_date(store: InMemoryCRMStore) -> None:
    deal = await store.deals.create(
        {"customer_id": "c1", "title": "Deal", "value": 10, "stage": "closed-lost", "status": "lost"}
    )
    assert deal.actual_close_date == START_DATE


@pytest.mark.unit
@pytest.mark.asyncio
async def test_camel_case_keys_cannot_set_protected_fields(
    store: InMemoryCRMStore, clock: FakeClock
) -> None:
    created = await store.customers.create(
        _customer_fields(createdAt=date(1999, 1, 1), updatedAt=date(1999, 1, 1))
    )
    clock.advance()

    updated = await store.customers.update(
        created.id, {"id": "x", "createdAt": date(1990, 1, 1), "updatedAt": date(1990, 1, 1)}
    )

    assert created.created_at == created.updated_at == START_DATE
    assert updated.id == created.id
    assert updated.created_at == START_DATE
    assert updated.updated_at == clock.today
    assert updated.updated_at >= updated.created_at
