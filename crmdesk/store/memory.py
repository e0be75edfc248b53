from __future__ import annotations

import asyncio
import uuid
from collections.abc import Callable, Iterable
from datetime import date
from typing import Any, Generic, TypeVar

from crmdesk.core.errors import NotFoundError
from crmdesk.schemas import Activity, Contact, Customer, Deal, RecordModel


T = TypeVar("T", bound=RecordModel)

IdFactory = Callable[[], str]
Clock = Callable[[], date]

# Fields a caller may never overwrite through update()
_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def uuid_id() -> str:
    return str(uuid.uuid4())


def _protected_keys(model: type[RecordModel]) -> frozenset[str]:
    """Every spelling (field name or alias) a protected field is accepted under."""
    keys: set[str] = set()
    for name in _PROTECTED_FIELDS:
        info = model.model_fields[name]
        keys.add(name)
        keys.update(k for k in (info.alias, info.validation_alias) if isinstance(k, str))
    return frozenset(keys)


class InMemoryEntityStore(Generic[T]):
    """Ordered list of records guarded by a single asyncio.Lock.

    Records are frozen pydantic models, so handing them out is safe; updates
    build a replacement record rather than mutating the stored one.
    """

    def __init__(
        self,
        model: type[T],
        entity_name: str,
        *,
        id_factory: IdFactory = uuid_id,
        clock: Clock = date.today,
        defaults: dict[str, Any] | None = None,
        records: Iterable[T] = (),
    ) -> None:
        self.model = model
        self.entity_name = entity_name
        self._id_factory = id_factory
        self._clock = clock
        self._defaults = dict(defaults or {})
        self._protected = _protected_keys(model)
        self._records: list[T] = list(records)
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, entity_id: str) -> int:
        for i, record in enumerate(self._records):
            if record.id == entity_id:
                return i
        return -1

    async def list_all(self, **filters: Any) -> list[T]:
        active = {k: v for k, v in filters.items() if v is not None}
        async with self._lock:
            return [
                r for r in self._records
                if all(getattr(r, k) == v for k, v in active.items())
            ]

    async def get(self, entity_id: str) -> T | None:
        async with self._lock:
            index = self._index_of(entity_id)
            return self._records[index] if index != -1 else None

    async def create(self, data: dict[str, Any]) -> T:
        fields = {k: v for k, v in data.items() if k not in self._protected}
        for key, value in self._defaults.items():
            if fields.get(key) is None:
                fields[key] = value

        today = self._clock()
        async with self._lock:
            record = self.model.model_validate(
                {**fields, "id": self._id_factory(), "created_at": today, "updated_at": today}
            )
            self._records.append(record)
        return record

    async def update(self, entity_id: str, data: dict[str, Any]) -> T:
        changes = {k: v for k, v in data.items() if k not in self._protected}
        async with self._lock:
            index = self._index_of(entity_id)
            if index == -1:
                raise NotFoundError(self.entity_name)

            current = self._records[index]
            # Shallow merge: nested objects such as address are replaced whole
            merged = {**current.model_dump(), **changes, "updated_at": self._clock()}
            record = self.model.model_validate(merged)
            self._records[index] = record
        return record

    async def delete(self, entity_id: str) -> None:
        async with self._lock:
            index = self._index_of(entity_id)
            if index == -1:
                raise NotFoundError(self.entity_name)
            del self._records[index]


class InMemoryCRMStore:
    """Process-lifetime CRM data. Nothing survives a restart."""

    def __init__(
        self,
        *,
        id_factory: IdFactory = uuid_id,
        clock: Clock = date.today,
        customers: Iterable[Customer] = (),
        contacts: Iterable[Contact] = (),
        deals: Iterable[Deal] = (),
        activities: Iterable[Activity] = (),
    ) -> None:
        common: dict[str, Any] = {"id_factory": id_factory, "clock": clock}
        self.customers = InMemoryEntityStore(
            Customer, "Customer", defaults={"status": "active"}, records=customers, **common
        )
        self.contacts = InMemoryEntityStore(
            Contact, "Contact", defaults={"status": "active"}, records=contacts, **common
        )
        self.deals = InMemoryEntityStore(
            Deal, "Deal", defaults={"status": "active"}, records=deals, **common
        )
        self.activities = InMemoryEntityStore(
            Activity, "Activity", records=activities, **common
        )

    async def ping(self) -> None:
        return None
