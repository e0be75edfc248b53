from __future__ import annotations

from typing import Any, Protocol, TypeVar

from crmdesk.schemas import Activity, Contact, Customer, Deal, RecordModel

T = TypeVar("T", bound=RecordModel)


class EntityStore(Protocol[T]):
    """Storage interface for one entity kind.

    Implement this protocol to back the service with something other than
    process memory (SQL database, document store, etc.)
    """

    async def list_all(self, **filters: Any) -> list[T]:
        """Return every record in insertion order, optionally filtered by field equality."""
        ...

    async def get(self, entity_id: str) -> T | None:
        """Return the record with this id, or None."""
        ...

    async def create(self, data: dict[str, Any]) -> T:
        """Assign an id and timestamps, store and return the new record."""
        ...

    async def update(self, entity_id: str, data: dict[str, Any]) -> T:
        """Shallow-merge fields over an existing record. Raises NotFoundError."""
        ...

    async def delete(self, entity_id: str) -> None:
        """Remove a record. Raises NotFoundError."""
        ...


class CRMStore(Protocol):
    """The four entity stores the CRM service works against."""

    customers: EntityStore[Customer]
    contacts: EntityStore[Contact]
    deals: EntityStore[Deal]
    activities: EntityStore[Activity]

    async def ping(self) -> None:
        """Raise if the backend is unreachable."""
        ...
