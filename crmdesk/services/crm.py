from __future__ import annotations

import logging
from typing import Any

from crmdesk.core.errors import NotFoundError
from crmdesk.schemas import (
    Activity,
    Contact,
    Customer,
    CustomerSortField,
    CustomerStatus,
    CustomerSummary,
    CustomerTier,
    DashboardStats,
    Deal,
    DealStage,
    DealStatus,
    DeleteResponse,
    SortOrder,
)
from crmdesk.services.dashboard import (
    DEFAULT_TOP_CUSTOMERS,
    average_health_score,
    build_dashboard_stats,
)
from crmdesk.store.base import CRMStore

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_LIMIT = 10

_STATUS_FOR_STAGE = {
    DealStage.CLOSED_WON: DealStatus.WON,
    DealStage.CLOSED_LOST: DealStatus.LOST,
}


def _customer_sort_key(field: CustomerSortField) -> Any:
    def key(customer: Customer) -> Any:
        value = getattr(customer, field)
        if field in (CustomerSortField.REVENUE, CustomerSortField.HEALTH_SCORE):
            return value or 0
        if value is None:
            return ""
        if isinstance(value, str):
            return value.lower()
        return value

    return key


def _matches_search(customer: Customer, term: str) -> bool:
    needle = term.lower()
    haystack = (customer.name, customer.email or "", customer.industry or "")
    return any(needle in field.lower() for field in haystack)


class CRMService:
    """CRUD facade over a CRMStore plus the dashboard and customer summaries.

    Deleting a customer does not cascade: its contacts and deals stay in
    their stores with a dangling ``customer_id``.
    """

    def __init__(
        self,
        store: CRMStore,
        *,
        top_customers_limit: int = DEFAULT_TOP_CUSTOMERS,
    ) -> None:
        self.store = store
        self.top_customers_limit = top_customers_limit

    # Customers

    async def list_customers(
        self,
        *,
        search: str | None = None,
        tier: CustomerTier | None = None,
        status: CustomerStatus | None = None,
        sort_by: CustomerSortField | None = None,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> list[Customer]:
        customers = await self.store.customers.list_all(tier=tier, status=status)
        if search:
            customers = [c for c in customers if _matches_search(c, search)]
        if sort_by is not None:
            customers.sort(
                key=_customer_sort_key(sort_by),
                reverse=sort_order == SortOrder.DESC,
            )
        return customers

    async def get_customer(self, customer_id: str) -> Customer | None:
        return await self.store.customers.get(customer_id)

    async def create_customer(self, data: dict[str, Any]) -> Customer:
        customer = await self.store.customers.create(data)
        logger.info("Created customer %s (%s)", customer.id, customer.name)
        return customer

    async def update_customer(self, customer_id: str, data: dict[str, Any]) -> Customer:
        try:
            customer = await self.store.customers.update(customer_id, data)
        except NotFoundError:
            logger.warning("Update of unknown customer %s", customer_id)
            raise
        logger.info("Updated customer %s: %s", customer_id, sorted(data))
        return customer

    async def delete_customer(self, customer_id: str) -> DeleteResponse:
        try:
            await self.store.customers.delete(customer_id)
        except NotFoundError:
            logger.warning("Delete of unknown customer %s", customer_id)
            raise
        logger.info("Deleted customer %s", customer_id)
        return DeleteResponse(success=True)

    async def customer_summary(self) -> CustomerSummary:
        customers = await self.store.customers.list_all()
        return CustomerSummary(
            total=len(customers),
            active=sum(1 for c in customers if c.status == CustomerStatus.ACTIVE),
            enterprise=sum(1 for c in customers if c.tier == CustomerTier.ENTERPRISE),
            avg_health=round(average_health_score(customers)),
        )

    # Contacts

    async def list_contacts(self, customer_id: str | None = None) -> list[Contact]:
        return await self.store.contacts.list_all(customer_id=customer_id)

    async def get_contact(self, contact_id: str) -> Contact | None:
        return await self.store.contacts.get(contact_id)

    async def create_contact(self, data: dict[str, Any]) -> Contact:
        contact = await self.store.contacts.create(data)
        logger.info("Created contact %s for customer %s", contact.id, contact.customer_id)
        return contact

    async def update_contact(self, contact_id: str, data: dict[str, Any]) -> Contact:
        try:
            contact = await self.store.contacts.update(contact_id, data)
        except NotFoundError:
            logger.warning("Update of unknown contact %s", contact_id)
            raise
        logger.info("Updated contact %s: %s", contact_id, sorted(data))
        return contact

    async def delete_contact(self, contact_id: str) -> DeleteResponse:
        try:
            await self.store.contacts.delete(contact_id)
        except NotFoundError:
            logger.warning("Delete of unknown contact %s", contact_id)
            raise
        logger.info("Deleted contact %s", contact_id)
        return DeleteResponse(success=True)

    # Deals

    async def list_deals(self, customer_id: str | None = None) -> list[Deal]:
        return await self.store.deals.list_all(customer_id=customer_id)

    async def get_deal(self, deal_id: str) -> Deal | None:
        return await self.store.deals.get(deal_id)

    async def create_deal(self, data: dict[str, Any]) -> Deal:
        fields = dict(data)
        if fields.get("status") is None and "stage" in fields:
            fields["status"] = _STATUS_FOR_STAGE.get(DealStage(fields["stage"]), DealStatus.ACTIVE)
        deal = await self.store.deals.create(fields)
        logger.info("Created deal %s (%s, %s)", deal.id, deal.stage, deal.value)
        return deal

    async def update_deal(self, deal_id: str, data: dict[str, Any]) -> Deal:
        fields = dict(data)
        if fields.get("status") == DealStatus.ACTIVE:
            # Reopened deals have not closed yet
            fields.setdefault("actual_close_date", None)
        try:
            deal = await self.store.deals.update(deal_id, fields)
        except NotFoundError:
            logger.warning("Update of unknown deal %s", deal_id)
            raise
        logger.info("Updated deal %s: %s", deal_id, sorted(data))
        return deal

    async def delete_deal(self, deal_id: str) -> DeleteResponse:
        try:
            await self.store.deals.delete(deal_id)
        except NotFoundError:
            logger.warning("Delete of unknown deal %s", deal_id)
            raise
        logger.info("Deleted deal %s", deal_id)
        return DeleteResponse(success=True)

    # Activities and dashboard

    async def list_activities(self, limit: int = DEFAULT_ACTIVITY_LIMIT) -> list[Activity]:
        """Most recent activities first."""
        activities = await self.store.activities.list_all()
        activities.sort(key=lambda a: a.timestamp, reverse=True)
        return activities[:limit]

    async def dashboard_stats(self) -> DashboardStats:
        customers = await self.store.customers.list_all()
        contacts = await self.store.contacts.list_all()
        deals = await self.store.deals.list_all()
        return build_dashboard_stats(customers, contacts, deals, self.top_customers_limit)
