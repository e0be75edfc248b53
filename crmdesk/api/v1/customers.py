from __future__ import annotations

from fastapi import APIRouter, HTTPException

from crmdesk.api.deps import CRMServiceDep
from crmdesk.schemas import (
    Contact,
    Customer,
    CustomerCreate,
    CustomerSortField,
    CustomerStatus,
    CustomerSummary,
    CustomerTier,
    CustomerUpdate,
    Deal,
    DeleteResponse,
    SortOrder,
)

router = APIRouter()


async def _require_customer(service: CRMServiceDep, customer_id: str) -> Customer:
    customer = await service.get_customer(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/", response_model=list[Customer])
async def list_customers(
    service: CRMServiceDep,
    search: str | None = None,
    tier: CustomerTier | None = None,
    status: CustomerStatus | None = None,
    sort_by: CustomerSortField | None = None,
    sort_order: SortOrder = SortOrder.ASC,
) -> list[Customer]:
    """List customers with optional search, tier/status filters and sorting."""
    return await service.list_customers(
        search=search,
        tier=tier,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order,
    )


@router.get("/summary", response_model=CustomerSummary)
async def customer_summary(service: CRMServiceDep) -> CustomerSummary:
    """Headline counts for the customers page."""
    return await service.customer_summary()


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str, service: CRMServiceDep) -> Customer:
    return await _require_customer(service, customer_id)


@router.get("/{customer_id}/contacts", response_model=list[Contact])
async def list_customer_contacts(customer_id: str, service: CRMServiceDep) -> list[Contact]:
    await _require_customer(service, customer_id)
    return await service.list_contacts(customer_id=customer_id)


@router.get("/{customer_id}/deals", response_model=list[Deal])
async def list_customer_deals(customer_id: str, service: CRMServiceDep) -> list[Deal]:
    await _require_customer(service, customer_id)
    return await service.list_deals(customer_id=customer_id)


@router.post("/", response_model=Customer, status_code=201)
async def create_customer(body: CustomerCreate, service: CRMServiceDep) -> Customer:
    """Create a customer; status defaults to active."""
    return await service.create_customer(body.model_dump(exclude_unset=True, exclude_none=True))


@router.put("/{customer_id}", response_model=Customer)
@router.patch("/{customer_id}", response_model=Customer)
async def update_customer(
    customer_id: str,
    body: CustomerUpdate,
    service: CRMServiceDep,
) -> Customer:
    """Merge the supplied fields over the stored customer."""
    update_data = body.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No fields to update")
    return await service.update_customer(customer_id, update_data)


@router.delete("/{customer_id}", response_model=DeleteResponse)
async def delete_customer(customer_id: str, service: CRMServiceDep) -> DeleteResponse:
    """Delete a customer. Its contacts and deals are left in place."""
    return await service.delete_customer(customer_id)
