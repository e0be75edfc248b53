from __future__ import annotations

from fastapi import APIRouter, HTTPException

from crmdesk.api.deps import CRMServiceDep
from crmdesk.schemas import Deal, DealCreate, DealUpdate, DeleteResponse

router = APIRouter()


@router.get("/", response_model=list[Deal])
async def list_deals(
    service: CRMServiceDep,
    customer_id: str | None = None,
) -> list[Deal]:
    """List deals, optionally only those of one customer."""
    return await service.list_deals(customer_id=customer_id)


@router.get("/{deal_id}", response_model=Deal)
async def get_deal(deal_id: str, service: CRMServiceDep) -> Deal:
    deal = await service.get_deal(deal_id)
    if deal is None:
        raise HTTPException(status_code=404, detail="Deal not found")
    return deal


@router.post("/", response_model=Deal, status_code=201)
async def create_deal(body: DealCreate, service: CRMServiceDep) -> Deal:
    """Open a deal. Status follows the stage unless given explicitly."""
    return await service.create_deal(body.model_dump(exclude_unset=True, exclude_none=True))


@router.put("/{deal_id}", response_model=Deal)
@router.patch("/{deal_id}", response_model=Deal)
async def update_deal(
    deal_id: str,
    body: DealUpdate,
    service: CRMServiceDep,
) -> Deal:
    """Update stage, status, value or any other deal field."""
    update_data = body.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No fields to update")
    return await service.update_deal(deal_id, update_data)


@router.delete("/{deal_id}", response_model=DeleteResponse)
async def delete_deal(deal_id: str, service: CRMServiceDep) -> DeleteResponse:
    return await service.delete_deal(deal_id)
