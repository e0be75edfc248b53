from __future__ import annotations

from fastapi import APIRouter, HTTPException

from crmdesk.api.deps import CRMServiceDep
from crmdesk.schemas import Contact, ContactCreate, ContactUpdate, DeleteResponse

router = APIRouter()


@router.get("/", response_model=list[Contact])
async def list_contacts(
    service: CRMServiceDep,
    customer_id: str | None = None,
) -> list[Contact]:
    """List contacts, optionally only those of one customer."""
    return await service.list_contacts(customer_id=customer_id)


@router.get("/{contact_id}", response_model=Contact)
async def get_contact(contact_id: str, service: CRMServiceDep) -> Contact:
    contact = await service.get_contact(contact_id)
    if contact is None:
        raise HTTPException(status_code=404, detail="Contact not found")
    return contact


@router.post("/", response_model=Contact, status_code=201)
async def create_contact(body: ContactCreate, service: CRMServiceDep) -> Contact:
    return await service.create_contact(body.model_dump(exclude_unset=True, exclude_none=True))


@router.put("/{contact_id}", response_model=Contact)
@router.patch("/{contact_id}", response_model=Contact)
async def update_contact(
    contact_id: str,
    body: ContactUpdate,
    service: CRMServiceDep,
) -> Contact:
    update_data = body.model_dump(exclude_unset=True, exclude_none=True)
    if not update_data:
        raise HTTPException(status_code=400, detail="No fields to update")
    return await service.update_contact(contact_id, update_data)


@router.delete("/{contact_id}", response_model=DeleteResponse)
async def delete_contact(contact_id: str, service: CRMServiceDep) -> DeleteResponse:
    return await service.delete_contact(contact_id)
