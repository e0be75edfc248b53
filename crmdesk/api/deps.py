from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from crmdesk.services.crm import CRMService


def get_crm_service(request: Request) -> CRMService:
    service: CRMService = request.app.state.crm_service
    return service


CRMServiceDep = Annotated[CRMService, Depends(get_crm_service)]

__all__ = ["CRMServiceDep", "get_crm_service"]
