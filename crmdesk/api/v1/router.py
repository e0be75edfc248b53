from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from crmdesk.api.v1 import (
    activities,
    contacts,
    customers,
    dashboard,
    deals,
    health,
)
from crmdesk.schemas import ErrorResponse

# Documented error bodies for the CRUD routers
_CRUD_ERRORS: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}

api_v1_router = APIRouter()

api_v1_router.include_router(health.router, tags=["Health"])
api_v1_router.include_router(
    customers.router, prefix="/customers", tags=["Customers"], responses=_CRUD_ERRORS
)
api_v1_router.include_router(
    contacts.router, prefix="/contacts", tags=["Contacts"], responses=_CRUD_ERRORS
)
api_v1_router.include_router(deals.router, prefix="/deals", tags=["Deals"], responses=_CRUD_ERRORS)
api_v1_router.include_router(activities.router, prefix="/activities", tags=["Activities"])
api_v1_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
