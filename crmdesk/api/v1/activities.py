from __future__ import annotations

from fastapi import APIRouter, Query

from crmdesk.api.deps import CRMServiceDep
from crmdesk.core.config import settings
from crmdesk.schemas import Activity

router = APIRouter()


@router.get("/", response_model=list[Activity])
async def list_activities(
    service: CRMServiceDep,
    limit: int | None = Query(None, ge=1, le=100),
) -> list[Activity]:
    """Recent activity feed, newest first."""
    return await service.list_activities(limit or settings.activity_feed_limit)
