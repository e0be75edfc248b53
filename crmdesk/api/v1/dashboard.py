from __future__ import annotations

from fastapi import APIRouter

from crmdesk.api.deps import CRMServiceDep
from crmdesk.schemas import DashboardStats

router = APIRouter()


@router.get("/stats", response_model=DashboardStats)
async def get_dashboard_stats(service: CRMServiceDep) -> DashboardStats:
    """Counts, pipeline buckets and top customers, computed from current data."""
    return await service.dashboard_stats()
