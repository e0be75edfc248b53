from __future__ import annotations

import time

from fastapi import APIRouter

from crmdesk import __version__
from crmdesk.api.deps import CRMServiceDep
from crmdesk.schemas import DependencyHealth, HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(service: CRMServiceDep) -> HealthCheckResponse:
    """Check service health and store status."""
    dependencies: dict[str, DependencyHealth] = {}

    # Check store
    try:
        start = time.monotonic()
        await service.store.ping()
        latency = (time.monotonic() - start) * 1000
        dependencies["store"] = DependencyHealth(
            name="store",
            status="ok",
            latency_ms=round(latency, 2),
        )
    except Exception as exc:
        dependencies["store"] = DependencyHealth(
            name="store",
            status="error",
            message=str(exc),
        )

    statuses = [dep.status for dep in dependencies.values()]
    overall = "ok" if all(s == "ok" for s in statuses) else "degraded"

    return HealthCheckResponse(
        status=overall,
        version=__version__,
        dependencies=dependencies,
    )
