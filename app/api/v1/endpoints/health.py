from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.config import settings
from app.core.dependencies import get_employee_service
from app.services.employee_service import EmployeeService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    service: EmployeeService = Depends(get_employee_service),  # noqa: B008
):
    services = {
        "store": "ok",
        "enrichment": "ok" if service.enrichment.initialized else "not_configured",
    }

    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "services": services,
        "employees": len(service.store),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
