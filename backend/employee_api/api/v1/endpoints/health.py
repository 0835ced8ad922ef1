from __future__ import annotations

import logging

from fastapi import APIRouter, Request

from employee_api.core.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(request: Request):
    services: dict[str, str] = {}

    controller = getattr(request.app.state, "employee_controller", None)
    try:
        if controller is None:
            services["storage"] = "not_configured"
        else:
            ok = await controller.repository.check_connection()
            services["storage"] = "ok" if ok else "error"
    except Exception:
        logger.exception("Storage health check failed")
        services["storage"] = "error"

    all_ok = all(v in ("ok", "not_configured") for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
