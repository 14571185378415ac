"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession

from repairtrack.api.dependencies import AppSettingsDep, get_app_settings
from repairtrack.config.database import get_db_session
from repairtrack.config.logging import get_logger
from repairtrack.config.settings import Settings
from repairtrack.infrastructure.monitoring.health_checks import HealthChecker
from repairtrack.infrastructure.monitoring.metrics import (
    get_metrics,
    get_metrics_content_type,
)

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def get_health_checker(
    db: AsyncSession = Depends(get_db_session),
    app_settings: Settings = Depends(get_app_settings),
) -> HealthChecker:
    """Get health checker instance."""
    return HealthChecker(db, app_settings)


@router.get("")
async def health_check(
    health_checker: HealthChecker = Depends(get_health_checker),
) -> Dict[str, Any]:
    """Component health; degraded notifications do not make the service unhealthy."""
    checks = await health_checker.run_health_checks()
    healthy = checks["database"]["status"] == "healthy"

    return {
        "status": "healthy" if healthy else "unhealthy",
        "checks": checks,
        "timestamp": _timestamp(),
    }


@router.get("/ready")
async def readiness_check(
    health_checker: HealthChecker = Depends(get_health_checker),
) -> Dict[str, Any]:
    """Readiness check for Kubernetes."""
    if not await health_checker.check_readiness():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return {"status": "ready", "timestamp": _timestamp()}


@router.get("/metrics")
async def prometheus_metrics(app_settings: AppSettingsDep) -> Response:
    """Prometheus metrics endpoint."""
    if not app_settings.ENABLE_METRICS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Metrics are disabled",
        )

    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
