"""
Health check implementations for the application.
"""

import time
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from repairtrack.config.logging import get_logger
from repairtrack.config.settings import Settings

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, db_session: AsyncSession, app_settings: Settings):
        self.db_session = db_session
        self.settings = app_settings
        self.checks = {
            "database": self._check_database,
            "whatsapp": self._check_whatsapp,
        }

    async def run_health_checks(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}

        for check_name, check_func in self.checks.items():
            try:
                results[check_name] = await check_func()
            except Exception as e:
                logger.error("Health check failed", check_name=check_name, error=str(e))
                results[check_name] = {"status": "error", "error": str(e)}

        return results

    async def check_readiness(self) -> bool:
        """The service is ready when the database answers."""
        result = await self._check_database()
        return result["status"] == "healthy"

    async def _check_database(self) -> Dict[str, Any]:
        """Check database health."""
        start_time = time.time()
        try:
            await self.db_session.execute(text("SELECT 1"))
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return {"status": "unhealthy", "error": str(e)}

        return {
            "status": "healthy",
            "response_time_ms": (time.time() - start_time) * 1000,
        }

    async def _check_whatsapp(self) -> Dict[str, Any]:
        """Report whether notification credentials are configured.

        Missing credentials are not fatal: job operations keep working and
        notifications are dropped with a warning.
        """
        if self.settings.twilio_configured:
            return {"status": "healthy"}
        return {"status": "degraded", "error": "Twilio credentials not configured"}
