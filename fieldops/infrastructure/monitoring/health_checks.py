"""
Health check implementations for the application.
"""

import asyncio
from datetime import datetime, timezone
from typing import Any, Callable, Dict

from fieldops.config.logging import get_logger
from fieldops.config.settings import settings
from fieldops.infrastructure.database.connection import get_database_health

logger = get_logger(__name__)


class HealthChecker:
    """Health checker for application components."""

    def __init__(self, checks: Dict[str, Callable] = None):
        self.checks = checks or {
            "database": self._check_database,
        }

    async def run_health_checks(self) -> Dict[str, Any]:
        """Run all health checks."""
        results = {}

        for check_name, check_func in self.checks.items():
            try:
                results[check_name] = await asyncio.wait_for(
                    check_func(), timeout=settings.HEALTH_CHECK_TIMEOUT
                )
            except Exception as e:
                logger.error("Health check failed", check_name=check_name, error=str(e))
                results[check_name] = {"status": "error", "error": str(e)}

        return results

    async def check_readiness(self) -> bool:
        """Check that every component is healthy."""
        results = await self.run_health_checks()
        return all(result.get("status") == "healthy" for result in results.values())

    async def check_all_components(self) -> Dict[str, Any]:
        """Detailed status of every component."""
        components = await self.run_health_checks()
        healthy = all(result.get("status") == "healthy" for result in components.values())
        return {
            "status": "healthy" if healthy else "unhealthy",
            "components": components,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": settings.APP_VERSION,
        }

    async def _check_database(self) -> Dict[str, Any]:
        """Check database health."""
        health_info = await get_database_health()

        if health_info["status"] == "healthy":
            return {
                "status": "healthy",
                "response_time_ms": health_info.get("response_time_ms", 0),
            }
        return {
            "status": "unhealthy",
            "error": health_info.get("error", "Unknown database error"),
        }
