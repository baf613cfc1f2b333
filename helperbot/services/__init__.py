"""Application services."""

from helperbot.services.health_service import HealthChecker, HealthStatus

__all__ = [
    "HealthChecker",
    "HealthStatus",
]
