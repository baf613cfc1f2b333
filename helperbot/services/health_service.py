"""Health monitoring service."""

from datetime import datetime
from enum import Enum


class HealthStatus(str, Enum):
    """Health status enumeration."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class HealthChecker:
    """Tracks whether the bot is receiving updates."""

    def __init__(self, unhealthy_threshold: int = 3) -> None:
        """Initialize health checker.

        Args:
            unhealthy_threshold: Consecutive polling failures before unhealthy
        """
        self.unhealthy_threshold = unhealthy_threshold
        self.start_time = datetime.now()
        self.polling = False
        self.consecutive_failures = 0

    def set_polling_status(self, ok: bool) -> None:
        """Record the outcome of a getUpdates call.

        Args:
            ok: Whether the call succeeded
        """
        if ok:
            self.consecutive_failures = 0
        else:
            self.consecutive_failures += 1
        self.polling = ok

    def get_status(self) -> HealthStatus:
        """Get current health status.

        Returns:
            HealthStatus enum value
        """
        if self.consecutive_failures >= self.unhealthy_threshold:
            return HealthStatus.UNHEALTHY
        if not self.polling:
            return HealthStatus.DEGRADED
        return HealthStatus.HEALTHY

    def get_uptime(self) -> float:
        """Get application uptime in seconds.

        Returns:
            Uptime in seconds
        """
        return (datetime.now() - self.start_time).total_seconds()
