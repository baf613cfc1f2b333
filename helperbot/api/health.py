"""Health check endpoints for monitoring."""

from datetime import datetime

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from helperbot import __version__
from helperbot.services.health_service import HealthChecker, HealthStatus

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Health status response model."""

    status: HealthStatus
    timestamp: datetime
    polling: bool
    consecutive_failures: int
    uptime_seconds: float
    version: str


def get_health_checker(request: Request) -> HealthChecker:
    """Get the health checker for FastAPI dependency injection.

    Returns:
        HealthChecker attached to the application by create_app
    """
    return request.app.state.health_checker


@router.get("", response_class=PlainTextResponse)
async def health_check() -> str:
    """Plain liveness check for platform health checks."""
    return "OK"


@router.get("/status", response_model=HealthResponse)
async def health_status(
    health_checker: HealthChecker = Depends(get_health_checker),  # noqa: B008
) -> HealthResponse:
    """Detailed health status.

    Returns:
        HealthResponse with current status
    """
    return HealthResponse(
        status=health_checker.get_status(),
        timestamp=datetime.now(),
        polling=health_checker.polling,
        consecutive_failures=health_checker.consecutive_failures,
        uptime_seconds=health_checker.get_uptime(),
        version=__version__,
    )


@router.get("/live")
async def liveness_check(
    health_checker: HealthChecker = Depends(get_health_checker),  # noqa: B008
) -> dict[str, bool | float]:
    """Liveness check endpoint.

    Returns:
        Dictionary indicating liveness status
    """
    return {"alive": True, "uptime_seconds": health_checker.get_uptime()}


def create_app(health_checker: HealthChecker) -> FastAPI:
    """Build the health server application.

    Args:
        health_checker: Checker updated by the update poller
    """
    app = FastAPI(
        title="helperbot",
        description="Health endpoints for the helper bot",
        version=__version__,
        docs_url=None,
        redoc_url=None,
    )
    app.state.health_checker = health_checker
    app.include_router(router)
    return app
