"""Health and readiness endpoint router composition."""

from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from probe_service.config import AppSettings
from probe_service.domain import ReadinessStatus, ServiceStatus, domain_format_timestamp
from probe_service.runtime import ProcessStatsPort


def api_create_health_router(
    settings: AppSettings,
    process_stats: ProcessStatsPort,
    clock: Callable[[], datetime],
) -> APIRouter:
    """Create router exposing liveness and readiness checks.

    Args:
        settings: Validated settings providing the reported version.
        process_stats: Process introspection service used for uptime.
        clock: Wall-clock source for response timestamps.

    Returns:
        APIRouter: Router exposing `/health` and `/ready` endpoints.

    Raises:
        ValueError: Raised when process_stats is None.
    """

    if process_stats is None:
        raise ValueError("process_stats must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health")
    def api_health_status() -> JSONResponse:
        """Return liveness state with uptime and version.

        Returns:
            JSONResponse: Liveness payload for orchestrator restart decisions.
        """

        service_status = ServiceStatus(
            status="healthy",
            timestamp=domain_format_timestamp(clock()),
            uptime=process_stats.runtime_uptime_seconds(),
            version=settings.app_version,
        )
        return JSONResponse(content=service_status.to_payload(), status_code=status.HTTP_200_OK)

    @router.get("/ready")
    def api_ready_status() -> JSONResponse:
        """Return readiness state for traffic routing decisions."""

        readiness_status = ReadinessStatus(status="ready", timestamp=domain_format_timestamp(clock()))
        return JSONResponse(content=readiness_status.to_payload(), status_code=status.HTTP_200_OK)

    return router
