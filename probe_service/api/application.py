"""FastAPI application factory for the probe service.

This module composes the informational root endpoint with the health and
metrics routers. No request body parsing is installed because no route reads
a body.
"""

from collections.abc import Callable
from datetime import datetime

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse

from probe_service.config import AppSettings
from probe_service.domain import WELCOME_MESSAGE, WelcomeInfo
from probe_service.runtime import ProcessStatsPort, runtime_utc_now

from .routers import api_create_health_router, api_create_metrics_router


def create_api_application(
    settings: AppSettings,
    process_stats: ProcessStatsPort,
    clock: Callable[[], datetime] = runtime_utc_now,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for response metadata.
        process_stats: Process introspection service for uptime and memory counters.
        clock: Wall-clock source for response timestamps.

    Returns:
        FastAPI: Framework application instance with all probe routes.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(title="Probe Service", version=settings.app_version)

    @application.get("/", tags=["info"])
    def api_welcome_info() -> JSONResponse:
        """Return welcome text with environment, host and version labels.

        Returns:
            JSONResponse: Informational payload with HTTP 200.
        """

        welcome_info = WelcomeInfo(
            message=WELCOME_MESSAGE,
            environment=settings.environment_name,
            hostname=settings.hostname,
            version=settings.app_version,
        )
        return JSONResponse(content=welcome_info.to_payload(), status_code=status.HTTP_200_OK)

    application.include_router(
        api_create_health_router(settings=settings, process_stats=process_stats, clock=clock)
    )
    application.include_router(api_create_metrics_router(process_stats=process_stats, clock=clock))

    return application
