"""Application bootstrap wiring for startup validation and dependency assembly."""

import uvicorn
from fastapi import FastAPI

from probe_service.api import create_api_application
from probe_service.config import AppSettings, config_load_settings, logging_configure
from probe_service.runtime import PsutilProcessStatsService
from probe_service.server import ProbeServer


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Already validated settings, loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings if settings is not None else config_load_settings()
    logging_configure(level=resolved_settings.log_level)
    return create_api_application(
        settings=resolved_settings,
        process_stats=PsutilProcessStatsService(),
    )


def bootstrap_create_server(settings: AppSettings, application: FastAPI) -> ProbeServer:
    """Build the owned server handle for the application.

    Args:
        settings: Validated settings providing bind address and drain timeout.
        application: ASGI application to serve.

    Returns:
        ProbeServer: Server whose `run` blocks until graceful shutdown completes.

    Raises:
        ValueError: Raised when application is None.
    """

    if application is None:
        raise ValueError("application must not be None")
    server_config = uvicorn.Config(
        application,
        host=settings.app_host,
        port=settings.port,
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
        log_config=None,
    )
    return ProbeServer(config=server_config, settings=settings)
