"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the HTTP service.
"""

import logging

from probe_service.bootstrap import bootstrap_create_application, bootstrap_create_server
from probe_service.config import SettingsLoadError, config_load_settings, logging_configure

logger = logging.getLogger(__name__)


def main() -> None:
    """Serve the probe endpoints until a termination signal drains the server.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SystemExit: Raised with status 1 when configuration validation fails
            or the listening socket cannot be bound.
    """

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        logging_configure()
        logger.error("Startup configuration invalid", extra={"error": str(error)})
        raise SystemExit(1) from error

    application = bootstrap_create_application(settings=settings)
    server = bootstrap_create_server(settings=settings, application=application)
    server.run()


if __name__ == "__main__":
    main()
