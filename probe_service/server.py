"""uvicorn server wrapper that owns the listening sockets and logs lifecycle events."""

import logging
import signal
import socket
from types import FrameType

import uvicorn

from probe_service.config import AppSettings

logger = logging.getLogger(__name__)


class ProbeServer(uvicorn.Server):
    """uvicorn server that reports bind and graceful shutdown progress.

    On a termination signal uvicorn stops accepting connections, lets
    in-flight requests finish and only then closes the listening sockets.
    Without `shutdown_timeout_seconds` that drain is unbounded.
    """

    def __init__(self, config: uvicorn.Config, settings: AppSettings):
        """Initialize probe server.

        Args:
            config: uvicorn configuration bound to the API application.
            settings: Validated settings used for startup log lines.

        Raises:
            ValueError: Raised when settings is None.
        """

        if settings is None:
            raise ValueError("settings must not be None")
        super().__init__(config)
        self._settings = settings

    @property
    def bound_port(self) -> int:
        """Return the port of the first listening socket, or the configured port before bind."""

        # uvicorn only creates `servers` during startup.
        for server in getattr(self, "servers", []):
            for listening_socket in server.sockets:
                return int(listening_socket.getsockname()[1])
        return int(self.config.port)

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit:
            return
        logger.info(f"Server running on port {self.bound_port}", extra={"port": self.bound_port})
        logger.info(f"Environment: {self._settings.environment_name}")
        logger.info(f"Version: {self._settings.app_version}")

    def handle_exit(self, sig: int, frame: FrameType | None) -> None:
        if not self.should_exit:
            signal_name = signal.Signals(sig).name
            logger.info(f"{signal_name} signal received: closing HTTP server", extra={"signal": signal_name})
        super().handle_exit(sig, frame)

    async def shutdown(self, sockets: list[socket.socket] | None = None) -> None:
        await super().shutdown(sockets=sockets)
        logger.info("HTTP server closed")
