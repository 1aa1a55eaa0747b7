"""Tests for server bind logging and graceful drain on termination signal.

These tests run a real server on an ephemeral loopback port in a worker
thread, where uvicorn leaves signal handlers untouched and the exit request is
delivered by calling `handle_exit` directly.
"""

from __future__ import annotations

import asyncio
import logging
import signal
import threading
import time

import httpx
import pytest
import uvicorn

from probe_service.api import create_api_application
from probe_service.bootstrap import bootstrap_create_server
from probe_service.config import AppSettings
from probe_service.runtime import PsutilProcessStatsService
from probe_service.server import ProbeServer


def _start_server(server: ProbeServer) -> threading.Thread:
    """Run server in a daemon thread and wait until it is accepting connections.

    Args:
        server: Server to run.

    Returns:
        threading.Thread: Thread running the server loop.

    Raises:
        AssertionError: Raised when the server does not start in time.
    """

    server_thread = threading.Thread(target=server.run, daemon=True)
    server_thread.start()
    deadline = time.monotonic() + 10.0
    while not server.started:
        if time.monotonic() > deadline or not server_thread.is_alive():
            raise AssertionError("server did not start")
        time.sleep(0.01)
    return server_thread


def test_server_drains_in_flight_request_before_closing(caplog: pytest.LogCaptureFixture) -> None:
    """Complete a slow in-flight request after SIGTERM, then stop listening.

    Args:
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate graceful drain behavior.

    Raises:
        AssertionError: Raised when the in-flight response is cut off.
    """

    caplog.set_level(logging.INFO)
    settings = AppSettings(_env_file=None, app_version="2.3.1")
    application = create_api_application(settings, PsutilProcessStatsService())
    request_started = threading.Event()

    async def slow_endpoint() -> dict[str, str]:
        request_started.set()
        await asyncio.sleep(0.5)
        return {"status": "done"}

    application.add_api_route("/slow", slow_endpoint, methods=["GET"])
    server = ProbeServer(
        config=uvicorn.Config(application, host="127.0.0.1", port=0, log_config=None),
        settings=settings,
    )
    server_thread = _start_server(server)
    bound_port = server.bound_port
    base_url = f"http://127.0.0.1:{bound_port}"

    responses: list[httpx.Response] = []
    client_thread = threading.Thread(target=lambda: responses.append(httpx.get(f"{base_url}/slow", timeout=10.0)))
    client_thread.start()
    assert request_started.wait(timeout=5.0)

    server.handle_exit(signal.SIGTERM, None)

    client_thread.join(timeout=10.0)
    server_thread.join(timeout=10.0)
    assert not server_thread.is_alive()
    assert responses[0].status_code == 200
    assert responses[0].json() == {"status": "done"}
    with pytest.raises(httpx.ConnectError):
        httpx.get(f"{base_url}/health", timeout=1.0)

    assert f"Server running on port {bound_port}" in caplog.messages
    assert "Environment: development" in caplog.messages
    assert "Version: 2.3.1" in caplog.messages
    assert "SIGTERM signal received: closing HTTP server" in caplog.messages
    assert caplog.messages.index("SIGTERM signal received: closing HTTP server") < caplog.messages.index(
        "HTTP server closed"
    )


def test_server_logs_termination_signal_only_once(caplog: pytest.LogCaptureFixture) -> None:
    """Log the first termination request and ignore repeats in the log."""

    caplog.set_level(logging.INFO)
    settings = AppSettings(_env_file=None)
    application = create_api_application(settings, PsutilProcessStatsService())
    server = ProbeServer(config=uvicorn.Config(application, log_config=None), settings=settings)

    server.handle_exit(signal.SIGTERM, None)
    server.handle_exit(signal.SIGTERM, None)

    assert server.should_exit
    assert caplog.messages.count("SIGTERM signal received: closing HTTP server") == 1


def test_bootstrap_create_server_binds_configured_address_and_drain_timeout() -> None:
    """Carry host, port and drain timeout from settings into the server config."""

    settings = AppSettings(_env_file=None, app_host="127.0.0.1", port=8088, shutdown_timeout_seconds=20)
    application = create_api_application(settings, PsutilProcessStatsService())

    server = bootstrap_create_server(settings=settings, application=application)

    assert isinstance(server, ProbeServer)
    assert server.config.host == "127.0.0.1"
    assert server.config.port == 8088
    assert server.config.timeout_graceful_shutdown == 20
    assert server.bound_port == 8088


def test_server_bound_port_reports_configured_port_before_startup() -> None:
    """Report the configured port while no listening socket exists yet.

    Returns:
        None: Assertions validate the pre-bind port.

    Raises:
        AssertionError: Raised when the configured port is not reported.
    """

    settings = AppSettings(_env_file=None)
    application = create_api_application(settings, PsutilProcessStatsService())
    server = ProbeServer(config=uvicorn.Config(application, port=8089, log_config=None), settings=settings)

    assert server.bound_port == 8089


def test_server_drains_on_interrupt_signal_logged_by_name(caplog: pytest.LogCaptureFixture) -> None:
    """Treat SIGINT as a termination request and log it under its own name."""

    caplog.set_level(logging.INFO)
    settings = AppSettings(_env_file=None)
    application = create_api_application(settings, PsutilProcessStatsService())
    server = ProbeServer(config=uvicorn.Config(application, log_config=None), settings=settings)

    server.handle_exit(signal.SIGINT, None)

    assert server.should_exit
    assert "SIGINT signal received: closing HTTP server" in caplog.messages
