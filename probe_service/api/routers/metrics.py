"""Memory metrics endpoint router composition."""

from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from probe_service.domain import MemoryMetrics, domain_format_timestamp
from probe_service.runtime import ProcessStatsPort


def api_create_metrics_router(process_stats: ProcessStatsPort, clock: Callable[[], datetime]) -> APIRouter:
    """Create router exposing process memory metrics.

    Args:
        process_stats: Process introspection service for memory and uptime.
        clock: Wall-clock source for response timestamps.

    Returns:
        APIRouter: Router exposing `/metrics` endpoint.

    Raises:
        ValueError: Raised when process_stats is None.
    """

    if process_stats is None:
        raise ValueError("process_stats must not be None")

    router = APIRouter(tags=["metrics"])

    @router.get("/metrics")
    def api_memory_metrics() -> JSONResponse:
        """Return rounded memory counters and uptime.

        Returns:
            JSONResponse: Metrics payload with `<N> MB` counters.

        Raises:
            psutil.Error: Propagated when memory introspection fails.
        """

        memory_metrics = MemoryMetrics(
            memory=process_stats.runtime_memory_usage(),
            uptime_seconds=process_stats.runtime_uptime_seconds(),
            timestamp=domain_format_timestamp(clock()),
        )
        return JSONResponse(content=memory_metrics.to_payload(), status_code=status.HTTP_200_OK)

    return router
