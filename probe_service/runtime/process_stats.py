"""psutil-backed process introspection for uptime and memory counters."""

import time
from collections.abc import Callable
from datetime import datetime, timezone

import psutil

from probe_service.domain import MemoryUsage

from .interfaces import ProcessStatsPort


def _runtime_process_started_monotonic() -> float:
    """Translate the operating system process creation time onto the monotonic clock."""

    elapsed_since_creation = max(0.0, time.time() - psutil.Process().create_time())
    return time.monotonic() - elapsed_since_creation


_PROCESS_STARTED_MONOTONIC = _runtime_process_started_monotonic()


def runtime_utc_now() -> datetime:
    """Return the current wall-clock time in UTC."""

    return datetime.now(timezone.utc)


class PsutilProcessStatsService(ProcessStatsPort):
    """Process stats service backed by psutil and a monotonic clock.

    Uptime counts from process creation as reported by psutil, measured on a
    monotonic clock so it never decreases. Memory counters map onto the
    CPython process as follows: `rss` is the resident set size, heap total is
    the reserved virtual memory size, heap used is the data segment where the
    platform reports one (otherwise rss), and external is shared memory where
    reported (otherwise zero).
    """

    def __init__(
        self,
        process: psutil.Process | None = None,
        started_monotonic: float | None = None,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        """Initialize process stats service.

        Args:
            process: psutil process handle, defaults to the current process.
            started_monotonic: Monotonic reading taken at process start.
            monotonic: Monotonic clock used to measure uptime.

        Raises:
            ValueError: Raised when monotonic is None.
        """

        if monotonic is None:
            raise ValueError("monotonic must not be None")
        self._process = process if process is not None else psutil.Process()
        self._started_monotonic = _PROCESS_STARTED_MONOTONIC if started_monotonic is None else started_monotonic
        self._monotonic = monotonic

    def runtime_uptime_seconds(self) -> float:
        """Return elapsed seconds since process start.

        Returns:
            float: Non-negative elapsed seconds.

        Raises:
            RuntimeError: This implementation does not raise runtime errors.
        """

        return max(0.0, self._monotonic() - self._started_monotonic)

    def runtime_memory_usage(self) -> MemoryUsage:
        """Sample memory counters of the process.

        Returns:
            MemoryUsage: Byte counters sampled at call time.

        Raises:
            psutil.Error: Raised when the process cannot be inspected.
        """

        memory_info = self._process.memory_info()
        return MemoryUsage(
            rss_bytes=int(memory_info.rss),
            heap_total_bytes=int(memory_info.vms),
            heap_used_bytes=int(getattr(memory_info, "data", memory_info.rss)),
            external_bytes=int(getattr(memory_info, "shared", 0)),
        )
