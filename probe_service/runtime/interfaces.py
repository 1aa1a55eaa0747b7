"""Typed interfaces for process introspection services."""

from typing import Protocol

from probe_service.domain import MemoryUsage


class ProcessStatsPort(Protocol):
    """Port definition for reading process-wide uptime and memory counters."""

    def runtime_uptime_seconds(self) -> float:
        """Return elapsed seconds since process start.

        Returns:
            float: Non-negative, non-decreasing elapsed seconds.

        Raises:
            RuntimeError: Raised when the clock cannot be read.
        """

    def runtime_memory_usage(self) -> MemoryUsage:
        """Return the current memory counters of the running process.

        Returns:
            MemoryUsage: Byte counters sampled at call time.

        Raises:
            RuntimeError: Raised when the operating system refuses introspection.
        """
