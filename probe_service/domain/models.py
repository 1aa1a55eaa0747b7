"""Typed response contracts built fresh for every request.

None of these snapshots is stored; each one is rendered to a JSON object
through `to_payload`.
"""

from dataclasses import dataclass
from typing import Any, Literal

from .formatting import domain_format_megabytes, domain_format_seconds

WELCOME_MESSAGE = "Welcome to the Demo Application!"

ServiceStatusLabel = Literal["healthy", "ready"]


@dataclass(frozen=True)
class ServiceStatus:
    """Liveness snapshot returned by the health endpoint.

    Attributes:
        status: Liveness label, always `healthy` while the process serves requests.
        timestamp: ISO-8601 response construction time.
        uptime: Seconds since process start.
        version: Configured application version.
    """

    status: ServiceStatusLabel
    timestamp: str
    uptime: float
    version: str

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON object for this snapshot."""

        return {
            "status": self.status,
            "timestamp": self.timestamp,
            "uptime": self.uptime,
            "version": self.version,
        }


@dataclass(frozen=True)
class ReadinessStatus:
    """Readiness snapshot returned by the readiness endpoint."""

    status: Literal["ready"]
    timestamp: str

    def to_payload(self) -> dict[str, Any]:
        return {"status": self.status, "timestamp": self.timestamp}


@dataclass(frozen=True)
class WelcomeInfo:
    """Informational payload for the root endpoint.

    Attributes:
        message: Fixed welcome text.
        environment: Deployment environment label.
        hostname: Configured host label.
        version: Configured application version.
    """

    message: str
    environment: str
    hostname: str
    version: str

    def to_payload(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "environment": self.environment,
            "hostname": self.hostname,
            "version": self.version,
        }


@dataclass(frozen=True)
class MemoryUsage:
    """Raw process memory counters in bytes.

    Attributes:
        rss_bytes: Resident set size.
        heap_total_bytes: Memory reserved by the process.
        heap_used_bytes: Heap memory in use.
        external_bytes: Memory outside the managed heap.
    """

    rss_bytes: int
    heap_total_bytes: int
    heap_used_bytes: int
    external_bytes: int


@dataclass(frozen=True)
class MemoryMetrics:
    """Memory metrics snapshot returned by the metrics endpoint.

    Attributes:
        memory: Raw memory counters sampled for this response.
        uptime_seconds: Seconds since process start.
        timestamp: ISO-8601 response construction time.
    """

    memory: MemoryUsage
    uptime_seconds: float
    timestamp: str

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON object with human-readable counters.

        Returns:
            dict[str, Any]: Counters nested under `memory` as `<N> MB` labels,
            plus `<N> seconds` uptime and the timestamp.

        Raises:
            ValueError: Raised when a counter or the uptime is negative.
        """

        return {
            "memory": {
                "rss": domain_format_megabytes(self.memory.rss_bytes),
                "heapTotal": domain_format_megabytes(self.memory.heap_total_bytes),
                "heapUsed": domain_format_megabytes(self.memory.heap_used_bytes),
                "external": domain_format_megabytes(self.memory.external_bytes),
            },
            "uptime": domain_format_seconds(self.uptime_seconds),
            "timestamp": self.timestamp,
        }
