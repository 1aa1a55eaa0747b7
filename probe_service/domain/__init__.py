"""Domain models used across application layer boundaries."""

from .formatting import domain_format_megabytes, domain_format_seconds, domain_format_timestamp
from .models import (
    WELCOME_MESSAGE,
    MemoryMetrics,
    MemoryUsage,
    ReadinessStatus,
    ServiceStatus,
    WelcomeInfo,
)

__all__ = [
    "WELCOME_MESSAGE",
    "MemoryMetrics",
    "MemoryUsage",
    "ReadinessStatus",
    "ServiceStatus",
    "WelcomeInfo",
    "domain_format_megabytes",
    "domain_format_seconds",
    "domain_format_timestamp",
]
