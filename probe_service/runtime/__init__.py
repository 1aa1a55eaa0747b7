"""Runtime package for process-level introspection."""

from .interfaces import ProcessStatsPort
from .process_stats import PsutilProcessStatsService, runtime_utc_now

__all__ = ["ProcessStatsPort", "PsutilProcessStatsService", "runtime_utc_now"]
