"""Human-readable rendering helpers for response payload values."""

import math
from datetime import datetime, timezone
from typing import Final

BYTES_PER_MEGABYTE: Final[int] = 1024 * 1024


def _domain_round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def domain_format_megabytes(byte_count: int) -> str:
    """Render a byte counter as a rounded megabyte label.

    Args:
        byte_count: Non-negative number of bytes.

    Returns:
        str: Label in `<N> MB` form, where halves round up.

    Raises:
        ValueError: Raised when byte_count is negative.
    """

    if byte_count < 0:
        raise ValueError("byte_count must not be negative")
    return f"{_domain_round_half_up(byte_count / BYTES_PER_MEGABYTE)} MB"


def domain_format_seconds(seconds: float) -> str:
    """Render elapsed seconds as a rounded `<N> seconds` label.

    Args:
        seconds: Non-negative elapsed seconds.

    Returns:
        str: Rounded seconds label.

    Raises:
        ValueError: Raised when seconds is negative.
    """

    if seconds < 0:
        raise ValueError("seconds must not be negative")
    return f"{_domain_round_half_up(seconds)} seconds"


def domain_format_timestamp(moment: datetime) -> str:
    """Render a timezone-aware moment as UTC ISO-8601 with millisecond precision.

    Example: `2026-01-05T09:30:00.125Z`.
    """

    if moment.tzinfo is None:
        raise ValueError("moment must be timezone-aware")
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc_moment.microsecond // 1000:03d}Z"
