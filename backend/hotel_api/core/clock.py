"""Injectable wall-clock source."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current instant in UTC."""
    return datetime.now(UTC)


def fixed_clock(instant: datetime) -> Clock:
    """Return a clock pinned to ``instant`` (naive values are treated as UTC)."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)

    def _now() -> datetime:
        return instant

    return _now


__all__ = ["Clock", "fixed_clock", "system_clock"]
