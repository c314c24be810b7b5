"""Clock — injectable source of DTO creation timestamps."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class IClock(Protocol):
    """Protocol for timestamp providers."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class UTCClock(IClock):
    """System clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
