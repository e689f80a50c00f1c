"""Clock abstraction so that timestamps can be made deterministic in tests."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime, timezone

__all__ = ["Clock", "SystemClock", "FixedClock"]


class Clock(abc.ABC):
    """Source of the current time in UTC."""

    @abc.abstractmethod
    def utc(self) -> datetime:
        """Return the current instant as a timezone-aware UTC datetime."""


class SystemClock(Clock):
    """Clock backed by the system's wall-clock time."""

    def utc(self) -> datetime:
        return datetime.now(timezone.utc)

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock(Clock):
    """Clock that always reports the same instant."""

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None or self.instant.utcoffset() is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        object.__setattr__(self, "instant", self.instant.astimezone(timezone.utc))

    def utc(self) -> datetime:
        return self.instant