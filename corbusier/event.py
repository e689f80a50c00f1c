"""Versioned event envelopes that allow stored events to be migrated on read."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from corbusier.clock import Clock, SystemClock

__all__ = ["EventMetadata", "VersionedEvent", "U32_MAX"]

U32_MAX = 2**32 - 1

_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


def _format_timestamp(value: datetime) -> str:
    text = value.astimezone(timezone.utc).isoformat()
    return text[: -len("+00:00")] + "Z" if text.endswith("+00:00") else text


def _parse_timestamp(text: Any) -> datetime:
    if not isinstance(text, str):
        raise ValueError("timestamp must be a string")
    match = _TIMESTAMP.match(text)
    if match is None:
        raise ValueError(f"invalid timestamp: {text!r}")
    fraction = match["fraction"]
    micros = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    offset = "+00:00" if match["offset"] in ("Z", "z") else match["offset"]
    parsed = datetime.fromisoformat(match["base"].replace(" ", "T") + micros + offset)
    return parsed.astimezone(timezone.utc)


def _check_version(version: Any) -> None:
    if isinstance(version, bool) or not isinstance(version, int):
        raise TypeError("event version must be an integer")
    if not 0 <= version <= U32_MAX:
        raise ValueError(f"event version {version} is outside 0..{U32_MAX}")


@dataclass(frozen=True)
class EventMetadata:
    """When and where an event occurred."""

    occurred_at: datetime
    source: str | None = None
    correlation_id: str | None = None

    def __post_init__(self) -> None:
        if self.occurred_at.tzinfo is None or self.occurred_at.utcoffset() is None:
            raise ValueError("event timestamp must be timezone-aware")

    @classmethod
    def now(cls, clock: Clock | None = None) -> EventMetadata:
        """Create metadata stamped with the clock's current time."""
        return cls(occurred_at=(clock or SystemClock()).utc())

    def with_source(self, source: str) -> EventMetadata:
        """Return a copy naming the system that produced the event."""
        return dataclasses.replace(self, source=source)

    def with_correlation_id(self, correlation_id: str) -> EventMetadata:
        """Return a copy carrying a correlation id for tracing."""
        return dataclasses.replace(self, correlation_id=correlation_id)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"occurred_at": _format_timestamp(self.occurred_at)}
        if self.source is not None:
            result["source"] = self.source
        if self.correlation_id is not None:
            result["correlation_id"] = self.correlation_id
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EventMetadata:
        if not isinstance(data, dict):
            raise ValueError("event metadata must be an object")
        if "occurred_at" not in data:
            raise ValueError("event metadata is missing field 'occurred_at'")
        for key in ("source", "correlation_id"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"event metadata field '{key}' must be a string")
        return cls(
            occurred_at=_parse_timestamp(data["occurred_at"]),
            source=data.get("source"),
            correlation_id=data.get("correlation_id"),
        )


@dataclass
class VersionedEvent:
    """An event tagged with the schema version of its data.

    Upgraders change ``version`` and ``data`` as they migrate the event.
    """

    version: int
    event_type: str
    data: Any
    metadata: EventMetadata = field(default_factory=EventMetadata.now)

    def __post_init__(self) -> None:
        _check_version(self.version)

    @classmethod
    def create(
        cls,
        version: int,
        event_type: str,
        data: Any,
        clock: Clock | None = None,
    ) -> VersionedEvent:
        """Create an event whose metadata is stamped with the clock's time."""
        return cls(version, event_type, data, EventMetadata.now(clock))

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "event_type": self.event_type,
            "data": self.data,
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VersionedEvent:
        """Load an event from its dictionary form; raises ValueError on bad data."""
        if not isinstance(data, dict):
            raise ValueError("event must be an object")
        for key in ("version", "event_type", "data", "metadata"):
            if key not in data:
                raise ValueError(f"event is missing field '{key}'")
        if not isinstance(data["event_type"], str):
            raise ValueError("event field 'event_type' must be a string")
        try:
            return cls(
                version=data["version"],
                event_type=data["event_type"],
                data=data["data"],
                metadata=EventMetadata.from_dict(data["metadata"]),
            )
        except TypeError as exc:
            raise ValueError(f"malformed event: {exc}") from exc