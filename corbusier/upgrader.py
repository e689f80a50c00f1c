"""Upgraders that migrate events from older schema versions to the current one."""

from __future__ import annotations

import abc
import dataclasses

from corbusier.errors import MalformedDataError, UnknownEventTypeError, UnsupportedVersionError
from corbusier.event import VersionedEvent

__all__ = ["EventUpgrader", "MessageCreatedUpgrader", "UpgraderRegistry"]


class EventUpgrader(abc.ABC):
    """Migrates events of one type to the current schema version."""

    @abc.abstractmethod
    def upgrade(self, event: VersionedEvent) -> VersionedEvent:
        """Return the event at the current version; raises SchemaUpgradeError on failure."""

    @abc.abstractmethod
    def current_version(self) -> int:
        """Return the version this upgrader produces."""

    @abc.abstractmethod
    def supports_version(self, version: int) -> bool:
        """Return True if events at this version can be upgraded."""


class MessageCreatedUpgrader(EventUpgrader):
    """Upgrades ``MessageCreated`` events; v1 to v2 adds an empty ``metadata`` field."""

    CURRENT_VERSION = 2
    SUPPORTED_VERSIONS = frozenset({1, 2})

    def upgrade(self, event: VersionedEvent) -> VersionedEvent:
        if event.version == 1:
            return self._upgrade_v1_to_v2(event)
        if event.version == 2:
            return event
        raise UnsupportedVersionError(event.version)

    def current_version(self) -> int:
        return self.CURRENT_VERSION

    def supports_version(self, version: int) -> bool:
        return version in self.SUPPORTED_VERSIONS

    @staticmethod
    def _upgrade_v1_to_v2(event: VersionedEvent) -> VersionedEvent:
        if not isinstance(event.data, dict):
            raise MalformedDataError("expected event data to be an object")
        data = dict(event.data)
        data.setdefault("metadata", {})
        return dataclasses.replace(event, version=2, data=data)

    def __repr__(self) -> str:
        return "MessageCreatedUpgrader()"


class UpgraderRegistry:
    """Dispatches events to the upgrader registered for their type.

    A registry made with the plain constructor is empty; use
    :meth:`with_defaults` for one that already handles ``MessageCreated``.
    """

    def __init__(self) -> None:
        self._upgraders: dict[str, EventUpgrader] = {}

    @classmethod
    def with_defaults(cls) -> UpgraderRegistry:
        """Create a registry holding the built-in upgraders."""
        registry = cls()
        registry.register("MessageCreated", MessageCreatedUpgrader())
        return registry

    def register(self, event_type: str, upgrader: EventUpgrader) -> None:
        """Register an upgrader, replacing any already set for the event type."""
        self._upgraders[event_type] = upgrader

    def upgrade(self, event: VersionedEvent) -> VersionedEvent:
        """Upgrade the event; raises UnknownEventTypeError if no upgrader handles its type."""
        upgrader = self._upgraders.get(event.event_type)
        if upgrader is None:
            raise UnknownEventTypeError(event.event_type)
        return upgrader.upgrade(event)

    def has_upgrader(self, event_type: str) -> bool:
        """Return True if an upgrader is registered for the event type."""
        return event_type in self._upgraders

    def current_version(self, event_type: str) -> int | None:
        """Return the current version for the event type, or None if it is unknown."""
        upgrader = self._upgraders.get(event_type)
        return upgrader.current_version() if upgrader is not None else None