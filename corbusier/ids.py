"""Identifier value types for messages, conversations and turns."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

__all__ = [
    "Identifier",
    "MessageId",
    "ConversationId",
    "TurnId",
    "SequenceNumber",
    "SEQUENCE_MAX",
]

SEQUENCE_MAX = 2**64 - 1


@dataclass(frozen=True)
class Identifier:
    """A UUID-backed identifier. Constructing one without a value picks a random UUID."""

    value: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.value, uuid.UUID):
            raise TypeError(f"{type(self).__name__} requires a UUID, got {type(self.value).__name__}")

    @classmethod
    def new(cls):
        """Create an identifier from a fresh random UUID."""
        return cls(uuid.uuid4())

    @classmethod
    def from_uuid(cls, value):
        """Create an identifier from an existing UUID or its string form."""
        if isinstance(value, str):
            value = uuid.UUID(value)
        return cls(value)

    def is_nil(self) -> bool:
        """Return True if the underlying UUID is the nil UUID."""
        return self.value.int == 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MessageId(Identifier):
    """Unique identifier of a message."""


@dataclass(frozen=True)
class ConversationId(Identifier):
    """Unique identifier of a conversation thread."""


@dataclass(frozen=True)
class TurnId(Identifier):
    """Identifier of a single interaction turn within a conversation."""


@dataclass(frozen=True, order=True)
class SequenceNumber:
    """Position of a message within its conversation (unsigned 64-bit)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("sequence number must be an integer")
        if not 0 <= self.value <= SEQUENCE_MAX:
            raise ValueError(f"sequence number {self.value} is outside 0..{SEQUENCE_MAX}")

    def next(self) -> SequenceNumber:
        """Return the following sequence number, saturating at the maximum."""
        return SequenceNumber(min(self.value + 1, SEQUENCE_MAX))

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)