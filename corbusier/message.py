"""The message aggregate and its builder."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

from corbusier.clock import Clock, SystemClock
from corbusier.content import ContentPart, content_part_from_dict, content_part_to_dict
from corbusier.ids import ConversationId, MessageId, SequenceNumber
from corbusier.metadata import MessageMetadata
from corbusier.role import Role

__all__ = ["MessageBuilderError", "Message", "MessageBuilder"]

_TIMESTAMP = re.compile(
    r"^(?P<base>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}:\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$"
)


class MessageBuilderError(ValueError):
    """Raised when a message would be created without any content parts."""

    def __init__(self, message: str = "message must contain at least one content part") -> None:
        super().__init__(message)


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
    offset = match["offset"]
    offset = "+00:00" if offset in ("Z", "z") else offset
    parsed = datetime.fromisoformat(match["base"].replace(" ", "T") + micros + offset)
    return parsed.astimezone(timezone.utc)


@dataclass(frozen=True)
class Message:
    """An immutable message within a conversation.

    Use :meth:`create` or :meth:`builder` to make new messages; the plain
    constructor performs no content check so stored data can be loaded as is.
    """

    id: MessageId
    conversation_id: ConversationId
    role: Role
    content: tuple[ContentPart, ...]
    created_at: datetime
    sequence_number: SequenceNumber
    metadata: MessageMetadata = field(default_factory=MessageMetadata)

    def __post_init__(self) -> None:
        object.__setattr__(self, "content", tuple(self.content))
        if self.created_at.tzinfo is None or self.created_at.utcoffset() is None:
            raise ValueError("message timestamp must be timezone-aware")

    @classmethod
    def create(
        cls,
        conversation_id: ConversationId,
        role: Role,
        content: Iterable[ContentPart],
        sequence_number: SequenceNumber,
        clock: Clock | None = None,
        message_id: MessageId | None = None,
    ) -> Message:
        """Create a message stamped with the clock's current time.

        Raises MessageBuilderError if ``content`` is empty.
        """
        parts = tuple(content)
        if not parts:
            raise MessageBuilderError()
        return cls(
            id=message_id if message_id is not None else MessageId.new(),
            conversation_id=conversation_id,
            role=role,
            content=parts,
            created_at=(clock or SystemClock()).utc(),
            sequence_number=sequence_number,
        )

    @classmethod
    def builder(
        cls,
        conversation_id: ConversationId,
        role: Role,
        sequence_number: SequenceNumber,
    ) -> MessageBuilder:
        """Return a builder for a message with metadata or a chosen id."""
        return MessageBuilder(conversation_id, role, sequence_number)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "conversation_id": str(self.conversation_id),
            "role": self.role.value,
            "content": [content_part_to_dict(part) for part in self.content],
            "metadata": self.metadata.to_dict(),
            "created_at": _format_timestamp(self.created_at),
            "sequence_number": self.sequence_number.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        """Load a message from its dictionary form; raises ValueError on bad data."""
        if not isinstance(data, dict):
            raise ValueError("message must be an object")
        try:
            raw_content = data["content"]
            if not isinstance(raw_content, list):
                raise ValueError("message field 'content' must be a list")
            return cls(
                id=MessageId.from_uuid(data["id"]),
                conversation_id=ConversationId.from_uuid(data["conversation_id"]),
                role=Role(data["role"]),
                content=tuple(content_part_from_dict(part) for part in raw_content),
                metadata=MessageMetadata.from_dict(data["metadata"]),
                created_at=_parse_timestamp(data["created_at"]),
                sequence_number=SequenceNumber(data["sequence_number"]),
            )
        except KeyError as exc:
            raise ValueError(f"message is missing field {exc}") from exc
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"malformed message: {exc}") from exc

    def to_json(self) -> str:
        """Serialise to compact JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> Message:
        """Load a message from JSON text; raises ValueError on bad input."""
        return cls.from_dict(json.loads(text))


class MessageBuilder:
    """Fluent builder for messages."""

    def __init__(
        self,
        conversation_id: ConversationId,
        role: Role,
        sequence_number: SequenceNumber,
    ) -> None:
        self._id: MessageId | None = None
        self._conversation_id = conversation_id
        self._role = role
        self._content: list[ContentPart] = []
        self._metadata = MessageMetadata()
        self._sequence_number = sequence_number

    def with_id(self, message_id: MessageId) -> MessageBuilder:
        """Use a specific message id."""
        self._id = message_id
        return self

    def with_content(self, part: ContentPart) -> MessageBuilder:
        """Append a content part."""
        self._content.append(part)
        return self

    def with_content_parts(self, parts: Iterable[ContentPart]) -> MessageBuilder:
        """Append several content parts."""
        self._content.extend(parts)
        return self

    def with_metadata(self, metadata: MessageMetadata) -> MessageBuilder:
        """Set the metadata."""
        self._metadata = metadata
        return self

    def build(self, clock: Clock | None = None) -> Message:
        """Build the message; raises MessageBuilderError if no content was added."""
        if not self._content:
            raise MessageBuilderError()
        return Message(
            id=self._id if self._id is not None else MessageId.new(),
            conversation_id=self._conversation_id,
            role=self._role,
            content=tuple(self._content),
            metadata=self._metadata,
            created_at=(clock or SystemClock()).utc(),
            sequence_number=self._sequence_number,
        )