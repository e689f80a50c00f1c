"""The interface through which messages are stored and retrieved."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from corbusier.ids import ConversationId, MessageId, SequenceNumber
    from corbusier.message import Message

__all__ = ["MessageRepository"]


class MessageRepository(abc.ABC):
    """Asynchronous message store.

    Implementations must keep message ids unique across the system and
    sequence numbers unique within a conversation, must never modify a stored
    message, and must be safe to use concurrently. Failures are reported by
    raising a ``RepositoryError``.
    """

    @abc.abstractmethod
    async def store(self, message: Message) -> None:
        """Store a new message; a message with the same id must not already exist."""

    @abc.abstractmethod
    async def find_by_id(self, message_id: MessageId) -> Message | None:
        """Return the message with this id, or None if there is none."""

    @abc.abstractmethod
    async def find_by_conversation(self, conversation_id: ConversationId) -> list[Message]:
        """Return the conversation's messages ordered by sequence number."""

    @abc.abstractmethod
    async def next_sequence_number(self, conversation_id: ConversationId) -> SequenceNumber:
        """Return the next sequence number; 1 for a conversation with no messages."""

    @abc.abstractmethod
    async def exists(self, message_id: MessageId) -> bool:
        """Return True if a message with this id has been stored."""