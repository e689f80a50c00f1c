"""Validation settings and the interface that message validators implement."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from corbusier.message import Message

__all__ = ["ValidationConfig", "MessageValidator"]


@dataclass(frozen=True)
class ValidationConfig:
    """Limits and switches that govern message validation."""

    max_message_size_bytes: int = 1024 * 1024
    max_content_parts: int = 100
    max_text_length: int = 100_000
    allow_empty_text: bool = False

    @classmethod
    def lenient(cls) -> ValidationConfig:
        """Default limits, but empty or whitespace-only text is allowed."""
        return cls(allow_empty_text=True)

    @classmethod
    def strict(cls) -> ValidationConfig:
        """Reduced limits for resource-constrained settings."""
        return cls(
            max_message_size_bytes=256 * 1024,
            max_content_parts=20,
            max_text_length=10_000,
            allow_empty_text=False,
        )


class MessageValidator(abc.ABC):
    """Checks messages against structural, content and size rules.

    Each method returns the message when it passes and raises a
    ``ValidationError`` otherwise; several failures are reported together
    as a ``MultipleValidationErrors``.
    """

    @abc.abstractmethod
    def validate(self, message: Message) -> Message:
        """Check the message against every rule."""

    @abc.abstractmethod
    def validate_structure(self, message: Message) -> Message:
        """Check the id, the presence of content and the number of parts."""

    @abc.abstractmethod
    def validate_content(self, message: Message) -> Message:
        """Check each content part on its own."""