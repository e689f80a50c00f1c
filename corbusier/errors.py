"""Error types raised by message validation, persistence and schema upgrades."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from corbusier.ids import MessageId, SequenceNumber


class ValidationError(Exception):
    """Base class for message validation failures."""

    _message = "validation failed"

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or (self._message,)))

    @classmethod
    def multiple(cls, errors: Iterable[ValidationError]) -> ValidationError:
        """Combine errors: a single error is returned as is, several are wrapped."""
        collected = list(errors)
        if not collected:
            return InvalidMetadataError("internal error: no validation errors")
        if len(collected) == 1:
            return collected[0]
        return MultipleValidationErrors(collected)

    def is_multiple(self) -> bool:
        """Return True if this error wraps several validation failures."""
        return False

    def errors(self) -> list[ValidationError] | None:
        """Return the wrapped errors, or None if this is a single error."""
        return None


class MissingMessageIdError(ValidationError):
    _message = "message ID is required"


class InvalidRoleError(ValidationError):
    def __init__(self, role: str) -> None:
        self.role = role
        super().__init__(f"invalid role '{role}' for this message type")


class EmptyContentError(ValidationError):
    _message = "message must contain at least one content part"


class InvalidContentPartError(ValidationError):
    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"invalid content part at index {index}: {reason}")


class MissingTimestampError(ValidationError):
    _message = "message timestamp is required"


class EmptyTextContentError(ValidationError):
    _message = "text content cannot be empty"


class InvalidToolCallError(ValidationError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid tool call: {reason}")


class InvalidAttachmentError(ValidationError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid attachment: {reason}")


class InvalidMetadataError(ValidationError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"invalid metadata: {reason}")


class InvalidSequenceError(ValidationError):
    def __init__(self, actual: SequenceNumber, expected: SequenceNumber) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(f"message sequence {actual} is invalid; expected {expected}")


class DuplicateMessageError(ValidationError):
    def __init__(self, message_id: MessageId) -> None:
        self.message_id = message_id
        super().__init__(f"duplicate message ID: {message_id}")


class MessageTooLargeError(ValidationError):
    def __init__(self, actual_bytes: int, limit_bytes: int) -> None:
        self.actual_bytes = actual_bytes
        self.limit_bytes = limit_bytes
        super().__init__(f"message size {actual_bytes} exceeds limit of {limit_bytes} bytes")


class TooManyContentPartsError(ValidationError):
    def __init__(self, max_parts: int, actual: int) -> None:
        self.max_parts = max_parts
        self.actual = actual
        super().__init__(f"message has {actual} content parts, exceeds limit of {max_parts}")


class ConversationNotFoundError(ValidationError):
    _message = "conversation not found"


class MultipleValidationErrors(ValidationError):
    def __init__(self, errors: Iterable[ValidationError]) -> None:
        self._errors = list(errors)
        joined = "; ".join(str(error) for error in self._errors)
        super().__init__(f"multiple validation errors: {joined}")

    def is_multiple(self) -> bool:
        return True

    def errors(self) -> list[ValidationError]:
        return list(self._errors)


class RepositoryError(Exception):
    """Base class for message persistence failures."""


class MessageNotFoundError(RepositoryError):
    def __init__(self, message_id: MessageId) -> None:
        self.message_id = message_id
        super().__init__(f"message not found: {message_id}")


class DatabaseError(RepositoryError):
    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"database error: {cause}")
        self.__cause__ = cause


class SerializationError(RepositoryError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"serialization error: {reason}")


class RepositoryConnectionError(RepositoryError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"connection error: {reason}")


class SchemaUpgradeError(Exception):
    """Base class for event schema upgrade failures."""


class UnsupportedVersionError(SchemaUpgradeError):
    def __init__(self, version: int) -> None:
        self.version = version
        super().__init__(f"unsupported schema version: {version}")


class UnknownEventTypeError(SchemaUpgradeError):
    def __init__(self, event_type: str) -> None:
        self.event_type = event_type
        super().__init__(f"unknown event type: {event_type}")


class UpgradeFailedError(SchemaUpgradeError):
    def __init__(self, from_version: int, to_version: int, reason: str) -> None:
        self.from_version = from_version
        self.to_version = to_version
        self.reason = reason
        super().__init__(f"upgrade from version {from_version} to {to_version} failed: {reason}")


class MalformedDataError(SchemaUpgradeError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"malformed event data: {reason}")