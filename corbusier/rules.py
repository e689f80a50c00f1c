"""Individual message validation rules.

Each rule returns nothing when the message passes and raises a
``ValidationError`` describing the failure otherwise.
"""

from __future__ import annotations

from corbusier.content import AttachmentPart, TextPart, ToolCallPart, ToolResultPart
from corbusier.errors import (
    EmptyContentError,
    InvalidContentPartError,
    InvalidMetadataError,
    MessageTooLargeError,
    MissingMessageIdError,
    TooManyContentPartsError,
    ValidationError,
)
from corbusier.message import Message
from corbusier.validator import ValidationConfig

__all__ = [
    "validate_message_id",
    "validate_content_not_empty",
    "validate_message_size",
    "validate_content_parts_count",
    "validate_content_parts",
]


def validate_message_id(message: Message) -> None:
    """Reject a message whose id is the nil UUID."""
    if message.id.is_nil():
        raise MissingMessageIdError()


def validate_content_not_empty(message: Message) -> None:
    """Reject a message with no content parts."""
    if not message.content:
        raise EmptyContentError()


def validate_message_size(message: Message, config: ValidationConfig) -> None:
    """Reject a message whose serialised JSON is larger than the configured limit."""
    try:
        size = len(message.to_json().encode("utf-8"))
    except (TypeError, ValueError) as exc:
        raise InvalidMetadataError(f"failed to serialize message: {exc}") from exc
    if size > config.max_message_size_bytes:
        raise MessageTooLargeError(size, config.max_message_size_bytes)


def validate_content_parts_count(message: Message, config: ValidationConfig) -> None:
    """Reject a message with more content parts than the configured limit."""
    count = len(message.content)
    if count > config.max_content_parts:
        raise TooManyContentPartsError(config.max_content_parts, count)


def validate_content_parts(message: Message, config: ValidationConfig) -> None:
    """Check every content part, reporting all failures together."""
    errors: list[ValidationError] = []
    for index, part in enumerate(message.content):
        try:
            _validate_part(part, index, config)
        except ValidationError as exc:
            errors.append(exc)
    if errors:
        raise ValidationError.multiple(errors)


def _validate_part(part: object, index: int, config: ValidationConfig) -> None:
    match part:
        case TextPart():
            _validate_text(part, index, config)
        case ToolCallPart():
            if not part.call_id:
                raise InvalidContentPartError(index, "tool call must have a call_id")
            if not part.name:
                raise InvalidContentPartError(index, "tool call must have a name")
        case ToolResultPart():
            if not part.call_id:
                raise InvalidContentPartError(index, "tool result must have a call_id")
        case AttachmentPart():
            if not part.mime_type:
                raise InvalidContentPartError(index, "attachment must have a MIME type")
            if not part.data:
                raise InvalidContentPartError(index, "attachment data cannot be empty")
        case _:
            raise InvalidContentPartError(
                index, f"unknown content part type: {type(part).__name__}"
            )


def _validate_text(text: TextPart, index: int, config: ValidationConfig) -> None:
    if not config.allow_empty_text and text.is_empty():
        raise InvalidContentPartError(index, "text content cannot be empty")
    if len(text.text) > config.max_text_length:
        raise InvalidContentPartError(
            index,
            f"text content exceeds maximum length of {config.max_text_length} characters",
        )