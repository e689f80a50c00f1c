"""The standard message validator built from the individual rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from corbusier import rules
from corbusier.errors import ValidationError
from corbusier.message import Message
from corbusier.validator import MessageValidator, ValidationConfig

__all__ = ["DefaultMessageValidator"]


def _flatten(error: ValidationError) -> list[ValidationError]:
    inner = error.errors()
    return inner if inner is not None else [error]


@dataclass(frozen=True)
class DefaultMessageValidator(MessageValidator):
    """Applies every rule and reports all failures rather than stopping at the first."""

    config: ValidationConfig = field(default_factory=ValidationConfig)

    def validate(self, message: Message) -> Message:
        errors: list[ValidationError] = []
        for check in (self.validate_structure, self.validate_content):
            try:
                check(message)
            except ValidationError as exc:
                errors.extend(_flatten(exc))
        try:
            rules.validate_message_size(message, self.config)
        except ValidationError as exc:
            errors.append(exc)
        if errors:
            raise ValidationError.multiple(errors)
        return message

    def validate_structure(self, message: Message) -> Message:
        errors: list[ValidationError] = []
        checks = (
            lambda: rules.validate_message_id(message),
            lambda: rules.validate_content_not_empty(message),
            lambda: rules.validate_content_parts_count(message, self.config),
        )
        for check in checks:
            try:
                check()
            except ValidationError as exc:
                errors.append(exc)
        if errors:
            raise ValidationError.multiple(errors)
        return message

    def validate_content(self, message: Message) -> Message:
        rules.validate_content_parts(message, self.config)
        return message