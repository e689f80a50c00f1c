"""Content parts that make up the body of a message."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Dict, Union

__all__ = [
    "TextPart",
    "ToolCallPart",
    "ToolResultPart",
    "AttachmentPart",
    "ContentPart",
    "content_part_to_dict",
    "content_part_from_dict",
]

_U64_MAX = 2**64 - 1


def _require_str(data: dict, key: str, kind: str) -> str:
    if key not in data:
        raise ValueError(f"{kind} is missing field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{kind} field '{key}' must be a string")
    return value


def _optional_str(data: dict, key: str, kind: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{kind} field '{key}' must be a string")
    return value


@dataclass(frozen=True)
class TextPart:
    """Plain text content."""

    text: str

    def is_empty(self) -> bool:
        """Return True if the text is empty or whitespace only."""
        return not self.text.strip()

    def byte_length(self) -> int:
        """Return the length of the text in UTF-8 bytes."""
        return len(self.text.encode("utf-8"))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "text", "text": self.text}

    @classmethod
    def _from_dict(cls, data: dict) -> TextPart:
        return cls(_require_str(data, "text", "text part"))


@dataclass(frozen=True)
class ToolCallPart:
    """A request from an assistant to invoke a tool."""

    call_id: str
    name: str
    arguments: Any = None

    def is_valid(self) -> bool:
        """Return True if both the call id and the tool name are non-empty."""
        return bool(self.call_id) and bool(self.name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "tool_call",
            "call_id": self.call_id,
            "name": self.name,
            "arguments": self.arguments,
        }

    @classmethod
    def _from_dict(cls, data: dict) -> ToolCallPart:
        return cls(
            call_id=_require_str(data, "call_id", "tool call"),
            name=_require_str(data, "name", "tool call"),
            arguments=data.get("arguments"),
        )


@dataclass(frozen=True)
class ToolResultPart:
    """The outcome of a tool invocation, matched to its call by ``call_id``."""

    call_id: str
    content: Any = None
    success: bool = True

    @classmethod
    def ok(cls, call_id: str, content: Any) -> ToolResultPart:
        """Create a successful tool result."""
        return cls(call_id=call_id, content=content, success=True)

    @classmethod
    def failure(cls, call_id: str, error: str) -> ToolResultPart:
        """Create a failed tool result carrying an error message."""
        return cls(call_id=call_id, content=str(error), success=False)

    def is_valid(self) -> bool:
        """Return True if the result has a non-empty call id."""
        return bool(self.call_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "tool_result",
            "call_id": self.call_id,
            "content": self.content,
            "success": self.success,
        }

    @classmethod
    def _from_dict(cls, data: dict) -> ToolResultPart:
        success = data.get("success", True)
        if not isinstance(success, bool):
            raise ValueError("tool result field 'success' must be a boolean")
        return cls(
            call_id=_require_str(data, "call_id", "tool result"),
            content=data.get("content"),
            success=success,
        )


@dataclass(frozen=True)
class AttachmentPart:
    """A file, image or other embedded content."""

    mime_type: str
    data: str
    name: str | None = None
    size_bytes: int | None = None

    def __post_init__(self) -> None:
        size = self.size_bytes
        if size is not None and (
            isinstance(size, bool) or not isinstance(size, int) or not 0 <= size <= _U64_MAX
        ):
            raise ValueError(f"attachment size must be an unsigned 64-bit integer, got {size!r}")

    def with_name(self, name: str) -> AttachmentPart:
        """Return a copy with the display name set."""
        return dataclasses.replace(self, name=name)

    def with_size(self, size_bytes: int) -> AttachmentPart:
        """Return a copy with the size in bytes set."""
        return dataclasses.replace(self, size_bytes=size_bytes)

    def is_valid(self) -> bool:
        """Return True if both the MIME type and the data are non-empty."""
        return bool(self.mime_type) and bool(self.data)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": "attachment", "mime_type": self.mime_type}
        if self.name is not None:
            result["name"] = self.name
        result["data"] = self.data
        if self.size_bytes is not None:
            result["size_bytes"] = self.size_bytes
        return result

    @classmethod
    def _from_dict(cls, data: dict) -> AttachmentPart:
        return cls(
            mime_type=_require_str(data, "mime_type", "attachment"),
            data=_require_str(data, "data", "attachment"),
            name=_optional_str(data, "name", "attachment"),
            size_bytes=data.get("size_bytes"),
        )


ContentPart = Union[TextPart, ToolCallPart, ToolResultPart, AttachmentPart]

_PARSERS: Dict[str, Callable[[dict], ContentPart]] = {
    "text": TextPart._from_dict,
    "tool_call": ToolCallPart._from_dict,
    "tool_result": ToolResultPart._from_dict,
    "attachment": AttachmentPart._from_dict,
}


def content_part_to_dict(part: ContentPart) -> dict[str, Any]:
    """Serialise a content part to a dictionary tagged with its ``type``."""
    if not isinstance(part, (TextPart, ToolCallPart, ToolResultPart, AttachmentPart)):
        raise TypeError(f"not a content part: {type(part).__name__}")
    return part.to_dict()


def content_part_from_dict(data: dict[str, Any]) -> ContentPart:
    """Build a content part from a dictionary tagged with its ``type``."""
    if not isinstance(data, dict):
        raise ValueError("content part must be an object")
    if "type" not in data:
        raise ValueError("content part is missing field 'type'")
    tag = data["type"]
    parser = _PARSERS.get(tag) if isinstance(tag, str) else None
    if parser is None:
        raise ValueError(f"unknown content part type: {tag!r}")
    return parser(data)