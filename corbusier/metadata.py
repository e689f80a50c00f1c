"""Metadata that records where a message came from and how it was produced."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from corbusier.ids import TurnId

__all__ = ["SlashCommandExpansion", "MessageMetadata"]

_KNOWN_FIELDS = ("agent_backend", "turn_id", "slash_command_expansion")


@dataclass(frozen=True)
class SlashCommandExpansion:
    """Record of a slash command and the template text it expanded to."""

    command: str
    expanded_content: str
    parameters: dict[str, Any] = field(default_factory=dict)

    def with_parameter(self, key: str, value: Any) -> SlashCommandExpansion:
        """Return a copy with one more parameter."""
        return dataclasses.replace(self, parameters={**self.parameters, key: value})

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"command": self.command}
        if self.parameters:
            result["parameters"] = dict(self.parameters)
        result["expanded_content"] = self.expanded_content
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SlashCommandExpansion:
        if not isinstance(data, dict):
            raise ValueError("slash command expansion must be an object")
        for key in ("command", "expanded_content"):
            if not isinstance(data.get(key), str):
                raise ValueError(f"slash command expansion field '{key}' must be a string")
        parameters = data.get("parameters") or {}
        if not isinstance(parameters, dict):
            raise ValueError("slash command expansion field 'parameters' must be an object")
        return cls(
            command=data["command"],
            expanded_content=data["expanded_content"],
            parameters=dict(parameters),
        )


@dataclass(frozen=True)
class MessageMetadata:
    """Contextual information attached to a message.

    Extension entries are stored alongside the known fields when serialised,
    so their keys should not reuse the names of those fields.
    """

    agent_backend: str | None = None
    turn_id: TurnId | None = None
    slash_command_expansion: SlashCommandExpansion | None = None
    extensions: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def for_agent(cls, agent_backend: str) -> MessageMetadata:
        """Create metadata naming the agent backend that produced the message."""
        return cls(agent_backend=agent_backend)

    def with_turn_id(self, turn_id: TurnId) -> MessageMetadata:
        """Return a copy with the turn identifier set."""
        return dataclasses.replace(self, turn_id=turn_id)

    def with_slash_command_expansion(self, expansion: SlashCommandExpansion) -> MessageMetadata:
        """Return a copy with the slash command expansion set."""
        return dataclasses.replace(self, slash_command_expansion=expansion)

    def with_extension(self, key: str, value: Any) -> MessageMetadata:
        """Return a copy with one more extension entry."""
        return dataclasses.replace(self, extensions={**self.extensions, key: value})

    def is_empty(self) -> bool:
        """Return True if no field is set."""
        return (
            self.agent_backend is None
            and self.turn_id is None
            and self.slash_command_expansion is None
            and not self.extensions
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if self.agent_backend is not None:
            result["agent_backend"] = self.agent_backend
        if self.turn_id is not None:
            result["turn_id"] = str(self.turn_id)
        if self.slash_command_expansion is not None:
            result["slash_command_expansion"] = self.slash_command_expansion.to_dict()
        result.update(self.extensions)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MessageMetadata:
        if not isinstance(data, dict):
            raise ValueError("message metadata must be an object")
        agent_backend = data.get("agent_backend")
        if agent_backend is not None and not isinstance(agent_backend, str):
            raise ValueError("metadata field 'agent_backend' must be a string")
        raw_turn = data.get("turn_id")
        if raw_turn is not None and not isinstance(raw_turn, str):
            raise ValueError("metadata field 'turn_id' must be a UUID string")
        raw_expansion = data.get("slash_command_expansion")
        return cls(
            agent_backend=agent_backend,
            turn_id=TurnId.from_uuid(raw_turn) if raw_turn is not None else None,
            slash_command_expansion=(
                SlashCommandExpansion.from_dict(raw_expansion) if raw_expansion is not None else None
            ),
            extensions={key: value for key, value in data.items() if key not in _KNOWN_FIELDS},
        )