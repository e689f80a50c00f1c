"""Roles of the participants in a conversation."""

from __future__ import annotations

from enum import Enum

__all__ = ["Role"]


class Role(Enum):
    """The source of a message: a human, an assistant, a tool or the system."""

    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"
    SYSTEM = "system"

    def can_call_tools(self) -> bool:
        """Return True if messages with this role may contain tool calls."""
        return self is Role.ASSISTANT

    def is_human(self) -> bool:
        """Return True if this role is a human participant."""
        return self is Role.USER

    def is_system(self) -> bool:
        """Return True if this role carries system-level content."""
        return self is Role.SYSTEM

    def is_tool(self) -> bool:
        """Return True if this role carries tool output."""
        return self is Role.TOOL

    def __str__(self) -> str:
        return self.value