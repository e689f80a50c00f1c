"""Canonical messages, validation and versioned events for AI agent orchestration."""

__version__ = "0.1.0"