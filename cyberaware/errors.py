"""
Exception hierarchy for CyberAware.

Per-turn errors are recoverable: the chat session reports them and re-prompts.
StartupError is fatal and ends the process with a non-zero status.
"""

from typing import Any, Optional


class CyberAwareError(Exception):
    """Base class for all CyberAware errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class EmptyInputError(CyberAwareError):
    """Raised when a blank line reaches the intent resolver."""

    def __init__(self, message: str = "Empty input received"):
        super().__init__(message)


class UnknownTopicError(CyberAwareError, KeyError):
    """Raised when a topic key is not in the catalog."""

    def __init__(self, key: str):
        super().__init__(f"Unknown topic: {key}", {"key": key})
        self.key = key

    def __str__(self) -> str:
        return self.message


class StartupError(CyberAwareError):
    """Raised when the session cannot be initialized."""
    pass
