"""
tengen exception hierarchy.

Provides a base exception class with user-facing messages and debug context,
plus specialized subclasses for the board engine's error domains.
"""

from typing import Any, Dict, Optional


class TengenError(Exception):
    """Base exception for tengen errors.

    Attributes:
        user_message: Safe, user-facing error message.
        context: Dictionary of debug information.
    """

    def __init__(
        self,
        message: str,
        *,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.user_message = user_message or message
        self.context = context or {}


class ConfigError(TengenError):
    """Configuration load/validation errors."""

    pass


class InvalidDimensionError(TengenError, ValueError):
    """Board dimension is not a positive integer."""

    pass


class BoardIndexError(TengenError, IndexError):
    """Point index outside [0, dim * dim)."""

    pass


class InvalidColorError(TengenError, ValueError):
    """A stone color was required but EMPTY or an unknown value was given."""

    pass


class IllegalMoveError(TengenError):
    """A move was rejected by the rules.

    Attributes:
        reason: One of "occupied", "ko", "suicide", "turn".
    """

    def __init__(self, message: str, *, reason: str, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.reason = reason


class InvariantViolation(TengenError, AssertionError):
    """Incrementally maintained board state disagrees with a from-scratch recomputation."""

    pass
