# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Error types raised by observable_collection itself.

Errors coming out of list primitives (``TypeError`` from ``splice`` or
``sort``) and errors raised by listeners are never wrapped: they reach the
caller of the mutation unchanged.
"""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = (
    "CollectionError",
    "ListenerRegistrationError",
)


class CollectionError(Exception):
    """Base for all observable_collection errors.

    Carries a machine-readable ``code`` and structured ``details`` so the
    error can be logged as a dictionary.
    """

    default_message: ClassVar[str] = "Collection error"
    code: ClassVar[str] = "collection_error"

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize error to a dictionary for logging."""
        data = {
            "error": self.__class__.__name__,
            "code": type(self).code,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        return data

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        **extra: Any,
    ):
        """Create error from a value with optional expected type and message."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details)


class ListenerRegistrationError(CollectionError, TypeError):
    """A listener or event name handed to ``on``/``once`` is unusable."""

    default_message = "Invalid listener registration"
    code = "listener_registration_error"
