# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "CollectionError",
    "ValidationError",
)


class CollectionError(Exception):
    default_message: ClassVar[str] = "modelcollection error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.details = details or {}


class ValidationError(CollectionError):
    """Raised when an argument handed to an emitter or collection is unusable."""

    default_message = "Validation failed"
    __slots__ = ()

    @classmethod
    def from_value(
        cls,
        value: Any,
        *,
        expected: str | None = None,
        message: str | None = None,
        **extra: Any,
    ):
        """Create a ValidationError describing the offending value."""
        details = {
            "value": value,
            "type": type(value).__name__,
            **({"expected": expected} if expected else {}),
            **extra,
        }
        return cls(message=message, details=details)
