# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Protocol, runtime_checkable

__all__ = (
    "ModelLike",
    "Observable",
    "is_model_like",
)


@runtime_checkable
class Observable(Protocol):
    """Anything that lets observers subscribe to named events."""

    def on(self, event: str, handler: Any, /) -> Any: ...

    def once(self, event: str, handler: Any, /) -> Any: ...

    def off(self, event: str | None = None, handler: Any = None, /) -> Any: ...

    def emit(self, event: str, *args: Any) -> Any: ...


@runtime_checkable
class ModelLike(Protocol):
    """What a collection requires of the things it holds.

    A property accessor and a writable ``collection`` back-reference.
    """

    collection: Any

    def get(self, name: str, default: Any = None, /) -> Any: ...


def is_model_like(value: Any, /) -> bool:
    """True if `value` already satisfies the model wrapper contract."""
    if isinstance(value, type):
        return False
    return isinstance(value, ModelLike) and callable(getattr(value, "get"))
