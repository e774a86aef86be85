# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

__all__ = ("Model",)


class Model(BaseModel):
    """Wraps one domain record.

    A model is built from a raw value: a mapping becomes its `attributes`,
    a pydantic model is dumped into them, and any other object is kept as
    `source` and read through attribute access.

    `collection` points back at the collection currently holding the
    model. It is a plain lookup slot maintained by that collection; the
    model neither owns nor keeps the collection alive through it.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
        use_attribute_docstrings=True,
    )

    id: UUID = Field(default_factory=uuid4, frozen=True)
    """A unique identifier for the model."""

    attributes: dict[str, Any] = Field(default_factory=dict)
    """The record's named properties."""

    source: Any = Field(default=None, exclude=True, repr=False)
    """The raw object, when it was not a mapping."""

    collection: Any = Field(default=None, exclude=True, repr=False)
    """The collection holding this model, if any."""

    def __init__(self, raw: Any = None, /, **data: Any) -> None:
        if raw is not None:
            data = {**self._coerce_raw(raw), **data}
        super().__init__(**data)

    @staticmethod
    def _coerce_raw(raw: Any) -> dict[str, Any]:
        if isinstance(raw, Mapping):
            return {"attributes": dict(raw)}
        if isinstance(raw, BaseModel):
            return {"attributes": raw.model_dump()}
        return {"source": raw}

    @classmethod
    def from_raw(cls, raw: Any, /) -> Model:
        return cls(raw)

    def get(self, name: str, default: Any = None, /) -> Any:
        """Return the property `name`, or `default` if it is missing."""
        if name in self.attributes:
            return self.attributes[name]
        if self.source is not None:
            return getattr(self.source, name, default)
        return default

    def set(self, name: str, value: Any, /) -> Model:
        self.attributes[name] = value
        return self

    def has(self, name: str, /) -> bool:
        if name in self.attributes:
            return True
        return self.source is not None and hasattr(self.source, name)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Model):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __bool__(self) -> bool:
        """Models are always truthy."""
        return True
