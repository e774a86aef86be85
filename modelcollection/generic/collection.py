# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar, overload

from typing_extensions import Self

from modelcollection._errors import ValidationError
from modelcollection.ln import (
    MaybeUndefined,
    Undefined,
    bind_iteratee,
    strict_equal,
    strict_key,
)

from ._concepts import Observable, is_model_like
from .emitter import Emitter, Handler
from .model import Model

T = TypeVar("T")
D = TypeVar("D")

Iteratee = Callable[..., Any]

__all__ = ("Collection",)

logger = logging.getLogger(__name__)


class Collection(Generic[T]):
    """An observable, ordered sequence of models.

    Mutations (`add`, `add_all`, `remove`, `remove_all`) keep each model's
    ``collection`` back-reference current and publish an event of the same
    name on the embedded `Emitter`. Everything else is a query: it reads
    `models` and returns a new Collection, an element, a bool, a count or
    a list, leaving the receiver untouched.

    Callbacks are called as ``fn(model, index)`` when they take two
    positional arguments and as ``fn(model)`` otherwise.

    Items handed to the constructor are stored as they are. Only `add` and
    `add_all` wrap raw values into `model_type`.

    Attributes:
        models (list): The ordered elements.
        events (Observable): Receives ``add``, ``add_all``, ``remove`` and
            ``remove_all`` notifications.
        model_type (type): Wraps raw values on insertion.
    """

    model_type: Callable[[Any], Any] = Model

    def __init__(
        self,
        models: Iterable[T] | None = None,
        *,
        model_type: Callable[[Any], Any] | None = None,
        emitter: Observable | None = None,
    ) -> None:
        if models is None:
            models = []
        elif not isinstance(models, list):
            models = list(models)
        self.models: list[T] = models

        if model_type is not None:
            if not callable(model_type):
                raise ValidationError.from_value(
                    model_type,
                    expected="callable",
                    message="model_type must be a class or callable",
                )
            self.model_type = model_type
        if emitter is None:
            emitter = Emitter()
        elif not isinstance(emitter, Observable):
            raise ValidationError.from_value(
                emitter,
                expected="Observable",
                message="emitter must provide on, once, off and emit",
            )
        self.events: Observable = emitter

    def _derive(self, models: list) -> Self:
        return self.__class__(models, model_type=self.model_type)

    def _wrap(self, item: Any) -> Any:
        if is_model_like(item):
            return item
        return self.model_type(item)

    # ------------------------------------------------------------------
    # events
    # ------------------------------------------------------------------

    def on(self, event: str, handler: Handler, /) -> Self:
        self.events.on(event, handler)
        return self

    def once(self, event: str, handler: Handler, /) -> Self:
        self.events.once(event, handler)
        return self

    def off(
        self, event: str | None = None, handler: Handler | None = None, /
    ) -> Self:
        self.events.off(event, handler)
        return self

    def emit(self, event: str, *args: Any) -> Self:
        self.events.emit(event, *args)
        return self

    # ------------------------------------------------------------------
    # mutation
    # ------------------------------------------------------------------

    def add(self, item: Any, /) -> Self:
        """Wrap `item` if needed, append it and emit ``add``."""
        model = self._wrap(item)
        model.collection = self
        self.models.append(model)
        logger.debug(f"Added model at index {len(self.models) - 1}")
        self.events.emit("add", model)
        return self

    def add_all(self, items: Iterable[Any], /) -> Self:
        """Add each of `items`, then emit ``add_all`` with `items` itself."""
        for item in items:
            self.add(item)
        self.events.emit("add_all", items)
        return self

    def remove(self, model: Any, /) -> Self:
        """Remove the first element equal to `model` and emit ``remove``.

        Unknown models are ignored: no error and no event.
        """
        index = self.index_of(model)
        if index == -1:
            return self

        target = self.models[index]
        if is_model_like(target):
            target.collection = None
        del self.models[index]
        logger.debug(f"Removed model at index {index}")
        self.events.emit("remove", target)
        return self

    def remove_all(self, items: Iterable[Any] | None = None, /) -> Self:
        """Remove each of `items` (default: every model), then emit
        ``remove_all`` with the items that were requested.
        """
        if items is None:
            items = list(self.models)
        for item in items:
            self.remove(item)
        self.events.emit("remove_all", items)
        return self

    # ------------------------------------------------------------------
    # traversal
    # ------------------------------------------------------------------

    def each(self, fn: Iteratee, /) -> Self:
        it = bind_iteratee(fn)
        for i, model in enumerate(self.models):
            it(model, i)
        return self

    def map(self, fn: Iteratee, /) -> Collection:
        """Collect ``fn(model, index)`` into a new Collection.

        Results are stored as returned. They are not wrapped, so mapping to
        plain values yields a collection that cannot be plucked.
        """
        it = bind_iteratee(fn)
        return self._derive([it(m, i) for i, m in enumerate(self.models)])

    # ------------------------------------------------------------------
    # filtering
    # ------------------------------------------------------------------

    def select(self, fn: Iteratee, /) -> Self:
        it = bind_iteratee(fn)
        return self._derive(
            [m for i, m in enumerate(self.models) if it(m, i)]
        )

    where = select

    def reject(self, fn: Iteratee, /) -> Self:
        it = bind_iteratee(fn)
        return self._derive(
            [m for i, m in enumerate(self.models) if not it(m, i)]
        )

    def unique(self) -> Self:
        """First occurrence of every distinct element, in order."""
        seen = set()
        out = []
        for m in self.models:
            key = strict_key(m)
            if key not in seen:
                seen.add(key)
                out.append(m)
        return self._derive(out)

    # ------------------------------------------------------------------
    # search
    # ------------------------------------------------------------------

    def find(self, fn: Iteratee, /) -> MaybeUndefined[T]:
        """First element matching `fn`, or `Undefined`."""
        it = bind_iteratee(fn)
        for i, m in enumerate(self.models):
            if it(m, i):
                return m
        return Undefined

    def find_last(self, fn: Iteratee, /) -> MaybeUndefined[T]:
        """Last element matching `fn`, or `Undefined`."""
        it = bind_iteratee(fn)
        for i in range(len(self.models) - 1, -1, -1):
            m = self.models[i]
            if it(m, i):
                return m
        return Undefined

    def index_of(self, obj: Any, /) -> int:
        for i, m in enumerate(self.models):
            if strict_equal(m, obj):
                return i
        return -1

    indexOf = index_of

    def has(self, obj: Any, /) -> bool:
        return self.index_of(obj) != -1

    contains = has

    # ------------------------------------------------------------------
    # aggregate predicates
    # ------------------------------------------------------------------

    def all(self, fn: Iteratee, /) -> bool:
        it = bind_iteratee(fn)
        for i, m in enumerate(self.models):
            if not it(m, i):
                return False
        return True

    every = all

    def none(self, fn: Iteratee, /) -> bool:
        it = bind_iteratee(fn)
        for i, m in enumerate(self.models):
            if it(m, i):
                return False
        return True

    def any(self, fn: Iteratee, /) -> bool:
        return not self.none(fn)

    def count(self, fn: Iteratee | None = None, /) -> int:
        """Number of elements matching `fn`; all of them without `fn`."""
        if fn is None:
            return len(self.models)
        it = bind_iteratee(fn)
        return sum(1 for i, m in enumerate(self.models) if it(m, i))

    # ------------------------------------------------------------------
    # extraction
    # ------------------------------------------------------------------

    def pluck(self, name: str, /) -> list[Any]:
        """``model.get(name)`` for every model, in order."""
        return [m.get(name) for m in self.models]

    # ------------------------------------------------------------------
    # container protocol
    # ------------------------------------------------------------------

    @property
    def length(self) -> int:
        return len(self.models)

    def at(self, index: int, default: D = Undefined, /) -> T | D:
        try:
            return self.models[index]
        except IndexError:
            return default

    def first(self) -> MaybeUndefined[T]:
        return self.at(0)

    def last(self) -> MaybeUndefined[T]:
        return self.at(-1)

    def is_empty(self) -> bool:
        return not self.models

    def to_list(self) -> list[T]:
        """A shallow copy of `models`."""
        return self.models[:]

    def __len__(self) -> int:
        return len(self.models)

    def __iter__(self) -> Iterator[T]:
        return iter(self.models)

    def __contains__(self, obj: Any) -> bool:
        return self.has(obj)

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> Self: ...

    def __getitem__(self, key: int | slice) -> T | Self:
        if isinstance(key, slice):
            return self._derive(self.models[key])
        if not isinstance(key, int):
            key_cls = key.__class__.__name__
            raise TypeError(
                f"indices must be integers or slices, not {key_cls}"
            )
        return self.models[key]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.models!r})"
