# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Final, Literal, TypeVar, Union

__all__ = (
    "MaybeUndefined",
    "SingletonType",
    "Undefined",
    "UndefinedType",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Sentinels keep their identity across copy and deepcopy and are falsy.
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class UndefinedType(SingletonType):
    """Sentinel for "no such element".

    Returned by lookups such as ``Collection.find`` when nothing matches,
    so that a stored ``None`` stays distinguishable from a miss.

    Example:
        >>> Collection([None]).find(lambda m: m is None) is None
        True
        >>> Collection([]).find(lambda m: True) is Undefined
        True
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __str__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __reduce__(self):
        return "Undefined"


Undefined: Final = UndefinedType()
"""No element matched or exists at the requested position."""

MaybeUndefined = Union[T, UndefinedType]
