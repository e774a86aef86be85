# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import inspect
from collections.abc import Callable
from enum import Enum as _Enum
from typing import Any

__all__ = (
    "SIMPLE_TYPES",
    "bind_iteratee",
    "strict_equal",
    "strict_key",
)

# values of these types compare by value, everything else by identity
SIMPLE_TYPES = (str, bytes, int, float, complex, type(None), _Enum)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _accepts_index(fn: Callable) -> bool:
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return False

    positional = 0
    for p in params:
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if p.kind in _POSITIONAL:
            positional += 1
    return positional >= 2


def bind_iteratee(fn: Any, /) -> Callable[[Any, int], Any]:
    """Adapt a callback so it can always be called as ``fn(item, index)``.

    Callbacks that take a second positional argument (or ``*args``) receive
    the index; everything else is called with the item alone. A
    non-callable is passed through so that the failure surfaces when it is
    first invoked, not when it is bound.
    """
    if not callable(fn):
        return lambda item, index: fn(item)
    if _accepts_index(fn):
        return fn
    return lambda item, index: fn(item)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never equals a number
    return isinstance(value, (int, float)) and not isinstance(
        value, (bool, _Enum)
    )


def strict_equal(a: Any, b: Any, /) -> bool:
    """Identity for objects, value equality for simple values.

    ints and floats share one number domain, so ``1`` equals ``1.0``.
    NaN equals nothing, itself included.
    """
    if _is_number(a) and _is_number(b):
        return a == b
    if a is b:
        return True
    if isinstance(a, SIMPLE_TYPES) and type(a) is type(b):
        return a == b
    return False


def strict_key(value: Any, /) -> tuple:
    """Hashable key consistent with `strict_equal`."""
    if _is_number(value):
        if value != value:
            # every NaN is distinct
            return ("nan", object(), None)
        return ("number", hash(value), value)
    if isinstance(value, SIMPLE_TYPES):
        try:
            return (type(value), hash(value), value)
        except TypeError:
            pass
    return (object, id(value), None)
