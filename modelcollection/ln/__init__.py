# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from ._sentinel import (
    MaybeUndefined,
    SingletonType,
    Undefined,
    UndefinedType,
)
from ._utils import SIMPLE_TYPES, bind_iteratee, strict_equal, strict_key

__all__ = (
    "MaybeUndefined",
    "SIMPLE_TYPES",
    "SingletonType",
    "Undefined",
    "UndefinedType",
    "bind_iteratee",
    "strict_equal",
    "strict_key",
)
