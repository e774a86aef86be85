# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from ._concepts import ModelLike, Observable, is_model_like
from .collection import Collection
from .emitter import Emitter
from .model import Model

__all__ = (
    "Collection",
    "Emitter",
    "Model",
    "ModelLike",
    "Observable",
    "is_model_like",
)
