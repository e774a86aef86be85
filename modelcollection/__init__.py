# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import TYPE_CHECKING

from . import ln as ln
from .config import settings
from .ln import Undefined
from .version import __version__

if TYPE_CHECKING:
    from ._errors import CollectionError, ValidationError
    from .generic import Collection, Emitter, Model, ModelLike

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)

_lazy_imports = {}


def _get_obj(name: str, module: str):
    from importlib import import_module

    obj_ = getattr(import_module(f"{__name__}.{module}"), name)
    _lazy_imports[name] = obj_
    return obj_


def __getattr__(name: str):
    if name in _lazy_imports:
        return _lazy_imports[name]

    match name:
        case "Collection":
            return _get_obj("Collection", "generic.collection")
        case "Emitter":
            return _get_obj("Emitter", "generic.emitter")
        case "Model":
            return _get_obj("Model", "generic.model")
        case "ModelLike":
            return _get_obj("ModelLike", "generic._concepts")
        case "CollectionError":
            return _get_obj("CollectionError", "_errors")
        case "ValidationError":
            return _get_obj("ValidationError", "_errors")
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = (
    "__version__",
    "Collection",
    "CollectionError",
    "Emitter",
    "Model",
    "ModelLike",
    "Undefined",
    "ValidationError",
    "ln",
    "logger",
    "settings",
)
