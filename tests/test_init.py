# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

import pytest

import modelcollection
from modelcollection._errors import CollectionError, ValidationError
from modelcollection.generic import Collection, Emitter, Model, ModelLike
from modelcollection.ln import Undefined


class TestPackageSurface:
    def test_version(self):
        assert isinstance(modelcollection.__version__, str)

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Collection", Collection),
            ("Emitter", Emitter),
            ("Model", Model),
            ("ModelLike", ModelLike),
            ("CollectionError", CollectionError),
            ("ValidationError", ValidationError),
        ],
    )
    def test_lazy_exports(self, name, expected):
        assert getattr(modelcollection, name) is expected

    def test_eager_exports(self):
        assert modelcollection.Undefined is Undefined
        assert modelcollection.settings is not None

    def test_unknown_attribute(self):
        with pytest.raises(AttributeError, match="no attribute 'Nope'"):
            modelcollection.Nope

    def test_logger_level_follows_settings(self):
        assert modelcollection.logger.name == "modelcollection"
        assert modelcollection.logger.level == logging.getLevelName(
            modelcollection.settings.LOG_LEVEL
        )

    def test_all_names_resolve(self):
        for name in modelcollection.__all__:
            assert getattr(modelcollection, name) is not None
