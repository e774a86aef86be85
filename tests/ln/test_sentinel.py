import copy
import pickle

from modelcollection.ln import Undefined, UndefinedType


def test_undefined_is_singleton():
    assert UndefinedType() is Undefined


def test_undefined_is_falsy():
    assert not Undefined
    assert bool(Undefined) is False


def test_undefined_repr_and_str():
    assert repr(Undefined) == "Undefined"
    assert str(Undefined) == "Undefined"


def test_undefined_survives_copy():
    assert copy.copy(Undefined) is Undefined
    assert copy.deepcopy(Undefined) is Undefined
    assert copy.deepcopy({"k": Undefined})["k"] is Undefined


def test_undefined_survives_pickle():
    assert pickle.loads(pickle.dumps(Undefined)) is Undefined
