# tests/conftest.py
import pytest

from modelcollection.generic import Collection, Model
from tests.utils.helpers import EventRecorder


@pytest.fixture
def collection():
    return Collection()


@pytest.fixture
def recorder(collection):
    return EventRecorder(collection)


@pytest.fixture
def people():
    """Three wrapped models with a `name` attribute."""
    return [Model({"name": n}) for n in ("ann", "bob", "cid")]


@pytest.fixture
def people_collection(people):
    c = Collection()
    c.add_all(people)
    return c
