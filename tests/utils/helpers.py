"""
Shared Test Utilities for modelcollection

Helpers for observing the events a collection publishes.
"""

from typing import Any


class EventRecorder:
    """Subscribes to the mutation events of a collection and keeps them."""

    EVENTS = ("add", "add_all", "remove", "remove_all")

    def __init__(self, collection):
        self.calls: list[tuple[Any, ...]] = []
        for name in self.EVENTS:
            collection.on(name, self._make_handler(name))

    def _make_handler(self, name):
        def handler(*args):
            self.calls.append((name, *args))

        return handler

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]

    def of(self, name: str) -> list[tuple[Any, ...]]:
        return [c[1:] for c in self.calls if c[0] == name]
