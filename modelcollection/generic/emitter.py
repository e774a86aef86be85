# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import functools
import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

from modelcollection._errors import ValidationError
from modelcollection.config import settings

__all__ = ("Emitter", "Handler")

Handler = Callable[..., Any]
logger = logging.getLogger(__name__)


def _validate_event(event: Any) -> str:
    if not isinstance(event, str) or not event:
        raise ValidationError.from_value(
            event,
            expected="non-empty str",
            message="Event name must be a non-empty string",
        )
    return event


def _validate_handler(handler: Any) -> Handler:
    if not callable(handler):
        raise ValidationError.from_value(
            handler,
            expected="callable",
            message=f"Handler must be callable, got {type(handler).__name__}",
        )
    return handler


class Emitter:
    """Synchronous in-process pub/sub.

    Every instance owns its own handler registry; nothing is shared at the
    class level. ``emit`` runs handlers in registration order on the
    caller's stack and returns only after the last one finished.

    Handler exceptions propagate by default. With ``suppress_errors`` set
    (or ``EMITTER_SUPPRESS_HANDLER_ERRORS`` in the environment), a failing
    handler is logged and the remaining handlers still run.

    Example::

        emitter = Emitter()
        emitter.on("add", print)
        emitter.emit("add", model)
    """

    __slots__ = ("_handlers", "suppress_errors", "warn_listeners")

    def __init__(
        self,
        *,
        suppress_errors: bool | None = None,
        warn_listeners: int | None = None,
    ) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self.suppress_errors = (
            settings.EMITTER_SUPPRESS_HANDLER_ERRORS
            if suppress_errors is None
            else suppress_errors
        )
        self.warn_listeners = (
            settings.EMITTER_WARN_LISTENERS
            if warn_listeners is None
            else warn_listeners
        )

    def on(self, event: str, handler: Handler, /) -> Emitter:
        """Register `handler` for `event`."""
        event = _validate_event(event)
        self._handlers[event].append(_validate_handler(handler))
        self._check_listener_count(event)
        return self

    subscribe = on

    def once(self, event: str, handler: Handler, /) -> Emitter:
        """Register `handler` for a single dispatch of `event`."""
        event = _validate_event(event)
        handler = _validate_handler(handler)

        @functools.wraps(handler)
        def _once(*args: Any) -> Any:
            self.off(event, _once)
            return handler(*args)

        _once.listener = handler
        self._handlers[event].append(_once)
        self._check_listener_count(event)
        return self

    def off(
        self, event: str | None = None, handler: Handler | None = None, /
    ) -> Emitter:
        """Remove handlers.

        - ``off()`` drops every handler of every event.
        - ``off(event)`` drops every handler of `event`.
        - ``off(event, handler)`` drops `handler` (or the ``once`` wrapper
          around it). Removing an unknown handler is a no-op.
        """
        if event is None:
            self._handlers.clear()
            return self
        if handler is None:
            self._handlers.pop(event, None)
            return self
        if event not in self._handlers:
            return self

        handlers = self._handlers[event]
        for i, h in enumerate(handlers):
            if h == handler or getattr(h, "listener", None) == handler:
                del handlers[i]
                break
        if not handlers:
            del self._handlers[event]
        return self

    unsubscribe = off

    def emit(self, event: str, *args: Any) -> Emitter:
        """Call every handler of `event` with `args`."""
        # snapshot, so handlers may subscribe/unsubscribe while we dispatch
        handlers = list(self._handlers.get(event, ()))
        if not handlers:
            logger.debug(f"Emitting '{event}' with no listeners")
            return self

        for h in handlers:
            try:
                h(*args)
            except Exception as e:
                if not self.suppress_errors:
                    raise
                handler_name = getattr(h, "__name__", repr(h))
                logger.error(
                    f"Handler '{handler_name}' failed for event '{event}': {e}",
                    exc_info=True,
                )
        return self

    def listeners(self, event: str, /) -> list[Handler]:
        return list(self._handlers.get(event, ()))

    def has_listeners(self, event: str, /) -> bool:
        return bool(self._handlers.get(event))

    def _check_listener_count(self, event: str) -> None:
        count = len(self._handlers[event])
        if self.warn_listeners and count > self.warn_listeners:
            logger.warning(
                f"Event '{event}' has {count} listeners "
                f"(more than {self.warn_listeners}), possible leak"
            )

    def __repr__(self) -> str:
        events = {k: len(v) for k, v in self._handlers.items()}
        return f"Emitter(listeners={events})"
