from __future__ import annotations

import structlog

from .types import Event, Handler, UnknownEventError

logger = structlog.get_logger(__name__)


def _as_event(name: Event | str) -> Event:
    try:
        return Event(name)
    except ValueError as exc:
        raise UnknownEventError(name) from exc


class EventEmitter:
    """In-process event source.

    Handlers run synchronously, in subscription order, and any exception they
    raise propagates out of :meth:`emit`.
    """

    def __init__(self) -> None:
        self._handlers: dict[Event, list[Handler]] = {event: [] for event in Event}

    def subscribe(self, event: Event | str, handler: Handler) -> None:
        self._handlers[_as_event(event)].append(handler)

    def emit(self, event: Event | str, *args: object) -> None:
        kind = _as_event(event)
        logger.debug("event_emitted", kind=kind.value, handlers=len(self._handlers[kind]))
        for handler in list(self._handlers[kind]):
            handler(*args)

    def listener_count(self, event: Event | str) -> int:
        return len(self._handlers[_as_event(event)])
