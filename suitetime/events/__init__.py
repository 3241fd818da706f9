from .emitter import EventEmitter
from .types import (
    Event,
    EventError,
    EventSource,
    Handler,
    HookContext,
    Runnable,
    UnknownEventError,
)

__all__ = [
    "Event",
    "EventSource",
    "EventEmitter",
    "Handler",
    "HookContext",
    "Runnable",
    "EventError",
    "UnknownEventError",
]
