from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Protocol

Handler = Callable[..., Any]


class Event(str, Enum):
    RUN_START = "start"
    RUN_END = "end"
    SUITE_START = "suite"
    SUITE_END = "suite end"
    TEST_START = "test"
    TEST_END = "test end"
    HOOK_START = "hook"
    HOOK_END = "hook end"
    PASS = "pass"
    FAIL = "fail"
    PENDING = "pending"


class EventSource(Protocol):
    def subscribe(self, event: Event, handler: Handler) -> None: ...


@dataclass(frozen=True)
class HookContext:
    current_test: Runnable | None = None


@dataclass(frozen=True)
class Runnable:
    """A suite, test or hook as announced by the engine."""

    uid: str
    ctx: HookContext | None = None


class EventError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnknownEventError(EventError, ValueError):
    def __init__(self, name: object):
        super().__init__(f"Unknown event: {name!r}")
        self.name = name
