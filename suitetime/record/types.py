from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import NewType

HookId = NewType("HookId", str)


class TerminalState(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    SKIP = "skip"


@dataclass(frozen=True)
class HookTiming:
    start: float
    end: float | None = None

    def get_duration(self) -> float | None:
        if self.end is None:
            return None
        return self.end - self.start


def is_timestamp(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


class RecordError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class InvalidArgumentError(RecordError, ValueError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class MissingHookError(RecordError, KeyError):
    def __init__(self, hook_id: str):
        super().__init__(f"Hook was never started: {hook_id}")
        self.hook_id = hook_id


class EndAlreadySetError(RecordError):
    def __init__(self, end: float):
        super().__init__(f"End time already set: {end}")
        self.end = end
