from .timing import TimingRecord, TimingView
from .types import (
    EndAlreadySetError,
    HookId,
    HookTiming,
    InvalidArgumentError,
    MissingHookError,
    RecordError,
    TerminalState,
)

__all__ = [
    "TimingRecord",
    "TimingView",
    "TerminalState",
    "HookId",
    "HookTiming",
    "RecordError",
    "InvalidArgumentError",
    "MissingHookError",
    "EndAlreadySetError",
]
