from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from .types import (
    EndAlreadySetError,
    HookId,
    HookTiming,
    InvalidArgumentError,
    MissingHookError,
    TerminalState,
    is_timestamp,
)


class TimingRecord:
    """Lifecycle of one suite or test: start/end times, hooks and outcome.

    Suite records only ever use ``start`` and ``end``. Test records also
    collect hook timings and a terminal state; the outcome and the end time
    are independent and may be set in either order.
    """

    def __init__(self, start: float, *, strict_end: bool = False):
        if not is_timestamp(start):
            raise InvalidArgumentError(f"start must be a timestamp, got {start!r}")
        self._start = start
        self._strict_end = strict_end
        self.end: float | None = None
        self.hooks: dict[HookId, HookTiming] = {}
        self.hook_order: list[HookId] = []
        self.terminal_state: TerminalState | None = None

    @property
    def start(self) -> float:
        return self._start

    def set_end(self, end: float) -> None:
        if not is_timestamp(end):
            raise InvalidArgumentError(f"end must be a timestamp, got {end!r}")
        if self._strict_end and self.end is not None:
            raise EndAlreadySetError(self.end)
        self.end = end

    def set_terminal_state(self, state: TerminalState | str) -> None:
        try:
            self.terminal_state = TerminalState(state)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"state must be one of {[s.value for s in TerminalState]}, got {state!r}"
            ) from exc

    def add_hook_start(self, hook_id: HookId, now: float) -> None:
        # Re-used ids overwrite the timing but keep every start in the order list
        self.hooks[hook_id] = HookTiming(start=now)
        self.hook_order.append(hook_id)

    def add_hook_end(self, hook_id: HookId, now: float) -> None:
        if hook_id not in self.hooks:
            raise MissingHookError(hook_id)
        self.hooks[hook_id] = HookTiming(start=self.hooks[hook_id].start, end=now)

    def get_duration(self) -> float | None:
        if self.end is None:
            return None
        return self.end - self._start

    def is_error(self) -> bool:
        return self.terminal_state is TerminalState.ERROR

    def is_skip(self) -> bool:
        return self.terminal_state is TerminalState.SKIP

    def is_success(self) -> bool:
        return self.terminal_state is TerminalState.SUCCESS


class TimingView:
    """Read-only, live view over a :class:`TimingRecord`."""

    __slots__ = ("_record",)

    def __init__(self, record: TimingRecord):
        self._record = record

    def __repr__(self) -> str:
        return (
            f"TimingView(start={self.start!r}, end={self.end!r}, "
            f"terminal_state={self.terminal_state!r})"
        )

    @property
    def start(self) -> float:
        return self._record.start

    @property
    def end(self) -> float | None:
        return self._record.end

    @property
    def terminal_state(self) -> TerminalState | None:
        return self._record.terminal_state

    @property
    def hooks(self) -> Mapping[HookId, HookTiming]:
        return MappingProxyType(self._record.hooks)

    @property
    def hook_order(self) -> tuple[HookId, ...]:
        return tuple(self._record.hook_order)

    def get_duration(self) -> float | None:
        return self._record.get_duration()

    def is_error(self) -> bool:
        return self._record.is_error()

    def is_skip(self) -> bool:
        return self._record.is_skip()

    def is_success(self) -> bool:
        return self._record.is_success()
