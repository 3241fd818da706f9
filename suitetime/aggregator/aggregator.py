from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from suitetime.clock import Clock, MonotonicClock
from suitetime.config import AggregatorConfig, load_config
from suitetime.events import Event, EventSource
from suitetime.logging_config import configure_logging
from suitetime.record import HookId, TerminalState, TimingRecord, TimingView

from .types import RunSummary, SuiteId, TestId, UnknownIdentifierError

logger = structlog.get_logger(__name__)


def _field(obj: Any, *names: str) -> Any:
    if obj is None:
        return None
    for name in names:
        if isinstance(obj, Mapping):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None


def _uid(runnable: Any) -> str:
    uid = _field(runnable, "uid")
    if uid is None:
        raise AttributeError(f"Payload has no uid: {runnable!r}")
    return uid


def _owning_test(hook: Any) -> TestId | None:
    ctx = _field(hook, "ctx")
    current = _field(ctx, "current_test", "currentTest")
    uid = _field(current, "uid")
    return TestId(uid) if uid else None


class Aggregator:
    """Records suite, test and hook timings from an engine's event stream."""

    def __init__(
        self,
        source: EventSource,
        *,
        clock: Clock | None = None,
        strict_end: bool = False,
    ):
        self.source = source
        self.clock = clock or MonotonicClock()
        self.strict_end = strict_end
        self.run_start: float | None = None
        self.run_end: float | None = None
        self._suites: dict[SuiteId, TimingRecord] = {}
        self._tests: dict[TestId, TimingRecord] = {}

        handlers = {
            Event.RUN_START: self._on_run_start,
            Event.RUN_END: self._on_run_end,
            Event.SUITE_START: self._on_suite_start,
            Event.SUITE_END: self._on_suite_end,
            Event.TEST_START: self._on_test_start,
            Event.TEST_END: self._on_test_end,
            Event.HOOK_START: self._on_hook_start,
            Event.HOOK_END: self._on_hook_end,
            Event.PASS: self._on_pass,
            Event.FAIL: self._on_fail,
            Event.PENDING: self._on_pending,
        }
        for event, handler in handlers.items():
            source.subscribe(event, handler)

    @classmethod
    def from_config(cls, source: EventSource, config: AggregatorConfig) -> Aggregator:
        return cls(source, clock=config.make_clock(), strict_end=config.strict_end)

    # Event handlers

    def _on_run_start(self, *_: object) -> None:
        self.run_start = self.clock.now()
        logger.debug("run_started", at=self.run_start)

    def _on_run_end(self, *_: object) -> None:
        self.run_end = self.clock.now()
        logger.debug("run_ended", at=self.run_end, duration=self.get_total_duration())

    def _on_suite_start(self, suite: Any, *_: object) -> None:
        uid = SuiteId(_uid(suite))
        self._suites[uid] = TimingRecord(self.clock.now(), strict_end=self.strict_end)
        logger.debug("suite_started", uid=uid)

    def _on_suite_end(self, suite: Any, *_: object) -> None:
        uid = SuiteId(_uid(suite))
        self._suite(uid).set_end(self.clock.now())
        logger.debug("suite_ended", uid=uid)

    def _on_test_start(self, test: Any, *_: object) -> None:
        uid = TestId(_uid(test))
        self._tests[uid] = TimingRecord(self.clock.now(), strict_end=self.strict_end)
        logger.debug("test_started", uid=uid)

    def _on_test_end(self, test: Any, *_: object) -> None:
        uid = TestId(_uid(test))
        self._test(uid).set_end(self.clock.now())
        logger.debug("test_ended", uid=uid)

    def _on_hook_start(self, hook: Any, *_: object) -> None:
        test_uid = _owning_test(hook)
        if test_uid is None:
            logger.debug("hook_unassociated", kind=Event.HOOK_START.value)
            return
        hook_uid = HookId(_uid(hook))
        self._test(test_uid).add_hook_start(hook_uid, self.clock.now())
        logger.debug("hook_started", uid=hook_uid, test=test_uid)

    def _on_hook_end(self, hook: Any, *_: object) -> None:
        test_uid = _owning_test(hook)
        if test_uid is None:
            logger.debug("hook_unassociated", kind=Event.HOOK_END.value)
            return
        hook_uid = HookId(_uid(hook))
        self._test(test_uid).add_hook_end(hook_uid, self.clock.now())
        logger.debug("hook_ended", uid=hook_uid, test=test_uid)

    def _on_pass(self, test: Any, *_: object) -> None:
        self._conclude(TestId(_uid(test)), TerminalState.SUCCESS)

    def _on_fail(self, test: Any, *_: object) -> None:
        # The engine reports failures of tests it never announced (e.g. a
        # failing "before all" hook), those have no record to update.
        uid = TestId(_uid(test))
        if uid not in self._tests:
            logger.debug("fail_ignored", uid=uid)
            return
        self._conclude(uid, TerminalState.ERROR)

    def _on_pending(self, test: Any, *_: object) -> None:
        self._conclude(TestId(_uid(test)), TerminalState.SKIP)

    def _conclude(self, uid: TestId, state: TerminalState) -> None:
        self._test(uid).set_terminal_state(state)
        logger.debug("test_concluded", uid=uid, state=state.value)

    def _suite(self, uid: SuiteId) -> TimingRecord:
        if uid not in self._suites:
            raise UnknownIdentifierError("suites", uid)
        return self._suites[uid]

    def _test(self, uid: TestId) -> TimingRecord:
        if uid not in self._tests:
            raise UnknownIdentifierError("tests", uid)
        return self._tests[uid]

    # Queries

    def get_test_data(self, uid: TestId | str) -> TimingView:
        return TimingView(self._test(TestId(uid)))

    def get_suite_data(self, uid: SuiteId | str) -> TimingView:
        return TimingView(self._suite(SuiteId(uid)))

    def test_ids(self) -> tuple[TestId, ...]:
        return tuple(self._tests)

    def suite_ids(self) -> tuple[SuiteId, ...]:
        return tuple(self._suites)

    def get_number_of_errors(self) -> int:
        return sum(1 for record in self._tests.values() if record.is_error())

    def get_number_of_skips(self) -> int:
        return sum(1 for record in self._tests.values() if record.is_skip())

    def get_number_of_successes(self) -> int:
        return sum(1 for record in self._tests.values() if record.is_success())

    def get_total_duration(self) -> float | None:
        if self.run_end is None or self.run_start is None:
            return None
        return self.run_end - self.run_start

    def summary(self) -> RunSummary:
        return RunSummary(
            tests=len(self._tests),
            successes=self.get_number_of_successes(),
            errors=self.get_number_of_errors(),
            skips=self.get_number_of_skips(),
            duration=self.get_total_duration(),
        )


def attach(source: EventSource, config: AggregatorConfig | str | Path | None = None) -> Aggregator:
    """Configure logging from ``config`` and subscribe a new aggregator to ``source``.

    ``config`` may be an :class:`AggregatorConfig` or a path handed to
    :func:`load_config`; ``None`` uses the defaults and ``SUITETIME_*`` env vars.
    """
    if not isinstance(config, AggregatorConfig):
        config = load_config(config)
    configure_logging(config.logging_level())
    aggregator = Aggregator.from_config(source, config)
    logger.debug("aggregator_attached", clock=config.clock, strict_end=config.strict_end)
    return aggregator
