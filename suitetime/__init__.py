from .aggregator import Aggregator, RunSummary, UnknownIdentifierError, attach
from .clock import ManualClock, MonotonicClock, WallClock
from .config import AggregatorConfig, ConfigError, load_config
from .events import Event, EventEmitter, EventSource, HookContext, Runnable
from .logging_config import configure_logging
from .record import InvalidArgumentError, MissingHookError, TerminalState, TimingView

__all__ = [
    "Aggregator",
    "AggregatorConfig",
    "ConfigError",
    "Event",
    "EventEmitter",
    "EventSource",
    "HookContext",
    "InvalidArgumentError",
    "ManualClock",
    "MissingHookError",
    "MonotonicClock",
    "Runnable",
    "RunSummary",
    "TerminalState",
    "TimingView",
    "UnknownIdentifierError",
    "WallClock",
    "attach",
    "configure_logging",
    "load_config",
]
