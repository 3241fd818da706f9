from dataclasses import dataclass
import logging

from suitetime.clock import Clock, MonotonicClock, WallClock

CLOCKS: dict[str, type] = {"monotonic": MonotonicClock, "wall": WallClock}
LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class AggregatorConfig:
    clock: str = "monotonic"
    strict_end: bool = False
    log_level: str = "info"

    def make_clock(self) -> Clock:
        return CLOCKS[self.clock]()

    def logging_level(self) -> int:
        return LOG_LEVELS[self.log_level]


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
