from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

SuiteId = NewType("SuiteId", str)
TestId = NewType("TestId", str)


@dataclass(frozen=True)
class RunSummary:
    tests: int
    successes: int
    errors: int
    skips: int
    duration: float | None


class AggregatorError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnknownIdentifierError(AggregatorError, KeyError):
    def __init__(self, kind: str, uid: object):
        super().__init__(f"uid is invalid for {kind}: {uid!r}")
        self.kind = kind
        self.uid = uid
