from .aggregator import Aggregator, attach
from .types import AggregatorError, RunSummary, SuiteId, TestId, UnknownIdentifierError

__all__ = [
    "Aggregator",
    "attach",
    "AggregatorError",
    "RunSummary",
    "SuiteId",
    "TestId",
    "UnknownIdentifierError",
]
