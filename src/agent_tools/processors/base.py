"""
Shared contract and helpers for result processors.

A processor takes the ordered result entries of a batch and returns a list of
the same length and order. Only successful outcomes are transformed; error
entries are passed through untouched.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, List, Protocol, Sequence

from ..tools.models import Ok, ResultEntry


class ResultProcessor(Protocol):
    """Anything that reshapes a batch of result entries."""

    def process(self, results: Sequence[ResultEntry]) -> List[ResultEntry]:
        ...


def is_sequence(data: Any) -> bool:
    return isinstance(data, (list, tuple))


def estimate_size(data: Any) -> int:
    """Estimate the size of a payload.

    - Text: character count
    - Lists and tuples: item count
    - Mappings: key count
    - Anything else: 0
    """
    if isinstance(data, str):
        return len(data)
    if is_sequence(data):
        return len(data)
    if isinstance(data, Mapping):
        return len(data)
    return 0


def is_large(data: Any, threshold: int) -> bool:
    return estimate_size(data) > threshold


def preserve_structure(entry: ResultEntry, transform: Callable[[Any], Any]) -> ResultEntry:
    """Apply `transform` to a successful payload, returning error entries unchanged."""
    if not isinstance(entry.outcome, Ok):
        return entry
    return ResultEntry(tool_call_id=entry.tool_call_id, outcome=Ok(transform(entry.outcome.value)))


class BaseProcessor(ABC):
    """Processor that transforms each successful payload independently."""

    def process(self, results: Sequence[ResultEntry]) -> List[ResultEntry]:
        return [preserve_structure(entry, self.transform) for entry in results]

    def __call__(self, results: Sequence[ResultEntry]) -> List[ResultEntry]:
        return self.process(results)

    @abstractmethod
    def transform(self, data: Any) -> Any:
        """Transform a single successful payload."""
        pass


class ResultPipeline:
    """
    Runs processors one after another, in the order given.

    Example:
        pipeline = ResultPipeline(Sample(sample_size=10), Truncate(max_size=2000))
        results = pipeline.process(results)
    """

    def __init__(self, *processors: ResultProcessor) -> None:
        self.processors = list(processors)

    def process(self, results: Sequence[ResultEntry]) -> List[ResultEntry]:
        current = list(results)
        for processor in self.processors:
            current = processor.process(current)
        return current

    def __call__(self, results: Sequence[ResultEntry]) -> List[ResultEntry]:
        return self.process(results)
