"""Sample items from list-shaped tool results."""

import random
from typing import Any, List, Sequence

from .base import BaseProcessor, is_sequence, preserve_structure
from .options import DEFAULT_SAMPLE_SIZE, SampleOptions, SampleStrategy
from ..tools.models import ResultEntry


class Sample(BaseProcessor):
    """
    Replaces long lists with a sample of their items plus the total count.

    Lists no longer than `sample_size` and non-list payloads pass through unchanged.

    Strategies:
        first: the leading items, in order.
        random: a random subset; reproducible only when a seed is given. Each
            `process` call draws from a fresh generator, so a seeded processor
            returns the same selection every time.
        distributed: items at a fixed stride of ``total // sample_size`` starting at index 0.
    """

    def __init__(
        self,
        sample_size: int = DEFAULT_SAMPLE_SIZE,
        strategy: SampleStrategy = "first",
        seed: int | None = None,
    ) -> None:
        self.options = SampleOptions(sample_size=sample_size, strategy=strategy, seed=seed)

    def process(self, results: Sequence[ResultEntry]) -> List[ResultEntry]:
        rng = random.Random(self.options.seed)
        return [preserve_structure(entry, lambda data: self._sample(data, rng)) for entry in results]

    def transform(self, data: Any) -> Any:
        return self._sample(data, random.Random(self.options.seed))

    def _sample(self, data: Any, rng: random.Random) -> Any:
        if not is_sequence(data):
            return data

        total = len(data)
        size = self.options.sample_size
        if total <= size:
            return data

        return {
            "items": self._pick(list(data), size, rng),
            "total_count": total,
            "sampled": True,
            "strategy": self.options.strategy,
        }

    def _pick(self, items: List[Any], size: int, rng: random.Random) -> List[Any]:
        strategy = self.options.strategy
        if strategy == "random":
            return rng.sample(items, size)
        if strategy == "distributed":
            step = len(items) // size
            return [items[i * step] for i in range(size)]
        return items[:size]

