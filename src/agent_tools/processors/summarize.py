"""
Summarize tool results using rule-based heuristics.

Each payload is classified once into a `Shape` and summarized by the handler for
that shape:

- Sequences: count plus a sample of the leading items
- Mappings: key count, the leading keys and their values
- Text: length plus an excerpt
- Records (pydantic models, dataclasses, plain objects): their fields summarized as a mapping
- Anything else: a short textual description

Nested lists, mappings and records are summarized recursively up to
`max_recursion_depth`; past that depth the raw sample values are kept.
"""

import json
import reprlib
from collections.abc import Mapping
from enum import Enum
from numbers import Number
from typing import Any, Callable, Dict, Optional

from .base import BaseProcessor, is_sequence
from .options import (
    DEFAULT_MAX_RECURSION_DEPTH,
    DEFAULT_MAX_SUMMARY_SIZE,
    DEFAULT_SUMMARY_SAMPLE_SIZE,
    SummarizeOptions,
    SummarizeStrategy,
)
from ..records import record_fields

EXCERPT_LENGTH = 100
# Room left in the summary for everything but the excerpt.
EXCERPT_OVERHEAD = 50


class Shape(Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    TEXT = "text"
    COMPOSITE = "composite"
    SCALAR = "scalar"


NESTED_SHAPES = frozenset({Shape.SEQUENCE, Shape.MAPPING, Shape.COMPOSITE})

PINNED_SHAPES: Dict[str, Shape] = {
    "list": Shape.SEQUENCE,
    "map": Shape.MAPPING,
    "text": Shape.TEXT,
}


def classify(value: Any) -> Shape:
    if isinstance(value, str):
        return Shape.TEXT
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if is_sequence(value):
        return Shape.SEQUENCE
    if record_fields(value) is not None:
        return Shape.COMPOSITE
    return Shape.SCALAR


def describe_type(value: Any) -> str:
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Number):
        return "number"
    if isinstance(value, str):
        return "text"
    if isinstance(value, (bytes, bytearray)):
        return "bytes"
    if isinstance(value, Mapping):
        return "map"
    if is_sequence(value):
        return "list"
    if callable(value):
        return "function"
    return type(value).__name__


def serialized_size(summary: Dict[str, Any]) -> int:
    """Byte length of the summary's JSON form."""
    return len(json.dumps(summary, default=repr, skipkeys=True).encode("utf-8"))


class Summarize(BaseProcessor):
    """Replaces each successful payload with a compact, size-bounded summary."""

    def __init__(
        self,
        strategy: SummarizeStrategy = "auto",
        sample_size: int = DEFAULT_SUMMARY_SAMPLE_SIZE,
        max_summary_size: int = DEFAULT_MAX_SUMMARY_SIZE,
        max_recursion_depth: int = DEFAULT_MAX_RECURSION_DEPTH,
    ) -> None:
        self.options = SummarizeOptions(
            strategy=strategy,
            sample_size=sample_size,
            max_summary_size=max_summary_size,
            max_recursion_depth=max_recursion_depth,
        )
        self._handlers: Dict[Shape, Callable[[Any, int], Dict[str, Any]]] = {
            Shape.SEQUENCE: self._summarize_list,
            Shape.MAPPING: self._summarize_map,
            Shape.TEXT: self._summarize_text,
            Shape.COMPOSITE: self._summarize_record,
            Shape.SCALAR: self._summarize_other,
        }

    def transform(self, data: Any) -> Any:
        return self.summarize(data)

    def summarize(self, data: Any, depth: int = 0) -> Dict[str, Any]:
        """Summarize a payload using the configured strategy."""
        shape = classify(data)
        pinned = PINNED_SHAPES.get(self.options.strategy)
        if pinned is not None and shape is not pinned:
            return self._summarize_other(data, depth)
        return self._handlers[shape](data, depth)

    def _summarize_nested(self, value: Any, depth: int) -> Any:
        shape = classify(value)
        if shape in NESTED_SHAPES:
            return self._handlers[shape](value, depth + 1)
        return value

    def _summarize_list(self, data: Any, depth: int) -> Dict[str, Any]:
        count = len(data)
        sample = list(data[: self.options.sample_size])
        if depth < self.options.max_recursion_depth:
            sample = [self._summarize_nested(item, depth) for item in sample]

        summary = {
            "type": "list",
            "count": count,
            "sample": sample,
            "summary": f"List with {count} items",
        }
        return self._limit_size(summary, "sample")

    def _summarize_map(self, data: Mapping, depth: int) -> Dict[str, Any]:
        keys = list(data.keys())
        sample_keys = keys[: self.options.sample_size]
        if depth < self.options.max_recursion_depth:
            sample = {key: self._summarize_nested(data[key], depth) for key in sample_keys}
        else:
            sample = {key: data[key] for key in sample_keys}

        summary = {
            "type": "map",
            "count": len(keys),
            "keys": sample_keys,
            "sample": sample,
            "summary": f"Map with {len(keys)} keys",
        }
        return self._limit_size(summary, "sample")

    def _summarize_text(self, text: str, depth: int) -> Dict[str, Any]:
        excerpt_length = max(0, min(EXCERPT_LENGTH, self.options.max_summary_size - EXCERPT_OVERHEAD))
        summary = {
            "type": "text",
            "length": len(text),
            "excerpt": text[:excerpt_length],
            "summary": f"Text with {len(text)} characters",
        }
        return self._limit_size(summary, "excerpt")

    def _summarize_record(self, record: Any, depth: int) -> Dict[str, Any]:
        record_type = type(record).__name__
        if depth >= self.options.max_recursion_depth:
            return {
                "type": "record",
                "record_type": record_type,
                "summary": f"{record_type} (max depth reached)",
            }

        fields = record_fields(record) or {}
        summary = {
            "type": "record",
            "record_type": record_type,
            "fields": self._summarize_map(fields, depth),
            "summary": f"{record_type} with {len(fields)} fields",
        }
        return self._limit_size(summary, "fields")

    def _summarize_other(self, data: Any, depth: int = 0) -> Dict[str, Any]:
        data_type = describe_type(data)
        return {
            "type": "other",
            "data_type": data_type,
            "summary": f"{data_type.capitalize()}: {reprlib.repr(data)}",
        }

    def _limit_size(self, summary: Dict[str, Any], droppable: Optional[str]) -> Dict[str, Any]:
        """Drop the bulky part of a summary that exceeds `max_summary_size` and say so."""
        size = serialized_size(summary)
        max_size = self.options.max_summary_size
        if size <= max_size:
            return summary

        limited = {key: value for key, value in summary.items() if key != droppable}
        limited["sample_removed"] = True
        limited["reason"] = f"Summary exceeded max size ({size} > {max_size})"
        return limited

