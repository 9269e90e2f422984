"""Truncate successful tool results that exceed a size threshold."""

from collections.abc import Mapping
from typing import Any

from .base import BaseProcessor, is_large, is_sequence
from .options import DEFAULT_MARKER, DEFAULT_MAX_SIZE, TruncateOptions

TRUNCATED_KEY = "__truncated__"


class Truncate(BaseProcessor):
    """
    Cuts oversized payloads down to `max_size`.

    - Text keeps its first `max_size` characters followed by the marker.
    - Lists keep their first `max_size` items followed by the marker as a last item.
    - Mappings keep their first `max_size` keys plus a ``__truncated__`` entry holding the marker.

    Anything else, and anything within the threshold, is returned unchanged.
    """

    def __init__(self, max_size: int = DEFAULT_MAX_SIZE, marker: str = DEFAULT_MARKER) -> None:
        self.options = TruncateOptions(max_size=max_size, marker=marker)

    def transform(self, data: Any) -> Any:
        max_size = self.options.max_size
        if not is_large(data, max_size):
            return data

        marker = self.options.marker
        if isinstance(data, str):
            return data[:max_size] + marker
        if is_sequence(data):
            return list(data[:max_size]) + [marker]
        if isinstance(data, Mapping):
            kept = {key: data[key] for key in list(data.keys())[:max_size]}
            kept[TRUNCATED_KEY] = marker
            return kept
        return data
