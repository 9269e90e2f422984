"""Tool execution: argument handling, dispatch strategies and the batch executor."""

from .executor import ToolExecutor
from .resource_action import (
    ActionEngine,
    ActionOptions,
    ActionType,
    BulkResult,
    KeysetPage,
    OffsetPage,
    normalize_action_result,
    normalize_record,
)

__all__ = [
    "ToolExecutor",
    "ActionEngine",
    "ActionOptions",
    "ActionType",
    "BulkResult",
    "KeysetPage",
    "OffsetPage",
    "normalize_action_result",
    "normalize_record",
]
