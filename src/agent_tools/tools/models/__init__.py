"""Tool-related data models."""

from .models import (
    ExecutionTarget,
    FunctionTarget,
    ParameterSpec,
    ParameterType,
    ResourceAction,
    ToolDefinition,
    canonical_name,
)
from .tool_call import Err, ExecutionContext, Ok, Outcome, ResultEntry, ToolCall

__all__ = [
    "ExecutionTarget",
    "FunctionTarget",
    "ParameterSpec",
    "ParameterType",
    "ResourceAction",
    "ToolDefinition",
    "canonical_name",
    "Err",
    "ExecutionContext",
    "Ok",
    "Outcome",
    "ResultEntry",
    "ToolCall",
]
