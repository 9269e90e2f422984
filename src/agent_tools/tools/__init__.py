from .models import (
    Err,
    ExecutionContext,
    FunctionTarget,
    Ok,
    ParameterSpec,
    ParameterType,
    ResourceAction,
    ResultEntry,
    ToolCall,
    ToolDefinition,
)
from .schema import ToolConverter
from .registry import ToolRegistry
from .execution import ToolExecutor, ActionEngine, ActionType, BulkResult, OffsetPage, KeysetPage

__all__ = [
    "Err",
    "ExecutionContext",
    "FunctionTarget",
    "Ok",
    "ParameterSpec",
    "ParameterType",
    "ResourceAction",
    "ResultEntry",
    "ToolCall",
    "ToolDefinition",
    "ToolConverter",
    "ToolRegistry",
    "ToolExecutor",
    "ActionEngine",
    "ActionType",
    "BulkResult",
    "OffsetPage",
    "KeysetPage",
]
