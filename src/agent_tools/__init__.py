"""Agent tools - dispatch model-issued tool calls and reshape their results for the conversation."""

from .exceptions import (
    AgentToolError,
    InvalidToolConfigurationError,
    MissingRequiredParametersError,
    RecordNotFoundForMutationError,
    ToolExecutionError,
    ToolTimeoutError,
    ToolNotFoundError,
    ToolValidationError,
)
from .logger import get_logger, setup_logging
from .processors import ResultPipeline, Sample, Summarize, Truncate
from .tools import (
    ActionEngine,
    ActionType,
    BulkResult,
    Err,
    ExecutionContext,
    FunctionTarget,
    KeysetPage,
    OffsetPage,
    Ok,
    ParameterSpec,
    ParameterType,
    ResourceAction,
    ResultEntry,
    ToolCall,
    ToolConverter,
    ToolDefinition,
    ToolExecutor,
    ToolRegistry,
)

__all__ = [
    "AgentToolError",
    "InvalidToolConfigurationError",
    "MissingRequiredParametersError",
    "RecordNotFoundForMutationError",
    "ToolExecutionError",
    "ToolTimeoutError",
    "ToolNotFoundError",
    "ToolValidationError",
    "get_logger",
    "setup_logging",
    "ResultPipeline",
    "Sample",
    "Summarize",
    "Truncate",
    "ActionEngine",
    "ActionType",
    "BulkResult",
    "Err",
    "ExecutionContext",
    "FunctionTarget",
    "KeysetPage",
    "OffsetPage",
    "Ok",
    "ParameterSpec",
    "ParameterType",
    "ResourceAction",
    "ResultEntry",
    "ToolCall",
    "ToolConverter",
    "ToolDefinition",
    "ToolExecutor",
    "ToolRegistry",
]
