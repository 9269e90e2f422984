"""Export the tool-related exception hierarchy used across definition and execution paths."""

from .exceptions import (
    AgentToolError,
    ToolValidationError,
    InvalidToolConfigurationError,
    ToolNotFoundError,
    MissingRequiredParametersError,
    RecordNotFoundForMutationError,
    ToolExecutionError,
    ToolTimeoutError,
)

__all__ = [
    "AgentToolError",
    "ToolValidationError",
    "InvalidToolConfigurationError",
    "ToolNotFoundError",
    "MissingRequiredParametersError",
    "RecordNotFoundForMutationError",
    "ToolExecutionError",
    "ToolTimeoutError",
]
