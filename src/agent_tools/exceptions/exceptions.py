"""
Custom exception classes for the agent tool system.

Only configuration errors (`InvalidToolConfigurationError`, `ToolValidationError`)
escape to callers, and only while a tool definition is being built. Every other
error is raised inside the executor and converted into an error result entry
attached to the originating tool call.
"""

from typing import List, Sequence


class AgentToolError(Exception):
    """Base exception for all tool-related errors."""

    pass


class ToolValidationError(AgentToolError):
    """Raised when a tool definition or one of its parameters is invalid."""

    pass


class InvalidToolConfigurationError(ToolValidationError):
    """Raised when a tool declares both or neither of an action and a function."""

    pass


class ToolNotFoundError(AgentToolError):
    """Raised when a requested tool is not among the known definitions."""

    pass


class MissingRequiredParametersError(AgentToolError):
    """Raised when a tool call omits one or more required parameters."""

    def __init__(self, missing: Sequence[str]) -> None:
        self.missing: List[str] = list(missing)
        super().__init__(f"missing required parameters: {self.missing}")


class RecordNotFoundForMutationError(AgentToolError):
    """Raised when the record targeted by an update or destroy action cannot be loaded."""

    pass


class ToolExecutionError(AgentToolError):
    """Raised when a tool fails during execution."""

    pass


class ToolTimeoutError(ToolExecutionError):
    """Raised when a tool call exceeds its time budget."""

    pass
