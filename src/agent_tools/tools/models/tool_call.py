"""Data models for tool calls, their execution context and their outcomes."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

if TYPE_CHECKING:
    from .models import ToolDefinition


@dataclass(frozen=True)
class ToolCall:
    """Represents a single tool call request issued by a model turn."""

    id: str
    name: Any
    arguments: Any = None


@dataclass(frozen=True)
class ExecutionContext:
    """
    Per-batch execution context handed to every tool call.

    Attributes:
        actor: Identity the resource actions run as.
        tenant: Tenant the resource actions run in.
        timeout: Optional budget in seconds for each call.
        record: Pre-resolved record for update and destroy actions.
        metadata: Free-form values for function tools.
        tool: The resolved definition, injected per call.
    """

    actor: Any = None
    tenant: Any = None
    timeout: Optional[float] = None
    record: Any = None
    metadata: Dict[str, Any] = field(default_factory=dict)
    tool: Optional["ToolDefinition"] = None

    def with_tool(self, tool: "ToolDefinition") -> "ExecutionContext":
        return dataclasses.replace(self, tool=tool)


@dataclass(frozen=True)
class Ok:
    """Successful outcome of a tool call."""

    value: Any


@dataclass(frozen=True)
class Err:
    """Failed outcome of a tool call."""

    message: str


Outcome = Union[Ok, Err]


@dataclass(frozen=True)
class ResultEntry:
    """The outcome of one tool call, keyed by the call's correlation id."""

    tool_call_id: str
    outcome: Outcome

    @property
    def ok(self) -> bool:
        return isinstance(self.outcome, Ok)

    def to_response(self) -> Dict[str, Any]:
        """Render the outcome as the mapping sent back to the model."""
        if isinstance(self.outcome, Err):
            return {"error": self.outcome.message}
        if isinstance(self.outcome.value, dict):
            return self.outcome.value
        return {"result": self.outcome.value}
