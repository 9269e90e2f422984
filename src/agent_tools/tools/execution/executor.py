"""Resolve, normalize and execute the tool calls of one model turn."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from .arguments import decode_arguments, default_argument_error, normalize_arguments, validate_required
from .function import invoke_function
from .resource_action import ActionEngine, execute_resource_action
from ..models import (
    Err,
    ExecutionContext,
    FunctionTarget,
    Ok,
    Outcome,
    ResourceAction,
    ResultEntry,
    ToolCall,
    ToolDefinition,
    canonical_name,
)
from ...exceptions import AgentToolError, ToolNotFoundError, ToolTimeoutError
from ...logger import get_logger

logger = get_logger(__name__)


class ToolExecutor:
    """Executes the tool calls requested by a model.

    Each call is resolved against the known definitions, its arguments are
    normalized and validated, and it is dispatched to a resource action or a
    function. Every failure is captured as an error entry for its own call, so
    one broken tool never prevents its siblings from being reported.

    Function results that are not mappings are wrapped as ``{"result": value}``.
    Resource-action results are kept as the engine returned them after record
    normalization, so list payloads stay lists for `Sample` and `Truncate`;
    `ResultEntry.to_response` wraps them when they are sent back to the model.
    """

    def __init__(
        self,
        *,
        action_engine: Optional[ActionEngine] = None,
        tool_timeout: Optional[float] = 180.0,
        concurrent: bool = True,
        argument_error_formatter: Optional[Callable[[str, Exception], str]] = None,
    ) -> None:
        """Initialize the executor.

        Args:
            action_engine: Runtime used for resource-action tools.
            tool_timeout: Upper bound in seconds for a single call. None disables it.
            concurrent: Run the calls of a batch concurrently instead of one by one.
            argument_error_formatter: Optional formatter for argument parsing errors.
        """
        self._action_engine = action_engine
        self._tool_timeout = tool_timeout
        self._concurrent = concurrent
        self._argument_error_formatter = argument_error_formatter or default_argument_error

    async def execute_tools(
        self,
        tool_calls: Sequence[ToolCall],
        tool_definitions: Iterable[ToolDefinition],
        context: Optional[ExecutionContext] = None,
    ) -> List[ResultEntry]:
        """Execute a batch of tool calls.

        Args:
            tool_calls: Calls issued by the model, in order.
            tool_definitions: The definitions the calls may refer to.
            context: Execution context shared by the batch.

        Returns:
            One result entry per call, in the same order as `tool_calls`.
        """
        context = context or ExecutionContext()
        index = self._index_definitions(tool_definitions)
        logger.info(f"Processing {len(tool_calls)} tool call(s).")

        if self._concurrent:
            return list(await asyncio.gather(*(self.execute_tool(tc, index, context) for tc in tool_calls)))

        results = []
        for tool_call in tool_calls:
            results.append(await self.execute_tool(tool_call, index, context))
        return results

    def execute_tools_sync(
        self,
        tool_calls: Sequence[ToolCall],
        tool_definitions: Iterable[ToolDefinition],
        context: Optional[ExecutionContext] = None,
    ) -> List[ResultEntry]:
        """Blocking variant of `execute_tools` for callers without a running event loop."""
        return asyncio.run(self.execute_tools(tool_calls, tool_definitions, context))

    async def execute_tool(
        self,
        tool_call: ToolCall,
        tool_definitions: Dict[str, ToolDefinition] | Iterable[ToolDefinition],
        context: ExecutionContext,
    ) -> ResultEntry:
        """Handle a single tool call request.

        Returns:
            The result entry for the call, never raising.
        """
        index = tool_definitions if isinstance(tool_definitions, dict) else self._index_definitions(tool_definitions)
        logger.debug(f"Handling tool call: {tool_call.name} (ID: {tool_call.id})")

        try:
            outcome = await self._run(tool_call, index, context)
        except ToolTimeoutError as exc:
            msg = str(exc)
            logger.warning(f"Timeout in '{tool_call.name}': {msg}")
            outcome = Err(msg)
        except AgentToolError as exc:
            msg = str(exc)
            logger.warning(f"Recoverable error in '{tool_call.name}': {msg} ({type(exc).__name__})")
            outcome = Err(msg)
        except Exception as exc:
            msg = str(exc) or type(exc).__name__
            logger.error(f"Tool '{tool_call.name}' raised {type(exc).__name__}: {msg}", exc_info=True)
            outcome = Err(msg)

        return ResultEntry(tool_call_id=tool_call.id, outcome=outcome)

    async def _run(self, tool_call: ToolCall, index: Dict[str, ToolDefinition], context: ExecutionContext) -> Outcome:
        definition = self.find_tool(tool_call.name, index)
        if definition is None:
            raise ToolNotFoundError(f"Tool '{canonical_name(tool_call.name)}' not found")

        raw_args = decode_arguments(definition.name, tool_call.arguments, self._argument_error_formatter)
        args = normalize_arguments(raw_args, definition)
        validate_required(args, definition)

        call_context = context.with_tool(definition)
        timeout = self._effective_timeout(context)
        logger.info(f"Executing tool '{definition.name}'...")
        outcome = await self._dispatch_with_timeout(definition, args, call_context, timeout)
        logger.info(f"Tool '{definition.name}' executed successfully.")
        return outcome

    async def _dispatch_with_timeout(
        self, definition: ToolDefinition, args: Dict[str, Any], context: ExecutionContext, timeout: Optional[float]
    ) -> Outcome:
        """Run the dispatch under the time budget.

        Only an expired budget raises `ToolTimeoutError`; a `TimeoutError` raised by the
        tool itself propagates as an ordinary failure.
        """
        task = asyncio.ensure_future(self._dispatch(definition, args, context))
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if task not in done:
            task.cancel()
            raise ToolTimeoutError(f"Tool execution timed out after {timeout} seconds.")
        return task.result()

    async def _dispatch(self, definition: ToolDefinition, args: Dict[str, Any], context: ExecutionContext) -> Outcome:
        target = definition.target
        if isinstance(target, ResourceAction):
            result = await asyncio.to_thread(execute_resource_action, self._action_engine, target, args, context)
            return Ok(result)
        if isinstance(target, FunctionTarget):
            return await invoke_function(target, args, context)
        raise AgentToolError(f"Tool '{definition.name}' has no execution target.")

    def _effective_timeout(self, context: ExecutionContext) -> Optional[float]:
        budgets = [t for t in (context.timeout, self._tool_timeout) if t is not None]
        return min(budgets) if budgets else None

    @staticmethod
    def _index_definitions(tool_definitions: Iterable[ToolDefinition]) -> Dict[str, ToolDefinition]:
        index: Dict[str, ToolDefinition] = {}
        for definition in tool_definitions:
            index.setdefault(definition.name, definition)
        return index

    @staticmethod
    def find_tool(name: Any, index: Dict[str, ToolDefinition]) -> Optional[ToolDefinition]:
        """Exact-match lookup; symbol and string forms of a name are equivalent."""
        return index.get(canonical_name(name))
