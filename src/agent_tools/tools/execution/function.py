"""Invoke function-backed tools with the argument shape their callables expect."""

import asyncio
import inspect
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from ..models import ExecutionContext, FunctionTarget, Ok, Err, Outcome
from ...logger import get_logger

logger = get_logger(__name__)


def _positional_arity(func: Any) -> Optional[int]:
    """Count the positional parameters of a callable.

    Returns None when the callable accepts ``*args`` or cannot be inspected.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None

    count = 0
    for param in signature.parameters.values():
        if param.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if param.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def build_call_args(target: FunctionTarget, args: Dict[str, Any], context: ExecutionContext) -> List[Any]:
    """Build the positional arguments for a function target.

    The callable always receives the normalized arguments first, then any extra
    arguments, and finally the execution context when its arity leaves room for it.
    """
    call_args: List[Any] = [args, *(target.extra_args or ())]
    arity = _positional_arity(target.func)
    if arity is None or arity > len(call_args):
        call_args.append(context)
    return call_args


def normalize_result(result: Any) -> Outcome:
    """Wrap whatever a tool function returned into an outcome.

    Mappings are kept as-is; any other success value is wrapped as ``{"result": value}``.
    """
    if isinstance(result, Err):
        return result
    if isinstance(result, Ok):
        result = result.value
    if isinstance(result, Mapping):
        return Ok(dict(result))
    return Ok({"result": result})


async def invoke_function(target: FunctionTarget, args: Dict[str, Any], context: ExecutionContext) -> Outcome:
    """Execute the callable, handling async and sync functions.

    Sync callables run in a worker thread so they never block the event loop.
    Exceptions propagate to the executor, which turns them into error entries.
    """
    func = target.func
    call_args = build_call_args(target, args, context)

    if inspect.iscoroutinefunction(func):
        result = await func(*call_args)
    else:
        result = await asyncio.to_thread(func, *call_args)
        if inspect.isawaitable(result):
            result = await result

    return normalize_result(result)
