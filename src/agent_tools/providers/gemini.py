"""Translate between Gemini content payloads and the library's tool call protocol."""

from typing import Any, Dict, Iterable, List, Optional, Sequence

from google.genai import types

from ..logger import get_logger
from ..tools.models import ResultEntry, ToolCall, ToolDefinition, canonical_name
from ..tools.schema import ToolConverter

logger = get_logger(__name__)


def _gemini_parameters(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Gemini rejects required names that are not declared properties, and empty required lists."""
    params = dict(schema)
    required = [name for name in params.get("required", []) if name in params.get("properties", {})]
    if required:
        params["required"] = required
    else:
        params.pop("required", None)
    return params


def to_gemini_tool(definitions: Iterable[ToolDefinition]) -> Optional[types.Tool]:
    """
    Generates a `types.Tool` object holding one function declaration per definition.

    Returns:
        The tool, or None if there are no definitions.
    """
    declarations = []
    for definition in definitions:
        schema = ToolConverter.to_schema(definition)
        if definition.parameters:
            declarations.append(
                types.FunctionDeclaration(
                    name=schema["name"],
                    description=schema["description"],
                    parameters=_gemini_parameters(schema["parameters"]),
                )
            )
        else:
            declarations.append(types.FunctionDeclaration(name=schema["name"], description=schema["description"]))

    if not declarations:
        return None
    return types.Tool(function_declarations=declarations)


def tool_calls_from_response(response: types.GenerateContentResponse) -> List[ToolCall]:
    """Extract tool calls from a Gemini content response.

    Gemini does not always assign call ids; missing ones are derived from the call's position.
    """
    calls = []
    for position, function_call in enumerate(response.function_calls or []):
        call_id = function_call.id or f"{function_call.name}-{position}"
        calls.append(ToolCall(id=call_id, name=function_call.name, arguments=function_call.args))
    return calls


def function_response_parts(results: Sequence[ResultEntry], tool_calls: Sequence[ToolCall]) -> List[types.Part]:
    """Build the function response parts answering each tool call, in order.

    Args:
        results: Executor output.
        tool_calls: The calls the results answer, used to recover tool names.
    """
    names = {call.id: canonical_name(call.name) for call in tool_calls}
    parts = []
    for entry in results:
        name = names.get(entry.tool_call_id)
        if name is None:
            logger.warning("No tool call found for result '%s'.", entry.tool_call_id)
            name = entry.tool_call_id
        parts.append(
            types.Part(
                function_response=types.FunctionResponse(
                    id=entry.tool_call_id,
                    name=name,
                    response=entry.to_response(),
                )
            )
        )
    return parts
