"""Translate between OpenAI chat-completion payloads and the library's tool call protocol."""

import json
from typing import Any, Dict, Iterable, List, Sequence, cast

from openai.types.chat import ChatCompletion, ChatCompletionToolParam

from ..logger import get_logger
from ..tools.models import ResultEntry, ToolCall, ToolDefinition
from ..tools.schema import ToolConverter

logger = get_logger(__name__)


def to_openai_tools(definitions: Iterable[ToolDefinition]) -> List[ChatCompletionToolParam]:
    """Build the ``tools`` argument of a chat completion request.

    Args:
        definitions: The tool definitions to expose.

    Returns:
        One function tool entry per definition.
    """
    return [
        cast(ChatCompletionToolParam, {"type": "function", "function": ToolConverter.to_schema(definition)})
        for definition in definitions
    ]


def tool_calls_from_completion(completion: ChatCompletion) -> List[ToolCall]:
    """Extract tool calls from an OpenAI chat completion response.

    Arguments are kept as the raw JSON string; the executor decodes them.
    """
    if not completion.choices:
        return []

    tool_calls = completion.choices[0].message.tool_calls
    if not tool_calls:
        return []

    requests = []
    for tool_call in tool_calls:
        if tool_call.type != "function":
            logger.debug("Skipping non-function tool call '%s'.", tool_call.id)
            continue
        requests.append(ToolCall(id=tool_call.id, name=tool_call.function.name, arguments=tool_call.function.arguments))
    return requests


def tool_messages(results: Sequence[ResultEntry]) -> List[Dict[str, Any]]:
    """Build the ``role=tool`` messages answering each tool call, in order."""
    return [
        {
            "role": "tool",
            "tool_call_id": entry.tool_call_id,
            "content": json.dumps(entry.to_response(), default=str),
        }
        for entry in results
    ]
