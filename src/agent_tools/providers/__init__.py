"""Provider boundary adapters for OpenAI and Gemini."""

from .gemini import function_response_parts, to_gemini_tool, tool_calls_from_response
from .openai_api import to_openai_tools, tool_calls_from_completion, tool_messages

__all__ = [
    "function_response_parts",
    "to_gemini_tool",
    "tool_calls_from_response",
    "to_openai_tools",
    "tool_calls_from_completion",
    "tool_messages",
]
