"""Decode, coerce and validate the untyped arguments a model sends with a tool call."""

import json
import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..models import ParameterSpec, ParameterType, ToolDefinition, canonical_name
from ...exceptions import MissingRequiredParametersError, ToolExecutionError


def default_argument_error(tool_name: str, error: Exception) -> str:
    """Format a default error message for argument parsing failures.

    Args:
        tool_name: Name of the tool.
        error: The exception that occurred.

    Returns:
        A formatted error message string.
    """
    return f"Failed to parse arguments for tool '{tool_name}': {error}"


def decode_arguments(
    tool_name: str,
    raw_args: Any,
    error_formatter: Callable[[str, Exception], str] = default_argument_error,
) -> Dict[Any, Any]:
    """Turn raw tool arguments into a dictionary.

    Handles JSON strings, mappings, or None values.

    Raises:
        ToolExecutionError: If the arguments cannot be parsed into an object.
    """
    if raw_args is None or raw_args == "":
        return {}

    if isinstance(raw_args, Mapping):
        return dict(raw_args)

    if isinstance(raw_args, str):
        try:
            parsed = json.loads(raw_args)
        except json.JSONDecodeError as exc:
            raise ToolExecutionError(error_formatter(tool_name, exc)) from exc

        if parsed is None:
            return {}

        if not isinstance(parsed, dict):
            raise ToolExecutionError(
                error_formatter(tool_name, ValueError("Function arguments must decode to a JSON object."))
            )
        return parsed

    try:
        return dict(raw_args)
    except (TypeError, ValueError) as exc:
        raise ToolExecutionError(error_formatter(tool_name, exc)) from exc


_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?")


def _parse_int(value: str) -> Optional[int]:
    """Parse the leading integer of `value`, ignoring any trailing text."""
    match = _INT_PREFIX.match(value)
    return int(match.group()) if match else None


def _parse_float(value: str) -> Optional[float]:
    """Parse the leading number of `value`, ignoring any trailing text."""
    match = _FLOAT_PREFIX.match(value)
    return float(match.group()) if match else None


def _parse_whole_int(value: str) -> Optional[int]:
    return int(value) if _INT_PREFIX.fullmatch(value) else None


def coerce_value(value: Any, spec: Optional[ParameterSpec]) -> Any:
    """Coerce a string value according to its declared parameter type.

    Declared integers and floats keep their leading number, so "3.0" becomes 3 for
    an integer parameter. Values without a spec are converted only when the whole
    string is an integer. Values that fail to parse are returned unchanged.
    """
    if not isinstance(value, str):
        return value

    if spec is None:
        parsed_int = _parse_whole_int(value)
        return value if parsed_int is None else parsed_int

    if spec.type == ParameterType.INTEGER.value:
        parsed_int = _parse_int(value)
        return value if parsed_int is None else parsed_int

    if spec.type == ParameterType.FLOAT.value:
        parsed_float = _parse_float(value)
        return value if parsed_float is None else parsed_float

    if spec.type == ParameterType.BOOLEAN.value:
        lowered = value.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False

    return value


def normalize_arguments(args: Mapping[Any, Any], definition: ToolDefinition) -> Dict[str, Any]:
    """Canonicalize every key and coerce every value against the tool's parameter specs."""
    normalized: Dict[str, Any] = {}
    for key, value in args.items():
        name = canonical_name(key)
        normalized[name] = coerce_value(value, definition.parameter(name))
    return normalized


def missing_required(args: Mapping[Any, Any], definition: ToolDefinition) -> List[str]:
    """Return the required parameter names absent from `args` in both key forms."""
    return [name for name in definition.required_parameters if name not in args and str(name) not in args]


def validate_required(args: Mapping[Any, Any], definition: ToolDefinition) -> None:
    """
    Raises:
        MissingRequiredParametersError: Listing every missing required parameter.
    """
    missing = missing_required(args, definition)
    if missing:
        raise MissingRequiredParametersError(missing)
