"""
Convert tool definitions into the JSON schema shape model providers expect.

The conversion is deterministic and free of side effects: the same definition
always yields the same schema.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..models import ParameterSpec, ParameterType, ToolDefinition

TYPE_MAPPING: Dict[str, str] = {
    ParameterType.STRING.value: "string",
    ParameterType.INTEGER.value: "integer",
    ParameterType.FLOAT.value: "number",
    ParameterType.BOOLEAN.value: "boolean",
    ParameterType.UUID.value: "string",
    ParameterType.MAP.value: "object",
    ParameterType.ATOM.value: "string",
    ParameterType.ARRAY.value: "array",
}


class ToolConverter:
    """
    Helper class for building provider schemas from tool definitions.
    """

    @staticmethod
    def map_type(param_type: Optional[str]) -> str:
        """Map a declared parameter type to its JSON schema primitive.

        Unrecognized types map to ``"string"``.
        """
        if param_type is None:
            return "string"
        return TYPE_MAPPING.get(param_type, "string")

    @staticmethod
    def build_property(spec: ParameterSpec) -> Dict[str, Any]:
        """Build the JSON schema property for one parameter."""
        prop: Dict[str, Any] = {"type": ToolConverter.map_type(spec.type)}
        if prop["type"] == "array" and spec.items:
            prop["items"] = {"type": ToolConverter.map_type(spec.items)}
        if spec.description:
            prop["description"] = spec.description
        return prop

    @staticmethod
    def build_properties(parameters: Iterable[ParameterSpec]) -> Dict[str, Dict[str, Any]]:
        return {spec.name: ToolConverter.build_property(spec) for spec in parameters}

    @staticmethod
    def required_fields(parameters: Iterable[ParameterSpec]) -> List[str]:
        return [spec.name for spec in parameters if spec.required]

    @staticmethod
    def parameters_schema(parameters: Iterable[ParameterSpec]) -> Dict[str, Any]:
        """Build the ``{"type": "object", ...}`` schema describing a tool's arguments."""
        params = list(parameters)
        return {
            "type": "object",
            "properties": ToolConverter.build_properties(params),
            "required": ToolConverter.required_fields(params),
        }

    @staticmethod
    def to_schema(definition: ToolDefinition) -> Dict[str, Any]:
        """
        Build the complete schema object for a single tool.

        Args:
            definition: The tool definition to convert.

        Returns:
            A ``{"name", "description", "parameters"}`` mapping with string keys.
        """
        return {
            "name": definition.name,
            "description": definition.description or "",
            "parameters": ToolConverter.parameters_schema(definition.parameters),
        }

    @staticmethod
    def to_json_schema(definitions: Iterable[ToolDefinition]) -> List[Dict[str, Any]]:
        """Convert a list of tool definitions, preserving their order."""
        return [ToolConverter.to_schema(definition) for definition in definitions]
