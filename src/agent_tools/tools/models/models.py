"""Tool definition models shared by the registry, the converter and the executor."""

from enum import Enum
from typing import Annotated, Any, Callable, Dict, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...exceptions import InvalidToolConfigurationError, ToolValidationError
from ...logger import get_logger

logger = get_logger(__name__)


def canonical_name(name: Any) -> str:
    """Return the canonical string form of a tool or parameter name.

    Enum members ("symbols") collapse to their value, everything else to ``str``.
    """
    if isinstance(name, Enum):
        return str(name.value)
    return str(name)


class ParameterType(str, Enum):
    """Parameter types a tool may declare."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    UUID = "uuid"
    MAP = "map"
    ATOM = "atom"
    ARRAY = "array"


class ParameterSpec(BaseModel):
    """
    Declared name, type and requirement of a single tool argument.

    Attributes:
        name: Parameter name, unique within its tool definition.
        type: One of the `ParameterType` values. Unknown types are kept as-is and
              rendered as strings in the provider schema.
        required: Whether the model must supply the parameter.
        description: Optional human readable description.
        items: Element type when `type` is ``array``.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = ParameterType.STRING.value
    required: bool = False
    description: Optional[str] = None
    items: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _canonical_param_name(cls, value: Any) -> str:
        return canonical_name(value)

    @field_validator("type", "items", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return str(value.value)
        return value


class ResourceAction(BaseModel):
    """Execution target that runs a named action on an external resource."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["resource_action"] = "resource_action"
    resource: Any
    action_name: str


class FunctionTarget(BaseModel):
    """Execution target that invokes a Python callable."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: Literal["function"] = "function"
    func: Callable[..., Any]
    extra_args: Optional[Tuple[Any, ...]] = None


ExecutionTarget = Annotated[Union[ResourceAction, FunctionTarget], Field(discriminator="kind")]


class ToolDefinition(BaseModel):
    """
    Represents the definition of a tool that a model can call.

    A definition is immutable once built and carries exactly one execution target,
    either a `ResourceAction` or a `FunctionTarget`.

    Attributes:
        name: The unique name of the tool.
        description: A brief description of what the tool does.
        target: Where calls to this tool are dispatched.
        parameters: Ordered parameter declarations.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    target: ExecutionTarget
    parameters: List[ParameterSpec] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _canonical_tool_name(cls, value: Any) -> str:
        return canonical_name(value)

    @field_validator("parameters", mode="before")
    @classmethod
    def _expand_parameters(cls, value: Any) -> Any:
        # Accept {name: {type: ..., required: ...}} in addition to a list of specs.
        if value is None:
            return []
        if isinstance(value, Mapping):
            return [{"name": name, **dict(spec or {})} for name, spec in value.items()]
        return value

    @field_validator("parameters")
    @classmethod
    def _unique_parameter_names(cls, value: List[ParameterSpec]) -> List[ParameterSpec]:
        seen: set[str] = set()
        duplicates = []
        for spec in value:
            if spec.name in seen:
                duplicates.append(spec.name)
            seen.add(spec.name)
        if duplicates:
            msg = f"Duplicate parameter names: {sorted(set(duplicates))}"
            logger.error(msg)
            raise ToolValidationError(msg)
        return value

    @property
    def required_parameters(self) -> List[str]:
        return [spec.name for spec in self.parameters if spec.required]

    def parameter(self, name: str) -> Optional[ParameterSpec]:
        """Look up a parameter spec by its canonical name."""
        for spec in self.parameters:
            if spec.name == name:
                return spec
        return None

    @classmethod
    def build(
        cls,
        name: Any,
        description: Optional[str] = None,
        action: Optional[Union[ResourceAction, Tuple[Any, str]]] = None,
        function: Optional[Union[FunctionTarget, Callable[..., Any], Tuple[Any, ...]]] = None,
        parameters: Optional[Union[List[Any], Dict[str, Any]]] = None,
    ) -> "ToolDefinition":
        """Build a definition from the configuration shape with nullable action and function.

        Args:
            name: Tool name (string or enum member).
            description: What the tool does.
            action: A `ResourceAction` or a ``(resource, action_name)`` tuple.
            function: A `FunctionTarget`, a callable, or a ``(callable, extra_args)`` tuple.
            parameters: Parameter specs as a list or a ``{name: spec}`` mapping.

        Returns:
            The validated tool definition.

        Raises:
            InvalidToolConfigurationError: If both or neither of action and function are set.
            ToolValidationError: If parameter names are not unique.
        """
        tool_name = canonical_name(name)
        if (action is None) == (function is None):
            which = "both" if action is not None else "neither"
            msg = f"Tool '{tool_name}' must specify exactly one of action or function, got {which}."
            logger.error(msg)
            raise InvalidToolConfigurationError(msg)

        target: Union[ResourceAction, FunctionTarget]
        if action is not None:
            if isinstance(action, ResourceAction):
                target = action
            else:
                resource, action_name = action
                target = ResourceAction(resource=resource, action_name=canonical_name(action_name))
        elif isinstance(function, FunctionTarget):
            target = function
        elif isinstance(function, tuple):
            func, *extra = function
            extra_args = tuple(extra[0]) if len(extra) == 1 and isinstance(extra[0], (list, tuple)) else tuple(extra)
            target = FunctionTarget(func=func, extra_args=extra_args)
        else:
            target = FunctionTarget(func=function)

        return cls(name=tool_name, description=description or "", target=target, parameters=parameters or [])
