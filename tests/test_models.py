import pytest
from pydantic import ValidationError

from agent_tools import (
    Err,
    FunctionTarget,
    InvalidToolConfigurationError,
    Ok,
    ParameterSpec,
    ParameterType,
    ResourceAction,
    ResultEntry,
    ToolDefinition,
    ToolValidationError,
)


def noop(args):
    return args


def test_build_with_function_creates_function_target() -> None:
    tool = ToolDefinition.build(name="noop", description="Does nothing", function=noop)

    assert isinstance(tool.target, FunctionTarget)
    assert tool.target.func is noop
    assert tool.target.extra_args is None
    assert tool.parameters == []


def test_build_with_action_tuple_creates_resource_action() -> None:
    tool = ToolDefinition.build(name="list_orders", description="List orders", action=("Order", "read"))

    assert isinstance(tool.target, ResourceAction)
    assert tool.target.resource == "Order"
    assert tool.target.action_name == "read"


def test_build_with_function_tuple_keeps_extra_args() -> None:
    tool = ToolDefinition.build(name="send", description="Send", function=(noop, ["smtp", 25]))

    assert tool.target.extra_args == ("smtp", 25)


def test_build_rejects_both_action_and_function() -> None:
    with pytest.raises(InvalidToolConfigurationError, match="got both"):
        ToolDefinition.build(name="bad", description="Bad", action=("Order", "read"), function=noop)


def test_build_rejects_neither_action_nor_function() -> None:
    with pytest.raises(InvalidToolConfigurationError, match="got neither"):
        ToolDefinition.build(name="bad", description="Bad")


def test_duplicate_parameter_names_are_rejected() -> None:
    with pytest.raises(ToolValidationError, match="Duplicate parameter names"):
        ToolDefinition.build(
            name="dup",
            description="Duplicates",
            function=noop,
            parameters=[{"name": "x", "type": "integer"}, {"name": "x", "type": "string"}],
        )


def test_parameters_accept_keyword_mapping() -> None:
    tool = ToolDefinition.build(
        name="search",
        description="Search",
        function=noop,
        parameters={
            "query": {"type": "string", "required": True},
            "limit": {"type": ParameterType.INTEGER},
        },
    )

    assert [p.name for p in tool.parameters] == ["query", "limit"]
    assert tool.parameters[1].type == "integer"
    assert tool.required_parameters == ["query"]
    assert tool.parameter("limit") == ParameterSpec(name="limit", type="integer")
    assert tool.parameter("missing") is None


def test_definitions_are_immutable() -> None:
    tool = ToolDefinition.build(name="noop", description="Does nothing", function=noop)

    with pytest.raises(ValidationError):
        tool.name = "other"  # type: ignore[misc]


def test_result_entry_to_response() -> None:
    assert ResultEntry("1", Ok({"a": 1})).to_response() == {"a": 1}
    assert ResultEntry("2", Ok("text")).to_response() == {"result": "text"}
    assert ResultEntry("3", Err("boom")).to_response() == {"error": "boom"}
    assert ResultEntry("1", Ok({})).ok
    assert not ResultEntry("3", Err("boom")).ok
