from enum import Enum
from typing import Any, Dict, Iterator

import pytest

from agent_tools import ExecutionContext, ToolDefinition, ToolRegistry


class Tools(str, Enum):
    GET_CUSTOMER = "get_customer"


def lookup_customer(args: Dict[str, Any]) -> Dict[str, Any]:
    """Looks up a customer by id."""
    return {"customer_id": args["customer_id"], "name": "Ada"}


def exploding_tool(args: Dict[str, Any]) -> Dict[str, Any]:
    """Always fails."""
    raise RuntimeError("database unavailable")


@pytest.fixture
def registry() -> Iterator[ToolRegistry]:
    registry = ToolRegistry()
    yield registry
    registry.clear_all()


@pytest.fixture
def customer_tool() -> ToolDefinition:
    return ToolDefinition.build(
        name=Tools.GET_CUSTOMER,
        description="Retrieve customer information by ID",
        function=lookup_customer,
        parameters={"customer_id": {"type": "string", "required": True, "description": "The customer's ID"}},
    )


@pytest.fixture
def failing_tool() -> ToolDefinition:
    return ToolDefinition.build(name="explode", description="Always fails", function=exploding_tool)


@pytest.fixture
def context() -> ExecutionContext:
    return ExecutionContext(actor={"id": "user-1"}, tenant="acme")
