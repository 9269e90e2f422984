from concurrent.futures import ThreadPoolExecutor
from enum import Enum

from agent_tools import ToolDefinition, ToolRegistry


class Tools(str, Enum):
    GET_CUSTOMER = "get_customer"


def make_tool(name: str) -> ToolDefinition:
    return ToolDefinition.build(name=name, description=f"{name} tool", function=lambda args: args)


def test_register_and_get(registry: ToolRegistry, customer_tool: ToolDefinition) -> None:
    registry.register("billing", "get_customer", customer_tool)

    assert registry.get("billing", "get_customer") is customer_tool
    assert registry.get("billing", Tools.GET_CUSTOMER) is customer_tool
    assert registry.get("billing", "unknown") is None
    assert registry.get("support", "get_customer") is None


def test_register_is_an_upsert(registry: ToolRegistry) -> None:
    first, second = make_tool("a"), make_tool("a")
    registry.register("billing", "a", first)
    registry.register("billing", "a", second)

    assert registry.get("billing", "a") is second
    assert registry.list("billing") == [second]


def test_list_is_scoped(registry: ToolRegistry) -> None:
    registry.register("billing", "a", make_tool("a"))
    registry.register("billing", "b", make_tool("b"))
    registry.register("support", "c", make_tool("c"))

    assert sorted(t.name for t in registry.list("billing")) == ["a", "b"]
    assert [t.name for t in registry.list("support")] == ["c"]
    assert registry.list("unknown") == []


def test_unregister_missing_tool_is_a_noop(registry: ToolRegistry) -> None:
    registry.register("billing", "a", make_tool("a"))

    registry.unregister("billing", "missing")
    registry.unregister("nowhere", "a")

    assert [t.name for t in registry.list("billing")] == ["a"]


def test_unregister_last_tool_drops_the_scope(registry: ToolRegistry) -> None:
    registry.register("billing", "a", make_tool("a"))
    registry.unregister("billing", "a")

    assert registry.get("billing", "a") is None
    assert "billing" not in registry.scopes()


def test_clear_and_clear_all(registry: ToolRegistry) -> None:
    registry.register("billing", "a", make_tool("a"))
    registry.register("support", "b", make_tool("b"))

    registry.clear("billing")
    assert registry.list("billing") == []
    assert len(registry.list("support")) == 1

    registry.clear_all()
    assert registry.scopes() == []


def test_schemas_for_scope(registry: ToolRegistry, customer_tool: ToolDefinition) -> None:
    registry.register("billing", customer_tool.name, customer_tool)

    schemas = registry.schemas("billing")

    assert schemas == [
        {
            "name": "get_customer",
            "description": "Retrieve customer information by ID",
            "parameters": {
                "type": "object",
                "properties": {"customer_id": {"type": "string", "description": "The customer's ID"}},
                "required": ["customer_id"],
            },
        }
    ]


def test_concurrent_registration_keeps_every_write(registry: ToolRegistry) -> None:
    def register_batch(worker: int) -> None:
        for i in range(50):
            name = f"tool_{worker}_{i}"
            registry.register("shared", name, make_tool(name))

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(register_batch, range(8)))

    assert len(registry.list("shared")) == 400


def test_concurrent_register_and_unregister(registry: ToolRegistry) -> None:
    names = [f"tool_{i}" for i in range(100)]
    for name in names:
        registry.register("shared", name, make_tool(name))

    with ThreadPoolExecutor(max_workers=4) as pool:
        list(pool.map(lambda n: registry.unregister("shared", n), names[::2]))
        list(pool.map(lambda n: registry.get("shared", n), names))

    assert sorted(t.name for t in registry.list("shared")) == sorted(names[1::2])
