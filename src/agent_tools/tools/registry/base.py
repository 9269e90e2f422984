"""Scoped tool registry shared by every agent in a process."""

import threading
from typing import Any, Dict, Hashable, List, Optional

from ..models import ToolDefinition, canonical_name
from ..schema import ToolConverter
from ...logger import get_logger

logger = get_logger(__name__)


class ToolRegistry:
    """
    A central registry to manage and access tool definitions per scope.

    A scope is any hashable namespace (usually a domain or an agent class) under
    which tools are grouped. Every operation goes through a single lock owned by
    the registry, so readers only ever observe fully applied writes.

    Example:
        registry = ToolRegistry()
        registry.register("billing", "get_customer", definition)
        registry.get("billing", "get_customer")
    """

    def __init__(self) -> None:
        """Initialize an empty ToolRegistry."""
        self._lock = threading.RLock()
        self._scopes: Dict[Hashable, Dict[str, ToolDefinition]] = {}

    def register(self, scope: Hashable, name: Any, definition: ToolDefinition) -> None:
        """Register a tool under a scope, replacing any previous tool with the same name.

        Args:
            scope: The namespace to register the tool under.
            name: The name of the tool (string or enum member).
            definition: The tool definition.
        """
        tool_name = canonical_name(name)
        with self._lock:
            tools = self._scopes.setdefault(scope, {})
            replaced = tool_name in tools
            tools[tool_name] = definition
        if replaced:
            logger.info("Replaced tool '%s' in scope %r.", tool_name, scope)
        else:
            logger.info("Successfully registered tool '%s' in scope %r.", tool_name, scope)

    def get(self, scope: Hashable, name: Any) -> Optional[ToolDefinition]:
        """Retrieve a tool by name, or None if it is not registered."""
        tool_name = canonical_name(name)
        with self._lock:
            return self._scopes.get(scope, {}).get(tool_name)

    def list(self, scope: Hashable) -> List[ToolDefinition]:
        """Return all tool definitions registered for a scope."""
        with self._lock:
            return list(self._scopes.get(scope, {}).values())

    def unregister(self, scope: Hashable, name: Any) -> None:
        """Remove a tool from a scope. Unknown tools are ignored.

        A scope left without tools is dropped.
        """
        tool_name = canonical_name(name)
        with self._lock:
            tools = self._scopes.get(scope)
            if not tools or tool_name not in tools:
                logger.debug("Tool '%s' not registered in scope %r; nothing to unregister.", tool_name, scope)
                return
            del tools[tool_name]
            if not tools:
                del self._scopes[scope]
        logger.info("Successfully unregistered tool '%s' from scope %r.", tool_name, scope)

    def clear(self, scope: Hashable) -> None:
        """Remove every tool registered for a scope."""
        with self._lock:
            self._scopes.pop(scope, None)
        logger.info("Cleared tools for scope %r.", scope)

    def clear_all(self) -> None:
        """Remove every tool from every scope."""
        with self._lock:
            self._scopes = {}
        logger.info("Cleared all tool scopes.")

    def scopes(self) -> List[Hashable]:
        """Return the scopes that currently hold at least one tool."""
        with self._lock:
            return list(self._scopes.keys())

    def schemas(self, scope: Hashable) -> List[Dict[str, Any]]:
        """Build the provider-facing JSON schemas for every tool in a scope."""
        return ToolConverter.to_json_schema(self.list(scope))
