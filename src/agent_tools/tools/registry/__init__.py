"""Scoped tool registry."""

from .base import ToolRegistry

__all__ = ["ToolRegistry"]
