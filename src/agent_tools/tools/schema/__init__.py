"""Tool schema generation."""

from .converter import ToolConverter, TYPE_MAPPING

__all__ = ["ToolConverter", "TYPE_MAPPING"]
