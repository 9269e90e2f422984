"""Flatten structured records (pydantic models, dataclasses, plain objects) into field mappings."""

import dataclasses
import types
from typing import Any, Dict, Optional

from pydantic import BaseModel


def record_fields(value: Any) -> Optional[Dict[str, Any]]:
    """Return the fields of a structured record, or None if `value` is not one."""
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, (type, types.ModuleType)) or callable(value):
        return None
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict):
        return dict(attrs)
    return None
