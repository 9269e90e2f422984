"""Dispatch resource-action tools to an external action engine and normalize what it returns."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from ..models import ExecutionContext, ResourceAction
from ...exceptions import RecordNotFoundForMutationError, ToolExecutionError
from ...logger import get_logger
from ...records import record_fields

logger = get_logger(__name__)

# Engine bookkeeping that never reaches the model.
INTERNAL_FIELDS = frozenset({"__meta__", "__metadata__", "aggregates", "calculations"})


class ActionType(str, Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


@dataclass(frozen=True)
class ActionOptions:
    """Options every action runs with."""

    actor: Any = None
    tenant: Any = None


@dataclass
class BulkResult:
    records: List[Any] = field(default_factory=list)
    errors: List[Any] = field(default_factory=list)


@dataclass
class OffsetPage:
    results: List[Any] = field(default_factory=list)
    count: Optional[int] = None
    more: bool = False


@dataclass
class KeysetPage:
    results: List[Any] = field(default_factory=list)
    more: bool = False
    before: Optional[str] = None
    after: Optional[str] = None


class ActionEngine(Protocol):
    """
    Protocol for the external runtime that owns resources and their actions.

    Methods either return a result or raise. Exceptions carrying an ``errors``
    list have their messages joined into the tool's error text.
    """

    def action_type(self, resource: Any, action_name: str) -> ActionType:
        """Return the kind of the named action."""
        ...

    def read(self, resource: Any, action_name: str, args: Dict[str, Any], options: ActionOptions) -> Any:
        ...

    def create(self, resource: Any, action_name: str, args: Dict[str, Any], options: ActionOptions) -> Any:
        ...

    def update(self, record: Any, action_name: str, args: Dict[str, Any], options: ActionOptions) -> Any:
        ...

    def destroy(self, record: Any, action_name: str, args: Dict[str, Any], options: ActionOptions) -> Any:
        ...

    def get(self, resource: Any, record_id: Any, options: ActionOptions) -> Any:
        """Load a single record by id, returning None when it does not exist."""
        ...


def format_action_error(error: BaseException) -> str:
    errors = getattr(error, "errors", None)
    if isinstance(errors, (list, tuple)) and errors:
        return ", ".join(str(getattr(item, "message", None) or item) for item in errors)
    return str(error) or type(error).__name__


def normalize_record(record: Any) -> Any:
    """Flatten a structured record into a plain field mapping without bookkeeping fields.

    Mappings and scalars are engine payloads, not records, and are returned unchanged.
    """
    if isinstance(record, Mapping):
        return record
    fields = record_fields(record)
    if fields is None:
        return record
    return {key: value for key, value in fields.items() if key not in INTERNAL_FIELDS}


def normalize_action_result(result: Any) -> Any:
    """Normalize the heterogeneous shapes an action engine can return."""
    if isinstance(result, BulkResult):
        return {
            "records": [normalize_record(r) for r in result.records],
            "count": len(result.records),
            "errors": list(result.errors),
        }
    if isinstance(result, OffsetPage):
        return {
            "results": [normalize_record(r) for r in result.results],
            "count": result.count,
            "more": result.more,
        }
    if isinstance(result, KeysetPage):
        return {
            "results": [normalize_record(r) for r in result.results],
            "more": result.more,
            "before": result.before,
            "after": result.after,
        }
    if isinstance(result, (list, tuple)):
        return [normalize_record(r) for r in result]
    return normalize_record(result)


def _load_record(
    engine: ActionEngine, target: ResourceAction, args: Dict[str, Any], options: ActionOptions, action: ActionType
) -> Any:
    record_id = args.get("id")
    if record_id is None:
        raise RecordNotFoundForMutationError(f"Record not found for {action.value}: no id given")
    try:
        record = engine.get(target.resource, record_id, options)
    except Exception as e:
        raise RecordNotFoundForMutationError(f"Record not found for {action.value}: {format_action_error(e)}") from e
    if record is None:
        raise RecordNotFoundForMutationError(f"Record not found for {action.value}")
    return record


def execute_resource_action(
    engine: Optional[ActionEngine], target: ResourceAction, args: Dict[str, Any], context: ExecutionContext
) -> Any:
    """Run a resource action and return its normalized result.

    Args:
        engine: The external action engine.
        target: Resource and action to run.
        args: Normalized tool arguments.
        context: Execution context supplying actor, tenant and an optional record.

    Raises:
        ToolExecutionError: If no engine is configured or the engine reports an error.
        RecordNotFoundForMutationError: If an update/destroy target cannot be loaded.
    """
    if engine is None:
        raise ToolExecutionError("No action engine configured for resource actions.")

    options = ActionOptions(actor=context.actor, tenant=context.tenant)
    action = ActionType(engine.action_type(target.resource, target.action_name))
    logger.debug("Running %s action '%s' on %r.", action.value, target.action_name, target.resource)

    record = None
    if action in (ActionType.UPDATE, ActionType.DESTROY):
        record = context.record if context.record is not None else _load_record(engine, target, args, options, action)

    try:
        if action == ActionType.READ:
            result = engine.read(target.resource, target.action_name, args, options)
        elif action == ActionType.CREATE:
            result = engine.create(target.resource, target.action_name, args, options)
        elif action == ActionType.UPDATE:
            result = engine.update(record, target.action_name, args, options)
        else:
            result = engine.destroy(record, target.action_name, args, options)
    except Exception as e:
        raise ToolExecutionError(format_action_error(e)) from e

    return normalize_action_result(result)
