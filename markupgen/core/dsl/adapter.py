"""
Deserialization Adapter
=======================

Map the generic tree value produced by a scripting runtime (nested
mappings, sequences and strings) onto the typed models.
"""

from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from markupgen.config.logging import get_logger
from markupgen.core.errors import DeserializationError
from markupgen.models.css import RuleSet
from markupgen.models.html import Node

logger = get_logger(__name__)

T = TypeVar("T")


def _target_name(target: Any) -> str:
    if target is Node:
        return "Node"
    return getattr(target, "__name__", repr(target))


def deserialize_into(target: Type[T], value: Any) -> T:
    """
    Build a typed model from a generic value.

    Args:
        target: Model type or tagged-union alias (``RuleSet``, ``Node``, ...)
        value: Generic value using external variant tags

    Returns:
        Validated, immutable model instance

    Raises:
        DeserializationError: If the value's shape does not match the target
    """
    name = _target_name(target)
    try:
        return TypeAdapter(target).validate_python(value)
    except ValidationError as e:
        error_msg = f"Invalid {name} structure: {e}"
        logger.error("Deserialization failed", target=name, error_count=e.error_count())
        raise DeserializationError(error_msg, target=name) from e


def deserialize_rule_set(value: Any) -> RuleSet:
    """Build a ``RuleSet`` from a generic value."""
    return deserialize_into(RuleSet, value)


def deserialize_node(value: Any) -> Node:
    """Build an HTML ``Node`` from a generic value."""
    return deserialize_into(Node, value)  # type: ignore[arg-type]
