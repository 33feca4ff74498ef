"""Defensive coercion of backend payloads into the shapes the client expects."""

from typing import Any, List, Type, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def coerce_list(payload: Any, context_name: str = "payload") -> List[Any]:
    """
    Return ``payload`` if it is a list, otherwise an empty list.

    Args:
        payload: Decoded JSON body
        context_name: Name for logging context (e.g., "matches", "ranked")

    Returns:
        The list itself or ``[]`` for any other shape
    """
    if isinstance(payload, list):
        return payload
    if payload is not None:
        logger.warning(
            "Expected list payload, coercing to empty list",
            context=context_name,
            got_type=type(payload).__name__,
        )
    return []


def parse_list_items(
    items: List[Any], model: Type[ModelT], context_name: str = "item"
) -> List[ModelT]:
    """
    Validate each list element against ``model``, dropping invalid ones.

    Args:
        items: Raw list elements
        model: Pydantic model to validate against
        context_name: Name for logging context

    Returns:
        Validated models in their original order
    """
    parsed: List[ModelT] = []
    for i, item in enumerate(items):
        try:
            parsed.append(model.model_validate(item))
        except ValidationError as e:
            logger.warning(
                f"Dropping invalid {context_name}",
                index=i,
                error_count=e.error_count(),
            )
    return parsed


def is_empty_or_none(value: Any) -> bool:
    """
    Check if value is None or empty (empty string, list, dict, etc.).

    Args:
        value: Value to check

    Returns:
        True if value is None or empty, False otherwise
    """
    if value is None:
        return True
    if isinstance(value, (str, list, dict, set, tuple)):
        return len(value) == 0
    return False
