"""Action Params — pure transforms from raw transport params to business input.

Invariants:
    - ROUTING_KEYS are never part of action params
    - Keys are normalized recursively to str (nested dicts and lists included)
    - The raw mapping is never mutated; a fresh dict is returned per call
    - shape_operation_input() enforces the operation's declared InputShape

Design Decisions:
    - Pure functions, no IO: record loading happens in the shell
      (services/input_extractor.py) and the loaded record is passed in
"""

from collections.abc import Mapping
from typing import Any

from crudkit.core.domain_types import (
    ROUTING_KEYS, NESTED_PARAMS_KEY, InputShape,
)
from crudkit.core.errors import InvalidInputError


def normalize_keys(value: Any) -> Any:
    """Deep-copy value with every mapping key coerced to str."""
    if isinstance(value, Mapping):
        return {str(k): normalize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_keys(v) for v in value]
    return value


def extract_action_params(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Strip routing keys and normalize the rest."""
    return {
        k: v for k, v in normalize_keys(raw).items()
        if k not in ROUTING_KEYS
    }


def shape_operation_input(
    params: dict[str, Any],
    record: Any,
    element: str | None,
    shape: InputShape,
    operation: str,
) -> dict[str, Any]:
    """Lay out operation keyword input for the declared shape.

    `params` must already have the id removed when `record` is given.
    """
    if shape is InputShape.PARAMS:
        return dict(params)

    if record is None:
        if shape is InputShape.AUTO:
            return dict(params)
        raise InvalidInputError(f"Operation '{operation}' requires an id")

    if shape is InputShape.RECORD and params:
        raise InvalidInputError(
            f"Operation '{operation}' does not accept parameters: "
            f"{', '.join(sorted(params))}",
        )

    shaped: dict[str, Any] = {}
    if params or shape is InputShape.RECORD_WITH_PARAMS:
        shaped[NESTED_PARAMS_KEY] = dict(params)
    shaped[element] = record
    return shaped
