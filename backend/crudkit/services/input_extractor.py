"""Input Extractor — raw request -> params, params -> operation input.

Invariants:
    - Raw params = query string, then JSON object body, then path id (later wins)
    - A body that is not valid JSON, or not a JSON object, raises InvalidInputError
    - derive_operation_input() loads the record only for shapes that need one

Design Decisions:
    - Record loading lives here (shell); the layout rules are pure
      (core/action_params.shape_operation_input)
"""

import json
from typing import Any

from fastapi import Request

from crudkit.core.action_params import shape_operation_input
from crudkit.core.domain_types import ID_PARAM, InputShape
from crudkit.core.errors import InvalidInputError
from crudkit.services.record_lookup import RecordLookup
from crudkit.services.resource_registry import ResourceType


async def read_raw_params(request: Request) -> dict[str, Any]:
    """Merge query params, JSON body and the path id into one mapping."""
    params: dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key.endswith("[]"):
            params.setdefault(key[:-2], []).append(value)
        else:
            params[key] = value

    body = await request.body()
    if body.strip():
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise InvalidInputError("Request body is not valid JSON") from None
        if not isinstance(payload, dict):
            raise InvalidInputError("Request body must be a JSON object")
        params.update(payload)

    if ID_PARAM in request.path_params:
        params[ID_PARAM] = request.path_params[ID_PARAM]
    return params


async def derive_operation_input(
    params: dict[str, Any],
    shape: InputShape,
    operation: str,
    lookup: RecordLookup,
    resource: ResourceType | None,
) -> dict[str, Any]:
    """Operation keyword input for the declared shape.

    Without a resource (no routing context) the params are passed flat.
    """
    params = dict(params)
    if shape is InputShape.PARAMS or resource is None:
        return params

    record = None
    record_id = params.pop(ID_PARAM, None)
    if record_id is not None:
        record = await lookup.find_by_id(resource, record_id)
    return shape_operation_input(params, record, resource.element, shape, operation)
