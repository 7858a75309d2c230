"""Request Context — everything resolved once per request and passed down explicitly.

Invariants:
    - Built once per request (FastAPI caches the dependency per request)
    - Immutable: actions receive copies of params, never mutate the context
    - resource is resolved from the routing segment before any action runs
"""

from dataclasses import dataclass, field
from typing import Any

from crudkit.core.domain_types import ID_PARAM, VIEW_PARAM, ViewType
from crudkit.core.action_params import extract_action_params
from crudkit.services.resource_registry import ResourceRegistry, ResourceType


@dataclass(frozen=True)
class RequestContext:
    resource: ResourceType
    params: dict[str, Any] = field(default_factory=dict)
    view: ViewType | None = None

    @property
    def record_id(self) -> Any | None:
        return self.params.get(ID_PARAM)

    def action_params(self) -> dict[str, Any]:
        """Fresh copy of the action params."""
        return dict(self.params)


def build_request_context(
    resource_name: str, raw_params: dict[str, Any], resources: ResourceRegistry,
) -> RequestContext:
    resource = resources.get(resource_name)
    view = raw_params.get(VIEW_PARAM)
    return RequestContext(
        resource=resource,
        params=extract_action_params(raw_params),
        view=ViewType(str(view)) if view else None,
    )
