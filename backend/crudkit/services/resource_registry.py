"""Resource Registry — explicit routing segment -> model class mapping.

Invariants:
    - Every resource name maps to exactly one model class
    - Unknown names raise UnknownResourceError (404), never guessed from the string

Design Decisions:
    - Explicit dict over classifying the path segment into a class name at runtime
      (ADR: no convention-over-config; every mapping visible in one place)
"""

from collections.abc import Iterator
from dataclasses import dataclass

from crudkit.core.domain_types import ResourceName
from crudkit.core.errors import UnknownResourceError
from crudkit.db.base import Base
from crudkit.models.order import Order
from crudkit.models.user import User


@dataclass(frozen=True)
class ResourceType:
    """A routable resource: its path segment and its model."""
    name: ResourceName
    model: type[Base]

    @property
    def model_name(self) -> str:
        return self.model.model_name()

    @property
    def element(self) -> str:
        return self.model.element()


class ResourceRegistry:
    """Resource name -> ResourceType."""

    def __init__(self) -> None:
        self._resources: dict[str, ResourceType] = {}

    def register(self, name: str, model: type[Base]) -> ResourceType:
        if name in self._resources:
            raise ValueError(f"Resource '{name}' registered twice")
        resource = ResourceType(ResourceName(name), model)
        self._resources[name] = resource
        return resource

    def get(self, name: str) -> ResourceType:
        resource = self._resources.get(name)
        if resource is None:
            raise UnknownResourceError(name)
        return resource

    def __iter__(self) -> Iterator[ResourceType]:
        return iter(self._resources.values())

    def model_names(self) -> list[str]:
        return [r.model_name for r in self]


def build_resource_registry() -> ResourceRegistry:
    registry = ResourceRegistry()
    registry.register("users", User)
    registry.register("orders", Order)
    return registry
