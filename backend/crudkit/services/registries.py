"""Registries — the three explicit registries, built and cross-checked once.

Invariants:
    - build_registries() fails (PresenterNotFoundError) if any resource lacks a presenter
    - Every registered operation's resource is itself registered
"""

from dataclasses import dataclass

from crudkit.operations.registry import OperationRegistry, build_operation_registry
from crudkit.presenters.registry import PresenterRegistry, build_presenter_registry
from crudkit.services.resource_registry import ResourceRegistry, build_resource_registry


@dataclass(frozen=True)
class Registries:
    resources: ResourceRegistry
    presenters: PresenterRegistry
    operations: OperationRegistry

    def validate(self) -> None:
        self.presenters.validate_complete(self.resources.model_names())
        for name in self.operations.names():
            resource = self.operations.get(name).resource
            if resource is not None:
                self.resources.get(resource)


def build_registries() -> Registries:
    registries = Registries(
        resources=build_resource_registry(),
        presenters=build_presenter_registry(),
        operations=build_operation_registry(),
    )
    registries.validate()
    return registries
